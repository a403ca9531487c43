"""ConfigFileController: reads one config file and dispatches it to a loader by extension."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ts_config_loader.l1_entities.errors import UnsupportedExtensionError
from ts_config_loader.l2_use_cases.ports.loader import Loader

log = logging.getLogger('tsl.host')

TYPESCRIPT_EXTENSIONS = ('.ts', '.mts', '.cts')


@dataclass(frozen=True)
class LoadedConfig:
    """Result of loading one config file."""

    filepath: Path
    config: Any


def _load_json(path: str, content: str) -> Any:
    return json.loads(content)


def _load_yaml(path: str, content: str) -> Any:
    return yaml.safe_load(content)


def default_loaders(typescript_loader: Loader) -> dict[str, Loader]:
    """Extension → loader table with TypeScript, JSON and YAML registered."""
    loaders: dict[str, Loader] = {ext: typescript_loader for ext in TYPESCRIPT_EXTENSIONS}
    loaders['.json'] = _load_json
    loaders['.yaml'] = _load_yaml
    loaders['.yml'] = _load_yaml
    return loaders


class ConfigFileController:
    """Minimal config host: the caller names the file, the controller reads and loads it.

    Search and merging across several files are left to the caller.
    """

    def __init__(self, loaders: Mapping[str, Loader]) -> None:
        self._loaders = {ext.lower(): loader for ext, loader in loaders.items()}

    def load(self, path: str | Path) -> LoadedConfig:
        filepath = Path(path).resolve()
        loader = self._loaders.get(filepath.suffix.lower())
        if loader is None:
            kind = filepath.suffix or 'files without extension'
            raise UnsupportedExtensionError(f'No loader registered for {kind}: {filepath}')
        if not filepath.is_file():
            raise FileNotFoundError(f'Config file not found: {filepath}')
        content = filepath.read_text(encoding='utf-8')
        log.debug('Loading %s (%d chars)', filepath, len(content))
        return LoadedConfig(filepath=filepath, config=loader(str(filepath), content))

    async def load_async(self, path: str | Path) -> LoadedConfig:
        """Awaitable entry point; loading itself stays synchronous."""
        return self.load(path)

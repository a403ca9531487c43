"""Gateway: YAML settings loader for the loader's own compiler settings."""

from __future__ import annotations

from pathlib import Path

import yaml

from ts_config_loader.l3_interface_adapters.gateways.paths import DEFAULT_SETTINGS_PATHS


class YamlSettingsLoader:
    """Reads raw settings data from YAML with override support."""

    def load_raw(
        self,
        settings_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the ``loader:`` section merged with *overrides* (before Pydantic validation)."""
        data = _read_yaml(settings_path)
        section = data.get('loader') or {}
        if not isinstance(section, dict):
            raise ValueError(f"'loader' section must be a mapping, got {type(section).__name__}")
        if overrides:
            deep_merge(section, overrides)
        return section


def _read_yaml(settings_path: str | None) -> dict:
    if settings_path is not None:
        path = Path(settings_path)
        if not path.exists():
            raise FileNotFoundError(f'Settings file not found: {path}')
        return yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    for default_path in DEFAULT_SETTINGS_PATHS:
        if default_path.exists():
            return yaml.safe_load(default_path.read_text(encoding='utf-8')) or {}
    return {}


def deep_merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base

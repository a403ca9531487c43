"""Compiler settings defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from ts_config_loader.l1_entities.settings import CompilerSettings
from ts_config_loader.l3_interface_adapters.gateways.yaml_settings_loader import deep_merge

SETTINGS_DEFAULTS: dict = {
    'node_executable': 'node',
    'typescript': 'typescript',
    'cwd': None,
    'type_check': True,
    'compiler_options': {},
}


def build_settings(raw: dict) -> CompilerSettings:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(SETTINGS_DEFAULTS)
    deep_merge(merged, raw)
    return CompilerSettings.model_validate(merged)

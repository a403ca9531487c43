"""Shared path constants for user settings."""

from __future__ import annotations

from platformdirs import user_config_path

CONFIG_DIR = user_config_path('ts-config-loader')

DEFAULT_SETTINGS_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]

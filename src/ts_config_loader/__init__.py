"""ts-config-loader -- load TypeScript configuration files from Python."""

from ts_config_loader.l1_entities.errors import ThrownValue, TypeScriptCompileError
from ts_config_loader.l2_use_cases.typescript_loader import TypeScriptLoader
from ts_config_loader.l4_frameworks_and_drivers.container import typescript_loader

__version__ = '0.3.0'

__all__ = ['ThrownValue', 'TypeScriptCompileError', 'TypeScriptLoader', '__version__', 'typescript_loader']

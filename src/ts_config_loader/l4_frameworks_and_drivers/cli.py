"""CLI entry point for ts-config-loader."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from ts_config_loader import __version__
from ts_config_loader.l1_entities.errors import (
    ThrownValue,
    TypeScriptCompileError,
    UnsupportedExtensionError,
)


@click.command()
@click.argument('config_file', type=click.Path(dir_okay=False))
@click.option(
    '-s',
    '--settings',
    'settings_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML settings file (defaults to the user config dir).',
)
@click.option('--no-type-check', is_flag=True, default=False, help='Transpile only; skip type checking.')
@click.option(
    '--debug-log',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write debug logging to this file.',
)
@click.version_option(version=__version__)
def cli(config_file, settings_path, no_type_check, debug_log):
    """Load CONFIG_FILE (.ts, .json, .yaml) and print the resulting config as JSON."""
    import yaml  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help

    from ts_config_loader.l3_interface_adapters.gateways.yaml_settings_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlSettingsLoader,
    )
    from ts_config_loader.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )
    from ts_config_loader.l4_frameworks_and_drivers.settings_defaults import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_settings,
    )

    if debug_log:
        from ts_config_loader.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --debug-log
            setup_file_logging,
        )

        setup_file_logging(Path(debug_log))

    try:
        overrides: dict = {}
        if no_type_check:
            overrides['type_check'] = False
        raw = YamlSettingsLoader().load_raw(settings_path, overrides=overrides if overrides else None)
        settings = build_settings(raw)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    container = DependencyContainer(settings)
    try:
        loaded = container.controller.load(config_file)
    except (TypeScriptCompileError, FileNotFoundError, UnsupportedExtensionError, ValueError, yaml.YAMLError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    except ThrownValue as e:
        click.echo(f'Error: config threw a non-Error value: {e.value!r}', err=True)
        sys.exit(1)
    finally:
        container.close()

    click.echo(json.dumps(loaded.config, indent=2, ensure_ascii=False, default=str))

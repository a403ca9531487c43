"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from ts_config_loader.l1_entities.settings import CompilerSettings
from ts_config_loader.l2_use_cases.ports.compiler_service import CompilerService
from ts_config_loader.l2_use_cases.typescript_loader import ServiceFactory, TypeScriptLoader
from ts_config_loader.l3_interface_adapters.controllers.config_file_controller import (
    ConfigFileController,
    default_loaders,
)
from ts_config_loader.l3_interface_adapters.gateways.node_typescript_compiler import NodeTypeScriptCompiler


def node_compiler_factory(settings: CompilerSettings) -> ServiceFactory:
    """Factory that starts and registers a Node.js TypeScript compiler."""

    def factory() -> CompilerService:
        compiler = NodeTypeScriptCompiler(settings)
        compiler.register()
        return compiler

    return factory


def typescript_loader(
    settings: CompilerSettings | None = None,
    *,
    service_factory: ServiceFactory | None = None,
) -> TypeScriptLoader:
    """Create an independent loader with its own compiler service slot.

    Nothing is started here; the compiler service is built on the loader's
    first call.
    """
    if service_factory is None:
        service_factory = node_compiler_factory(settings or CompilerSettings())
    return TypeScriptLoader(service_factory)


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        settings: CompilerSettings | None = None,
        service_factory: ServiceFactory | None = None,
    ) -> None:
        self.settings = settings or CompilerSettings()
        self.loader = typescript_loader(self.settings, service_factory=service_factory)
        self.controller = ConfigFileController(default_loaders(self.loader))

    def close(self) -> None:
        self.loader.close()

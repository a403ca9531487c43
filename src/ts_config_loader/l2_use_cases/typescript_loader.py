"""Use case: load a TypeScript config through a lazily created compiler service."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from ts_config_loader.l1_entities.errors import TypeScriptCompileError
from ts_config_loader.l2_use_cases.ports.compiler_service import CompilerService

log = logging.getLogger('tsl.loader')

ServiceFactory = Callable[[], CompilerService]


class TypeScriptLoader:
    """Loader callable: ``loader(path, content) -> config``.

    The compiler service is built on the first call and reused for every later
    call of this instance. A failed build leaves the slot empty, so the next
    call tries again.
    """

    def __init__(self, service_factory: ServiceFactory) -> None:
        self._service_factory = service_factory
        self._service: CompilerService | None = None
        self._lock = threading.Lock()

    @property
    def service(self) -> CompilerService | None:
        return self._service

    def __call__(self, path: str, content: str) -> Any:
        try:
            service = self._get_or_create_service()
            log.debug('Compiling %s (%d chars)', path, len(content))
            return service.compile_and_execute(path, content)
        except Exception as e:
            log.debug('Load failed for %s: %s: %s', path, type(e).__name__, e)
            raise TypeScriptCompileError.from_error(e) from e

    def _get_or_create_service(self) -> CompilerService:
        service = self._service
        if service is not None:
            return service
        with self._lock:
            if self._service is None:
                log.info('Creating compiler service')
                self._service = self._service_factory()
            return self._service

    def close(self) -> None:
        with self._lock:
            service, self._service = self._service, None
        if service is not None:
            service.close()

    def __enter__(self) -> TypeScriptLoader:
        return self

    def __exit__(self, *args) -> None:
        self.close()

"""Port: compile-and-execute service for typed config sources."""

from __future__ import annotations

from typing import Any, Protocol


class CompilerService(Protocol):
    """Abstract compiler backend. Compiles source as the module at *path* and runs it."""

    def compile_and_execute(self, path: str, source: str) -> Any:
        """Return the module's primary export. Raises on compile or runtime failure."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...

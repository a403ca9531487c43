"""Port: config loader signature expected by a config host."""

from __future__ import annotations

from typing import Any, Protocol


class Loader(Protocol):
    """Turns raw file content into a config value. Synchronous, raises on failure."""

    def __call__(self, path: str, content: str) -> Any: ...

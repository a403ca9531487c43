"""Domain error types."""

from __future__ import annotations

from typing import Any

from ts_config_loader.l1_entities.diagnostic import Diagnostic

_UNABLE_TO_COMPILE = 'Unable to compile TypeScript:\n'


class TypeScriptCompileError(Exception):
    """Raised by a loader when a config file fails to compile or execute.

    ``name`` is the stable identifier hosts match on; ``cause`` is the
    original error the loader caught.
    """

    name = 'TypeScriptCompileError'

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    @classmethod
    def from_error(cls, error: BaseException) -> TypeScriptCompileError:
        detail = str(error).removeprefix(_UNABLE_TO_COMPILE)
        return cls(f'TypeScriptLoader failed to compile TypeScript:\n{detail}', cause=error)


class TypeScriptDiagnosticsError(Exception):
    """Raised when the compiler reports syntax or type diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic], message: str | None = None) -> None:
        if message is None:
            message = _UNABLE_TO_COMPILE + '\n'.join(d.format() for d in diagnostics)
        super().__init__(message)
        self.diagnostics = diagnostics


class ModuleExecutionError(Exception):
    """Raised when the compiled module throws a JavaScript Error while executing."""

    def __init__(self, message: str, js_name: str = 'Error', stack: str = '') -> None:
        super().__init__(f'{js_name}: {message}' if js_name else message)
        self.js_name = js_name
        self.stack = stack


class CompilerStartupError(RuntimeError):
    """Raised when the compiler runtime cannot be started."""


class ThrownValue(BaseException):  # noqa: N818 -- mirrors a JS `throw <value>`, not an error type
    """A non-Error value thrown by evaluated code (e.g. ``throw "oops"``).

    Derives from BaseException so ``except Exception`` does not classify it.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value


class UnsupportedExtensionError(ValueError):
    """Raised when no loader is registered for a config file's extension."""

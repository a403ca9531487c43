"""Gateway: TypeScript compiler in a Node.js subprocess — implements CompilerService port."""

from __future__ import annotations

import json
import logging
import os
import subprocess  # noqa: S404 -- intentional: fixed arg list, not shell=True
import threading
from pathlib import Path
from typing import Any

from ts_config_loader.l1_entities.diagnostic import Diagnostic
from ts_config_loader.l1_entities.errors import (
    CompilerStartupError,
    ModuleExecutionError,
    ThrownValue,
    TypeScriptDiagnosticsError,
)
from ts_config_loader.l1_entities.settings import CompilerSettings

log = logging.getLogger('tsl.compiler')

_WORKER = Path(__file__).parent.parent.parent / '_node' / 'ts_worker.js'


class NodeTypeScriptCompiler:
    """Compiles and runs TypeScript sources inside a long-lived Node.js worker.

    ``register()`` is the expensive step: it starts Node and loads the
    ``typescript`` package once. Every ``compile_and_execute`` call after that
    is a single JSON request/response over the worker's stdin/stdout.
    """

    def __init__(self, settings: CompilerSettings) -> None:
        self._settings = settings
        self._proc: subprocess.Popen | None = None
        self._lock = threading.Lock()
        self._next_id = 0
        self.version: str | None = None

    @property
    def registered(self) -> bool:
        return self._proc is not None and self._proc.poll() is None

    def register(self) -> None:
        if self.registered:
            raise RuntimeError('TypeScript compiler already registered')

        cwd = self._settings.cwd or os.getcwd()
        try:
            proc = subprocess.Popen(  # noqa: S603 -- fixed arg list, not shell=True
                [self._settings.node_executable, str(_WORKER)],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding='utf-8',
                bufsize=1,
                cwd=cwd,
            )
        except OSError as e:
            raise CompilerStartupError(f'Cannot start Node.js ({self._settings.node_executable}): {e}') from e

        handshake = {
            'cwd': cwd,
            'typescript': self._settings.typescript,
            'type_check': self._settings.type_check,
            'compiler_options': self._settings.compiler_options,
        }
        try:
            _send(proc, handshake)
            reply = _receive(proc)
        except (EOFError, OSError, ValueError) as e:
            _shutdown(proc)
            raise CompilerStartupError(f'TypeScript worker exited during startup (code {proc.returncode})') from e

        if reply.get('status') != 'ready':
            _shutdown(proc)
            raise CompilerStartupError(f'TypeScript worker failed to init: {reply.get("error", "unknown")}')

        self._proc = proc
        self.version = reply.get('version')
        log.info(
            'TypeScript worker started (pid=%d, typescript=%s, type_check=%s)',
            proc.pid,
            self.version,
            self._settings.type_check,
        )

    def compile_and_execute(self, path: str, source: str) -> Any:
        with self._lock:
            proc = self._proc
            if proc is None:
                raise RuntimeError(
                    'Compiler not registered. Call register() first, '
                    'or loader.close() to recover after the worker exited'
                )
            self._next_id += 1
            request = {'id': self._next_id, 'path': os.path.abspath(path), 'source': source}
            try:
                _send(proc, request)
                reply = _receive(proc)
            except (EOFError, OSError) as e:
                self._proc = None
                _shutdown(proc)
                raise RuntimeError(
                    f'TypeScript worker exited unexpectedly (code {proc.returncode}); '
                    'call loader.close() to start a fresh worker on the next load'
                ) from e
        return _unpack(reply)

    def close(self) -> None:
        with self._lock:
            proc, self._proc = self._proc, None
        if proc is not None:
            log.debug('closing TypeScript worker (pid=%d)', proc.pid)
            _shutdown(proc)


def _send(proc: subprocess.Popen, message: dict) -> None:
    if proc.stdin is None:  # pragma: no cover -- Popen always gets stdin=PIPE
        raise OSError('worker stdin is closed')
    proc.stdin.write(json.dumps(message) + '\n')
    proc.stdin.flush()


def _receive(proc: subprocess.Popen) -> dict:
    if proc.stdout is None:  # pragma: no cover -- Popen always gets stdout=PIPE
        raise EOFError
    line = proc.stdout.readline()
    if not line:
        raise EOFError
    return json.loads(line)


def _unpack(reply: dict) -> Any:
    status = reply.get('status')
    if status == 'ok':
        return reply.get('value')
    if status == 'diagnostics':
        diagnostics = [Diagnostic.model_validate(d) for d in reply.get('diagnostics', [])]
        raise TypeScriptDiagnosticsError(diagnostics, message=reply.get('message'))
    if status == 'error':
        raise ModuleExecutionError(
            reply.get('message', ''),
            js_name=reply.get('name', 'Error'),
            stack=reply.get('stack', ''),
        )
    if status == 'thrown':
        raise ThrownValue(reply.get('value'))
    raise RuntimeError(f'Unexpected reply from TypeScript worker: {status!r}')


def _shutdown(proc: subprocess.Popen) -> None:
    """Close stdin so the worker exits on its own; escalate if it does not."""
    try:
        if proc.stdin is not None:
            proc.stdin.close()
    except OSError:  # noqa: S110 -- best-effort; pipe may already be broken
        pass
    try:
        proc.wait(timeout=5)
    except subprocess.TimeoutExpired:
        proc.terminate()
        try:
            proc.wait(timeout=1)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
    if proc.stdout is not None:
        proc.stdout.close()

"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import shutil
import subprocess  # noqa: S404 -- probes the local node install with a fixed arg list
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / 'fixtures'

# --- Protocol-conforming Fakes ---


class FakeCompilerService:
    """Fake compiler service for L2/L3 tests. Returns canned values or raises."""

    def __init__(self, result: Any = None, error: BaseException | None = None) -> None:
        self._result = result
        self._error = error
        self.compile_calls: list[tuple[str, str]] = []
        self.close_calls: int = 0

    def compile_and_execute(self, path: str, source: str) -> Any:
        self.compile_calls.append((path, source))
        if self._error is not None:
            raise self._error
        return self._result

    def close(self) -> None:
        self.close_calls += 1

    def set_result(self, result: Any) -> None:
        self._result = result
        self._error = None

    def set_error(self, error: BaseException) -> None:
        self._error = error


class CountingFactory:
    """Service factory that records how many services it built."""

    def __init__(self, make: Callable[[], Any] | None = None) -> None:
        self._make = make or FakeCompilerService
        self.built: list[Any] = []

    def __call__(self) -> Any:
        service = self._make()
        self.built.append(service)
        return service

    @property
    def calls(self) -> int:
        return len(self.built)


# --- Standard Fixtures ---


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


def read_fixture(name: str) -> tuple[str, str]:
    path = FIXTURES_DIR / name
    return str(path), path.read_text(encoding='utf-8')


@pytest.fixture
def counting_factory() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def sample_settings_yaml(tmp_path: Path) -> Path:
    content = """\
loader:
  node_executable: "/usr/local/bin/node"
  type_check: false
  compiler_options:
    strict: true
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


def _typescript_available() -> bool:
    if shutil.which('node') is None:
        return False
    probe = subprocess.run(  # noqa: S603, S607 -- fixed arg list, not shell=True
        ['node', '-e', "require.resolve('typescript')"],
        capture_output=True,
        check=False,
    )
    return probe.returncode == 0


@pytest.fixture(scope='session')
def require_typescript() -> None:
    if not _typescript_available():
        pytest.skip('node and the typescript package are required for worker tests')


@pytest.fixture(scope='session')
def require_node() -> None:
    if shutil.which('node') is None:
        pytest.skip('node is required for worker script tests')

"""Compiler settings Pydantic model — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompilerSettings(BaseModel):
    node_executable: str = 'node'
    typescript: str = 'typescript'  # module id or path, resolved from cwd
    cwd: str | None = None  # None = current working directory
    type_check: bool = True
    compiler_options: dict = Field(default_factory=dict)  # merged over tsconfig.json; module is always CommonJS

"""Compiler diagnostic entity."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Diagnostic(BaseModel):
    """A single TypeScript compiler diagnostic."""

    code: int
    category: str = 'error'
    message: str
    file: str | None = None
    line: int | None = Field(default=None, description='1-based line number')
    column: int | None = Field(default=None, description='1-based column number')

    def format(self) -> str:
        """Render as ``file(line,col): category TScode: message``, like tsc."""
        location = ''
        if self.file is not None:
            location = self.file
            if self.line is not None:
                location += f'({self.line},{self.column or 1})'
            location += ': '
        return f'{location}{self.category} TS{self.code}: {self.message}'

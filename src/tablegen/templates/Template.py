from __future__ import annotations
from abc import ABC
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from .LinePart import has_marker

if TYPE_CHECKING:
    from ..codefiles.CodeFile import CodeFileBase


class TemplateBase(ABC):
    """An ordered list of raw template lines plus the file type they generate."""

    def __init__(self, lines: Iterable[str], file_type: str, name: Optional[str] = None):
        self.lines: list[str] = [line.rstrip("\r\n") for line in lines]
        self.file_type = file_type
        self.name = name or "<template>"

    @staticmethod
    def from_lines(lines: Iterable[str], file_type: str, name: Optional[str] = None) -> TemplateBase:
        lines = list(lines)
        if any(has_marker(line) for line in lines):
            return DynamicTemplate(lines, file_type, name)
        return StaticTemplate(lines, file_type, name)

    @staticmethod
    def load(path: str | Path, file_type: str) -> TemplateBase:
        path = Path(path)
        with path.open(encoding="utf-8") as fp:
            return TemplateBase.from_lines(fp.read().splitlines(), file_type, path.stem)

    def __len__(self) -> int:
        return len(self.lines)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}; {self.name} ({self.file_type}), {len(self.lines)} lines>"


class StaticTemplate(TemplateBase):
    def generate(self, code_file: CodeFileBase) -> CodeFileBase:
        for line in self.lines:
            code_file.add_verbatim(line)
        return code_file


class DynamicTemplate(TemplateBase):
    pass

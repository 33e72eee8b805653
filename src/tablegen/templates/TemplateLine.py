from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .LinePart import LinePart, has_marker, tokenize

if TYPE_CHECKING:
    from ..commands.CommandBase import CommandBase
    from ..interpreter.CommandInterpreter import CommandInterpreter


class TemplateLineBase(ABC):
    def __init__(self, line: str, interpreter: Optional[CommandInterpreter] = None):
        self.line = line
        self.interpreter = interpreter

    @abstractmethod
    def render(self) -> str: pass

    @staticmethod
    def create(line: str, interpreter: Optional[CommandInterpreter] = None) -> TemplateLineBase:
        if has_marker(line):
            return DynamicTemplateLine(line, interpreter)
        return StaticTemplateLine(line, interpreter)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}; {self.line!r}>"


class StaticTemplateLine(TemplateLineBase):
    def render(self) -> str:
        return self.line + "\n"

    def __str__(self) -> str:
        return self.line


class DynamicTemplateLine(TemplateLineBase):
    """
    A line with ``!@ ... @!`` spans.

    Each dynamic part is parsed into a command once, when the line is built;
    rendering executes those commands again for every table. The rendered line
    ends in a newline unless its last part is dynamic, so an expression can
    run on into the next template line.
    """

    def __init__(self, line: str, interpreter: CommandInterpreter):
        super().__init__(line, interpreter)
        self.parts: list[LinePart] = tokenize(line)
        self.commands: list[Optional[CommandBase]] = [
            interpreter.parse_expression(part.text) if part.is_dynamic else None
            for part in self.parts
        ]

    def render(self) -> str:
        rendered = []
        # the last thing written is a static part's trailing space
        spaced = False
        for part, command in zip(self.parts, self.commands):
            if command is None:
                text = part.pad(part.text)
                if spaced and part.space_before:
                    text = text[1:]
                rendered.append(text)
                spaced = part.space_after
                continue
            command.execute()
            text = command.render()
            if text:
                text = part.pad(text)
                if spaced and part.space_before:
                    text = text[1:]
                rendered.append(text)
                spaced = False
        if not self.parts[-1].is_dynamic:
            rendered.append("\n")
        return "".join(rendered)

    def __str__(self) -> str:
        return "".join(part.pad(str(part)) for part in self.parts)

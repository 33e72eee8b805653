from __future__ import annotations
from typing import Optional, Sequence

from .CommandBase import CommandBase, command
from ..interpreter.Literal import CommandParameter
from ..parser.CommandParser import CommandParserBase, FallbackParser, NullParser
from ..templates.TemplateLine import TemplateLineBase


@command("null")
class NullCommand(CommandBase):
    """A blank template line; it only ends the current output line."""

    def get_parser(self) -> CommandParserBase:
        return NullParser(self)

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return True

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return []

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        pass

    def execute(self) -> None:
        self.code_file.write_text("\n")


@command("template-line")
class TemplateLineCommand(CommandBase):
    """Any other template line, taken as written: render it and hand it to the code file."""

    template_line: Optional[TemplateLineBase] = None

    def get_parser(self) -> CommandParserBase:
        return FallbackParser(self, strip=False)

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return len(parts) == 1 and bool(parts[0])

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return [CommandParameter.string(parts[0])]

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        self.template_line = TemplateLineBase.create(parameters[0].get_result(), self.interpreter)

    def execute(self) -> None:
        self.code_file.write_text(self.template_line.render())

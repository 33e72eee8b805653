from __future__ import annotations
from typing import ClassVar, Optional, Sequence

from .CommandBase import CommandBase, command
from ..interpreter.Literal import CommandParameter, VariableKind, is_identifier
from ..parser.CommandParser import CommandParserBase, PrefixParser


class VariableDeclarationCommand(CommandBase):
    """``<type> <name>`` declares ``name`` in the current scope with the type's zero value."""

    prefix: ClassVar[str]
    kind: ClassVar[VariableKind]

    variable_name: Optional[str] = None
    variable_parameter: Optional[CommandParameter] = None

    def get_parser(self) -> CommandParserBase:
        return PrefixParser(self, self.prefix)

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return parts is not None and len(parts) == 1 and is_identifier(parts[0])

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return [CommandParameter.variable_name(parts[0])]

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        self.variable_parameter = parameters[0]
        self.variable_name = parameters[0].get_result()

    def execute(self) -> None:
        self.LOGGER.debug(f"Declaring {self.kind.value} {self.variable_name}")
        self.interpreter.set_variable(self.variable_name, self.kind, self.kind.zero())


@command("int-declaration")
class IntegerVariableDeclarationCommand(VariableDeclarationCommand):
    prefix = "int "
    kind = VariableKind.INT


@command("bool-declaration")
class BoolVariableDeclarationCommand(VariableDeclarationCommand):
    prefix = "bool "
    kind = VariableKind.BOOL


@command("string-declaration")
class StringVariableDeclarationCommand(VariableDeclarationCommand):
    prefix = "string "
    kind = VariableKind.STRING


@command("double-declaration")
class DoubleVariableDeclarationCommand(VariableDeclarationCommand):
    prefix = "double "
    kind = VariableKind.DOUBLE

from __future__ import annotations
from typing import Optional, Sequence

from .CommandBase import CommandBase, ResultCommand, command
from ..interpreter.Literal import CommandParameter, Value, VariableKind, is_identifier
from ..parser.CommandParser import (
    BoolParser, CommandParserBase, DoubleParser, FallbackParser, InfixParser,
    IntegerParser, ParserChain, PrefixParser, StringLiteralParser,
)
from ..exceptions import *


class _AssignmentSyntax:
    """``name = value`` once the ``=`` has been split off."""

    values = ParserChain.value_chain()

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return (
            parts is not None
            and len(parts) == 2
            and is_identifier(parts[0])
            and self.values.can_parse(parts[1])
        )

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return [CommandParameter.variable_name(parts[0]), *self.values.parse(parts[1])]


_ASSIGNMENT = _AssignmentSyntax()


@command("assignment")
class AssignmentCommand(CommandBase):
    """
    ``name = value`` in the current scope.

    An existing variable keeps its kind and only receives the new value. An
    unknown name is created in the current frame with the kind of the value.
    A value that names another variable is dereferenced when the command runs.
    """

    variable_name: Optional[str] = None
    value_parameter: Optional[CommandParameter] = None

    def get_parser(self) -> CommandParserBase:
        return InfixParser(self, "=")

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return _ASSIGNMENT.can_parse_internal(parts)

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return _ASSIGNMENT.parse_internal(parts)

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        self.variable_name = parameters[0].get_result()
        self.value_parameter = parameters[1]

    def resolve_value(self) -> Value:
        if not self.value_parameter.is_variable_name:
            return self.value_parameter.get_result()
        name = self.value_parameter.get_result()
        value = self.interpreter.get_variable_value(name)
        if value is None:
            self.LOGGER.error(f"Cannot read undefined variable '{name}'")
            raise UnknownVariableError(f"Variable '{name}' is not defined")
        return value

    def execute(self) -> None:
        value = self.resolve_value()
        if self.interpreter.has_variable(self.variable_name):
            self.interpreter.set_variable(self.variable_name, value)
        else:
            self.interpreter.set_variable(self.variable_name, VariableKind.of(value), value)


@command("global-assignment")
class GlobalAssignmentCommand(AssignmentCommand):
    """``global name = value``, always against the global frame."""

    _assignment = InfixParser(_ASSIGNMENT, "=")

    def get_parser(self) -> CommandParserBase:
        return PrefixParser(self, "global ")

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return parts is not None and len(parts) == 1 and self._assignment.can_parse(parts[0])

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return self._assignment.parse(parts[0])

    def execute(self) -> None:
        value = self.resolve_value()
        if self.interpreter.get_global_variable(self.variable_name) is not None:
            self.interpreter.set_global_variable(self.variable_name, value)
        else:
            self.interpreter.set_global_variable(self.variable_name, VariableKind.of(value), value)


@command("literal")
class LiteralCommand(ResultCommand):
    literals = ParserChain([IntegerParser(), DoubleParser(), BoolParser(), StringLiteralParser()])

    literal: Optional[CommandParameter] = None

    def get_parser(self) -> CommandParserBase:
        return FallbackParser(self)

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return len(parts) == 1 and self.literals.can_parse(parts[0])

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return self.literals.parse(parts[0])

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        self.literal = parameters[0]

    @property
    def result(self) -> Value:
        return self.literal.get_result()


@command("variable")
class VariableCommand(ResultCommand):
    """A bare variable name; evaluates to the variable's current value."""

    name: Optional[str] = None

    def get_parser(self) -> CommandParserBase:
        return FallbackParser(self)

    def can_parse_internal(self, parts: Sequence[str]) -> bool:
        return len(parts) == 1 and is_identifier(parts[0])

    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return [CommandParameter.variable_name(parts[0])]

    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None:
        self.name = parameters[0].get_result()

    def get(self) -> Optional[Value]:
        return self.interpreter.get_variable_value(self.name)

    @property
    def result(self) -> Value:
        value = self.get()
        if value is None:
            self.LOGGER.error(f"Cannot read undefined variable '{self.name}'")
            raise UnknownVariableError(f"Variable '{self.name}' is not defined")
        return value


@command("global-variable")
class GlobalVariableCommand(VariableCommand):
    """``global name`` reads the global frame, skipping any local shadow."""

    def get_parser(self) -> CommandParserBase:
        return PrefixParser(self, "global ")

    def get(self) -> Optional[Value]:
        return self.interpreter.get_global_variable_value(self.name)

import pytest

from tablegen.commands import (
    AssignmentCommand, BoolVariableDeclarationCommand, CommandBase, DoubleVariableDeclarationCommand,
    GlobalAssignmentCommand, GlobalVariableCommand, IntegerVariableDeclarationCommand, LiteralCommand,
    StringVariableDeclarationCommand, VariableCommand,
)
from tablegen.exceptions import (
    NotRegisteredException, UnknownCommandError, UnknownVariableError, VariableTypeError,
)
from tablegen.interpreter.CommandInterpreter import CommandInterpreter
from tablegen.interpreter.Literal import VariableKind


@pytest.fixture
def interpreter() -> CommandInterpreter:
    return CommandInterpreter()


# --------------------------------------------------------------------------- #
def test_int_declaration(interpreter):
    cmd = interpreter.parse_expression("int x")
    assert isinstance(cmd, IntegerVariableDeclarationCommand)
    assert cmd.variable_name == "x"

    cmd.execute()
    assert interpreter.get_variable_value("x") == 0
    assert interpreter.get_variable("x").kind is VariableKind.INT


@pytest.mark.parametrize("expression, command_type, zero", [
    ("bool flag", BoolVariableDeclarationCommand, False),
    ("string name", StringVariableDeclarationCommand, ""),
    ("double ratio", DoubleVariableDeclarationCommand, 0.0),
])
def test_other_declarations(interpreter, expression, command_type, zero):
    cmd = interpreter.parse_expression(expression)
    assert isinstance(cmd, command_type)
    cmd.execute()
    assert interpreter.get_variable_value(cmd.variable_name) == zero


def test_parsing_has_no_side_effects(interpreter):
    interpreter.parse_expression("int q")
    interpreter.parse_expression("q = 3")
    assert not interpreter.has_variable("q")


def test_parsing_is_repeatable(interpreter):
    first = interpreter.parse_expression("x = 5")
    second = interpreter.parse_expression("x = 5")
    assert type(first) is type(second)
    assert first.parameters == second.parameters


# --------------------------------------------------------------------------- #
def test_assignment_creates_and_updates(interpreter):
    assert isinstance(interpreter.parse_expression("x = 5"), AssignmentCommand)

    assert interpreter.execute("x = 5") == ""
    assert interpreter.get_variable("x").kind is VariableKind.INT
    assert interpreter.execute("x") == "5"

    interpreter.execute("x = -2")
    assert interpreter.execute("x") == "-2"

    with pytest.raises(VariableTypeError):
        interpreter.execute("x = 2.5")


def test_assignment_dereferences_variable_names(interpreter):
    interpreter.execute("x = 5")
    interpreter.execute("y = x")
    assert interpreter.get_variable_value("y") == 5

    with pytest.raises(UnknownVariableError):
        interpreter.execute("z = missing")


def test_assignment_to_declared_variable_keeps_its_kind(interpreter):
    interpreter.execute("double d")
    interpreter.execute("d = 3")
    assert interpreter.get_variable_value("d") == 3.0
    assert interpreter.execute("d") == "3.0"


def test_literals(interpreter):
    assert isinstance(interpreter.parse_expression('"hello"'), LiteralCommand)
    assert interpreter.execute('"hello"') == "hello"
    assert interpreter.execute('"a=b"') == "a=b"
    assert interpreter.execute("42") == "42"
    assert interpreter.execute("3.50") == "3.5"
    assert interpreter.execute("TRUE") == "true"


def test_variables(interpreter):
    cmd = interpreter.parse_expression("Total")
    assert isinstance(cmd, VariableCommand)
    with pytest.raises(UnknownVariableError):
        cmd.render()

    interpreter.set_variable("Total", "string", "12")
    assert cmd.render() == "12"
    interpreter.set_variable("Total", "13")
    assert cmd.render() == "13"


# --------------------------------------------------------------------------- #
def test_global_commands_skip_local_shadows(interpreter):
    interpreter.set_global_variable("Count", "int", 1)
    interpreter.create_stack_frame()

    interpreter.execute("int Count")
    interpreter.execute("Count = 7")
    assert isinstance(interpreter.parse_expression("global Count"), GlobalVariableCommand)
    assert interpreter.execute("global Count") == "1"
    assert interpreter.execute("Count") == "7"

    assert isinstance(interpreter.parse_expression("global Count = 3"), GlobalAssignmentCommand)
    interpreter.execute("global Count = 3")
    assert interpreter.get_global_variable_value("Count") == 3
    assert interpreter.execute("Count") == "7"

    interpreter.execute('global Schema = "dbo"')
    interpreter.destroy_stack_frame()
    assert interpreter.get_variable_value("Schema") == "dbo"


def test_unknown_expression(interpreter):
    with pytest.raises(UnknownCommandError):
        interpreter.parse_expression("x +")


def test_command_registry():
    assert CommandBase.get_registered("int-declaration") is IntegerVariableDeclarationCommand
    assert CommandBase.get_registered("global-assignment") is GlobalAssignmentCommand
    with pytest.raises(NotRegisteredException):
        CommandBase.get_registered("while")

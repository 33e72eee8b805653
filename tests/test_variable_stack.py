import pytest

from tablegen.exceptions import (
    ScopeUnderflowError, UnknownVariableError, UnknownVariableKindError, VariableTypeError,
)
from tablegen.interpreter.Literal import VariableKind
from tablegen.interpreter.Variable import Variable, VariableStack


# --------------------------------------------------------------------------- #
def test_kindless_write_to_undeclared_variable_fails():
    stack = VariableStack()
    with pytest.raises(UnknownVariableError):
        stack.set_variable("y", 5)
    assert not stack.has_variable("y")


def test_frame_locals_do_not_leak_after_pop():
    stack = VariableStack()
    stack.create_stack_frame()
    stack.set_variable("z", "int", 1)
    assert stack.get_variable_value("z") == 1

    stack.destroy_stack_frame()
    assert stack.get_variable_value("z") is None
    assert not stack.has_variable("z")


def test_global_frame_cannot_be_destroyed():
    stack = VariableStack()
    with pytest.raises(ScopeUnderflowError):
        stack.destroy_stack_frame()

    stack.create_stack_frame()
    stack.destroy_stack_frame()
    with pytest.raises(ScopeUnderflowError):
        stack.destroy_stack_frame()


def test_stack_frame_context_pops_on_error():
    stack = VariableStack()
    with pytest.raises(RuntimeError):
        with stack.stack_frame():
            assert stack.depth == 2
            raise RuntimeError("boom")
    assert stack.depth == 1


# --------------------------------------------------------------------------- #
def test_scoped_reads_fall_back_to_global():
    stack = VariableStack()
    stack.set_global_variable("TableName", VariableKind.STRING, "Orders")

    with stack.stack_frame():
        assert stack.has_variable("TableName")
        assert stack.get_variable_value("TableName") == "Orders"

        # kind-less write updates the variable where it lives
        stack.set_variable("TableName", "Items")
        assert "TableName" not in stack.current_frame

    assert stack.get_global_variable_value("TableName") == "Items"


def test_local_declaration_shadows_global():
    stack = VariableStack()
    stack.set_global_variable("x", "int", 5)

    with stack.stack_frame():
        stack.set_variable("x", "int", 1)
        assert stack.get_variable_value("x") == 1
        assert stack.get_global_variable_value("x") == 5

    assert stack.get_variable_value("x") == 5


def test_global_kindless_write_requires_existing_global():
    stack = VariableStack()
    with stack.stack_frame():
        stack.set_variable("local", "int", 1)
        with pytest.raises(UnknownVariableError):
            stack.set_global_variable("local", 2)


# --------------------------------------------------------------------------- #
def test_variable_kind_is_fixed_at_creation():
    stack = VariableStack()
    stack.set_variable("x", "int", 1)
    with pytest.raises(VariableTypeError):
        stack.set_variable("x", "hello")
    with pytest.raises(VariableTypeError):
        stack.set_variable("x", True)
    assert stack.get_variable_value("x") == 1


def test_double_variables_widen_integers():
    variable = Variable("d", "double", 3)
    assert variable.value == 3.0
    assert isinstance(variable.value, float)


def test_new_variables_hold_their_zero_value():
    assert Variable("i", VariableKind.INT).value == 0
    assert Variable("d", VariableKind.DOUBLE).value == 0.0
    assert Variable("s", VariableKind.STRING).value == ""
    assert Variable("b", VariableKind.BOOL).value is False


def test_kind_names():
    assert VariableKind.from_name("Boolean") is VariableKind.BOOL
    assert VariableKind.from_name(" INT ") is VariableKind.INT
    with pytest.raises(UnknownVariableKindError):
        VariableKind.from_name("decimal")

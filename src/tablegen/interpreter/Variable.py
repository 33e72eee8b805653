from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional

from loguru import logger

from .Literal import Value, VariableKind, format_value
from ..exceptions import *

_MISSING = object()


class Variable:
    """A named storage cell whose kind is fixed at creation."""

    def __init__(self, name: str, kind: VariableKind | str, value: Value | None = None):
        self.name = name
        self.kind = VariableKind.from_name(kind)
        self._value: Value = self.kind.zero()
        if value is not None:
            self.value = value

    @property
    def value(self) -> Value:
        return self._value

    @value.setter
    def value(self, value: Value) -> None:
        if not self.kind.accepts(value):
            logger.error(f"Variable '{self.name}' is {self.kind.value}, cannot store {value!r}")
            raise VariableTypeError(f"Variable '{self.name}' is {self.kind.value}, cannot store {value!r}")
        self._value = float(value) if self.kind is VariableKind.DOUBLE else value

    def __repr__(self) -> str:
        return f"<Variable; {self.kind.value} {self.name} = {format_value(self._value)}>"


class VariableStackFrame:
    def __init__(self):
        self._variables: dict[str, Variable] = {}

    def set_variable(self, name: str, kind: VariableKind | str, value: Value) -> Variable:
        variable = self._variables.get(name)
        if variable is None:
            variable = Variable(name, kind)
            self._variables[name] = variable
        variable.value = value
        return variable

    def set_existing(self, name: str, value: Value) -> Variable:
        variable = self._variables.get(name)
        if variable is None:
            raise UnknownVariableError(f"Variable '{name}' is not defined")
        variable.value = value
        return variable

    def get_variable(self, name: str) -> Optional[Variable]:
        return self._variables.get(name)

    def get_variable_value(self, name: str) -> Optional[Value]:
        variable = self._variables.get(name)
        return None if variable is None else variable.value

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    def __contains__(self, name: str) -> bool:
        return self.has_variable(name)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"<VariableStackFrame; {', '.join(self._variables) or 'empty'}>"


class VariableStack:
    """
    The global frame plus a stack of nested frames.

    The global frame is the bottom of the stack and is never popped, so the
    current frame is the global frame until a local frame is pushed.

    Scoped reads and kind-less scoped writes look in the current frame first
    and fall back to the global frame. Scoped writes that carry a kind always
    land in the current frame. Global operations only ever touch the global
    frame.
    """

    LOGGER: logger = logger

    def __init__(self):
        self._global = VariableStackFrame()
        self._frames: list[VariableStackFrame] = [self._global]

    # ------------------------------------------------------------------ #
    # FRAMES
    # ------------------------------------------------------------------ #
    @property
    def global_frame(self) -> VariableStackFrame:
        return self._global

    @property
    def current_frame(self) -> VariableStackFrame:
        return self._frames[-1]

    @property
    def depth(self) -> int:
        return len(self._frames)

    def create_stack_frame(self) -> VariableStackFrame:
        frame = VariableStackFrame()
        self._frames.append(frame)
        return frame

    def destroy_stack_frame(self) -> None:
        if len(self._frames) == 1:
            self.LOGGER.error("Attempted to destroy the global stack frame")
            raise ScopeUnderflowError("Cannot destroy the global stack frame")
        self._frames.pop()

    @contextmanager
    def stack_frame(self) -> Iterator[VariableStackFrame]:
        frame = self.create_stack_frame()
        try:
            yield frame
        finally:
            self.destroy_stack_frame()

    # ------------------------------------------------------------------ #
    # GLOBAL
    # ------------------------------------------------------------------ #
    def set_global_variable(self, name: str, kind: VariableKind | str | object = _MISSING, value: Value = _MISSING) -> Variable:
        if value is _MISSING:
            if kind is _MISSING:
                raise TypeError("set_global_variable() needs a value")
            return self._set_existing(self._global, name, kind)
        return self._global.set_variable(name, kind, value)

    def get_global_variable(self, name: str) -> Optional[Variable]:
        return self._global.get_variable(name)

    def get_global_variable_value(self, name: str) -> Optional[Value]:
        return self._global.get_variable_value(name)

    # ------------------------------------------------------------------ #
    # SCOPED
    # ------------------------------------------------------------------ #
    def set_variable(self, name: str, kind: VariableKind | str | object = _MISSING, value: Value = _MISSING) -> Variable:
        """
        ``set_variable(name, kind, value)`` creates or overwrites ``name`` in
        the current frame. ``set_variable(name, value)`` overwrites an existing
        variable, found through the usual lookup, and raises
        ``UnknownVariableError`` if there is none.
        """
        if value is _MISSING:
            if kind is _MISSING:
                raise TypeError("set_variable() needs a value")
            frame = self._owning_frame(name) or self.current_frame
            return self._set_existing(frame, name, kind)
        return self.current_frame.set_variable(name, kind, value)

    def get_variable(self, name: str) -> Optional[Variable]:
        frame = self._owning_frame(name)
        return None if frame is None else frame.get_variable(name)

    def get_variable_value(self, name: str) -> Optional[Value]:
        variable = self.get_variable(name)
        return None if variable is None else variable.value

    def has_variable(self, name: str) -> bool:
        return self._owning_frame(name) is not None

    # ------------------------------------------------------------------ #
    # INTERNALS
    # ------------------------------------------------------------------ #
    def _owning_frame(self, name: str) -> Optional[VariableStackFrame]:
        if name in self.current_frame:
            return self.current_frame
        if name in self._global:
            return self._global
        return None

    def _set_existing(self, frame: VariableStackFrame, name: str, value: Value) -> Variable:
        try:
            return frame.set_existing(name, value)
        except UnknownVariableError:
            self.LOGGER.error(f"Cannot assign to undefined variable '{name}'")
            raise

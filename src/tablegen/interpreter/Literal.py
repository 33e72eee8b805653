from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union
import re

from loguru import logger

from ..exceptions import *

Value = Union[int, float, bool, str]

_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_DOUBLE_RE = re.compile(r"^\s*[+-]?(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_integer_text(text: str) -> bool:
    return "." not in text and bool(_INTEGER_RE.match(text))

def is_double_text(text: str) -> bool:
    return "." in text and bool(_DOUBLE_RE.match(text))

def is_bool_text(text: str) -> bool:
    return text.strip().lower() in ("true", "false")

def is_identifier(text: str) -> bool:
    return bool(_IDENTIFIER_RE.match(text))


def format_value(value: Value) -> str:
    """Render a stored value the way it appears in generated output."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class VariableKind(Enum):
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    BOOL = "bool"

    @classmethod
    def from_name(cls, name: str | VariableKind) -> VariableKind:
        if isinstance(name, VariableKind):
            return name
        key = name.strip().lower()
        if key == "boolean":
            key = "bool"
        for kind in cls:
            if kind.value == key:
                return kind
        logger.error(f"Variable type '{name}' not found")
        raise UnknownVariableKindError(f"Variable type '{name}' not found")

    @classmethod
    def of(cls, value: Value) -> VariableKind:
        # bool first, it is a subclass of int
        if isinstance(value, bool):
            return cls.BOOL
        if isinstance(value, int):
            return cls.INT
        if isinstance(value, float):
            return cls.DOUBLE
        if isinstance(value, str):
            return cls.STRING
        raise VariableTypeError(f"No variable kind holds a value of type {type(value).__name__}")

    def zero(self) -> Value:
        match self:
            case VariableKind.INT:
                return 0
            case VariableKind.DOUBLE:
                return 0.0
            case VariableKind.STRING:
                return ""
            case VariableKind.BOOL:
                return False

    def accepts(self, value: Value) -> bool:
        match self:
            case VariableKind.INT:
                return isinstance(value, int) and not isinstance(value, bool)
            case VariableKind.DOUBLE:
                return isinstance(value, (int, float)) and not isinstance(value, bool)
            case VariableKind.STRING:
                return isinstance(value, str)
            case VariableKind.BOOL:
                return isinstance(value, bool)


class ParameterKind(Enum):
    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"
    VARIABLE_NAME = "variable-name"


@dataclass(frozen=True)
class CommandParameter:
    """
    A parsed, typed command parameter.

    Literals carry their value; a ``VARIABLE_NAME`` parameter carries the name
    of a variable, which the consuming command resolves against the variable
    stack when it needs a value.
    """
    kind: ParameterKind
    value: Value

    @classmethod
    def integer(cls, text: str | int) -> CommandParameter:
        return cls(ParameterKind.INT, int(text))

    @classmethod
    def double(cls, text: str | float) -> CommandParameter:
        return cls(ParameterKind.DOUBLE, float(text))

    @classmethod
    def boolean(cls, text: str | bool) -> CommandParameter:
        if isinstance(text, bool):
            return cls(ParameterKind.BOOL, text)
        if not is_bool_text(text):
            raise ValueError(f"'{text}' is not a boolean literal")
        return cls(ParameterKind.BOOL, text.strip().lower() == "true")

    @classmethod
    def string(cls, text: str) -> CommandParameter:
        return cls(ParameterKind.STRING, text)

    @classmethod
    def variable_name(cls, text: str) -> CommandParameter:
        return cls(ParameterKind.VARIABLE_NAME, text.strip())

    @property
    def is_variable_name(self) -> bool:
        return self.kind is ParameterKind.VARIABLE_NAME

    def get_result(self) -> Value:
        match self.kind:
            case ParameterKind.INT | ParameterKind.DOUBLE | ParameterKind.BOOL | ParameterKind.STRING:
                return self.value
            case ParameterKind.VARIABLE_NAME:
                return self.value

    def variable_kind(self) -> VariableKind:
        match self.kind:
            case ParameterKind.INT:
                return VariableKind.INT
            case ParameterKind.DOUBLE:
                return VariableKind.DOUBLE
            case ParameterKind.BOOL:
                return VariableKind.BOOL
            case ParameterKind.STRING:
                return VariableKind.STRING
            case ParameterKind.VARIABLE_NAME:
                raise VariableTypeError(f"Parameter '{self.value}' names a variable, its kind is not known until it is resolved")

    def __str__(self) -> str:
        match self.kind:
            case ParameterKind.STRING:
                return f'"{self.value}"'
            case ParameterKind.VARIABLE_NAME:
                return str(self.value)
            case _:
                return format_value(self.value)

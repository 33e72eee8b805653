from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence, Type

from loguru import logger

from ..interpreter.Literal import CommandParameter, Value, format_value
from ..parser.CommandParser import CommandParserBase
from ..exceptions import *

if TYPE_CHECKING:
    from ..codefiles.CodeFile import CodeFileBase
    from ..interpreter.CommandInterpreter import CommandInterpreter


def command(identifier: str):
    def decorator(cls: Type[CommandBase]):
        cls.id = identifier
        CommandBase._register_command(cls)
        return cls
    return decorator


class CommandBase(ABC):
    """
    One executable unit parsed from a template line or a dynamic expression.

    A command owns the parser that recognises it. `can_parse` answers whether
    a line is this command at all, `parse` binds the parameters through
    `assign_parameters`, and `execute` applies the command's effect to the
    interpreter's variable stack and/or its active code file. Parameters are
    not touched again once bound.
    """

    # Class-level fields
    id: ClassVar[str]

    # Class-level internals
    _registry: ClassVar[dict[str, Type[CommandBase]]] = {}

    LOGGER: logger = logger

    def __init__(self, interpreter: CommandInterpreter):
        self.interpreter = interpreter
        self.command_parser: CommandParserBase = self.get_parser()
        self._parameters: tuple[CommandParameter, ...] = ()

    @classmethod
    def _register_command(cls, command_: Type[CommandBase]):
        if command_.id in cls._registry: raise AlreadyRegisteredException(command_.id)
        cls._registry[command_.id] = command_

    @classmethod
    def is_registered(cls, identifier: str) -> bool:
        return identifier in cls._registry

    @classmethod
    def get_registered(cls, identifier: str) -> Type[CommandBase]:
        if not cls.is_registered(identifier): raise NotRegisteredException(identifier)
        return cls._registry[identifier]

    @property
    def code_file(self) -> Optional[CodeFileBase]:
        return self.interpreter.code_file

    @property
    def parameters(self) -> tuple[CommandParameter, ...]:
        return self._parameters

    def can_parse(self, line: str) -> bool:
        return self.command_parser.can_parse(line)

    def parse(self, line: str) -> CommandBase:
        parameters = self.command_parser.parse(line)
        self.assign_parameters(parameters)
        self._parameters = tuple(parameters)
        return self

    def render(self) -> str:
        return ""

    @abstractmethod
    def get_parser(self) -> CommandParserBase: pass

    @abstractmethod
    def can_parse_internal(self, parts: Sequence[str]) -> bool: pass

    @abstractmethod
    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]: pass

    @abstractmethod
    def assign_parameters(self, parameters: Sequence[CommandParameter]) -> None: pass

    @abstractmethod
    def execute(self) -> None: pass

    def __repr__(self) -> str:
        params = ", ".join(str(p) for p in self._parameters)
        return f"<{self.__class__.__name__}; {params}>"


class ResultCommand(CommandBase):
    """A command that produces a value, rendered into the output where it appears."""

    @property
    @abstractmethod
    def result(self) -> Value: pass

    def execute(self) -> None:
        pass

    def render(self) -> str:
        return format_value(self.result)

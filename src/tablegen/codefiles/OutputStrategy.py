from __future__ import annotations
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Type

from loguru import logger

from ..exceptions import *

if TYPE_CHECKING:
    from .CodeFile import CodeFileBase


def output_strategy(identifier: str):
    def decorator(cls: Type[OutputStrategyBase]):
        cls.id = identifier
        OutputStrategyBase._register_strategy(cls)
        return cls
    return decorator


class OutputStrategyBase(ABC):
    """Where a finished code file goes: console, log, a string, or disk."""

    # Class-level fields
    id: ClassVar[str]

    # Class-level internals
    _registry: ClassVar[dict[str, Type[OutputStrategyBase]]] = {}

    LOGGER: logger = logger

    @classmethod
    def _register_strategy(cls, strategy_: Type[OutputStrategyBase]):
        if strategy_.id in cls._registry: raise AlreadyRegisteredException(strategy_.id)
        cls._registry[strategy_.id] = strategy_

    @classmethod
    def strategy_types(cls) -> list[str]:
        return list(cls._registry)

    @classmethod
    def create(cls, identifier: str) -> OutputStrategyBase:
        key = identifier.lower()
        if key not in cls._registry:
            cls.LOGGER.error(f"Output strategy type '{identifier}' not found")
            raise NotRegisteredException(f"Output strategy type '{identifier}' not found")
        return cls._registry[key]()

    @abstractmethod
    def exists(self, code_file: CodeFileBase) -> bool: pass

    @abstractmethod
    def write(self, code_file: CodeFileBase) -> None: pass

    @abstractmethod
    def contents(self, code_file: CodeFileBase) -> str: pass


class NoInputStrategyBase(OutputStrategyBase):
    def exists(self, code_file: CodeFileBase) -> bool:
        return False

    def contents(self, code_file: CodeFileBase) -> str:
        return ""


@output_strategy("console")
class ConsoleOutputStrategy(NoInputStrategyBase):
    def write(self, code_file: CodeFileBase) -> None:
        for line in code_file.lines:
            print(line)


@output_strategy("log")
class LogOutputStrategy(NoInputStrategyBase):
    def write(self, code_file: CodeFileBase) -> None:
        for line in code_file.lines:
            self.LOGGER.debug(line)


@output_strategy("string")
class StringOutputStrategy(NoInputStrategyBase):
    def __init__(self):
        self.output = ""

    def write(self, code_file: CodeFileBase) -> None:
        self.output = code_file.get_text()

    def contents(self, code_file: CodeFileBase) -> str:
        return self.output


@output_strategy("file")
class FileOutputStrategy(OutputStrategyBase):
    def exists(self, code_file: CodeFileBase) -> bool:
        return code_file.full_filename.is_file()

    def contents(self, code_file: CodeFileBase) -> str:
        if not self.exists(code_file):
            return ""
        return code_file.full_filename.read_text(encoding="utf-8")

    def write(self, code_file: CodeFileBase) -> None:
        target: Path = code_file.full_filename
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(str(target), "w", encoding="utf-8") as fh:
            fh.write(code_file.get_text())
        self.LOGGER.info(f"Wrote {target}")

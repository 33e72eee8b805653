from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Type

from loguru import logger

from ..exceptions import *

if TYPE_CHECKING:
    from .CodeFile import CodeFileBase


def overwrite_strategy(identifier: str):
    def decorator(cls: Type[OverwriteStrategyBase]):
        cls.id = identifier
        OverwriteStrategyBase._register_strategy(cls)
        return cls
    return decorator


class OverwriteStrategyBase(ABC):
    # Class-level fields
    id: ClassVar[str]

    # Class-level internals
    _registry: ClassVar[dict[str, Type[OverwriteStrategyBase]]] = {}

    LOGGER: logger = logger

    @classmethod
    def _register_strategy(cls, strategy_: Type[OverwriteStrategyBase]):
        if strategy_.id in cls._registry: raise AlreadyRegisteredException(strategy_.id)
        cls._registry[strategy_.id] = strategy_

    @classmethod
    def strategy_types(cls) -> list[str]:
        return list(cls._registry)

    @classmethod
    def create(cls, identifier: str) -> OverwriteStrategyBase:
        key = identifier.lower()
        if key not in cls._registry:
            cls.LOGGER.error(f"Overwrite strategy type '{identifier}' not found")
            raise NotRegisteredException(f"Overwrite strategy type '{identifier}' not found")
        return cls._registry[key]()

    @abstractmethod
    def write(self, code_file: CodeFileBase) -> bool:
        """Write `code_file` if the policy allows it; return whether it was written."""


@overwrite_strategy("always")
class AlwaysOverwriteStrategy(OverwriteStrategyBase):
    def write(self, code_file: CodeFileBase) -> bool:
        code_file.write()
        return True


@overwrite_strategy("create-only")
class CreateIfNotExistsStrategy(OverwriteStrategyBase):
    def write(self, code_file: CodeFileBase) -> bool:
        if code_file.exists():
            self.LOGGER.info(f"Keeping existing {code_file.full_filename}")
            return False
        code_file.write()
        return True

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Type

from ..exceptions import *


def match_rule(identifier: str, label: str):
    def decorator(cls: Type[StringMatchRule]):
        cls.id = identifier
        cls.label = label
        StringMatchRule._register_rule(cls)
        return cls
    return decorator


@dataclass(frozen=True)
class StringMatchRule(ABC):
    # Class-level fields
    id: ClassVar[str]
    label: ClassVar[str]

    # Instance-level fields
    comparison_value: str
    case_sensitive: bool = False

    # Class-level internals
    _registry: ClassVar[dict[str, Type[StringMatchRule]]] = {}

    @classmethod
    def _register_rule(cls, rule_: Type[StringMatchRule]):
        if rule_.id in cls._registry: raise AlreadyRegisteredException(rule_.id)
        cls._registry[rule_.id] = rule_

    @classmethod
    def is_registered(cls, identifier: str) -> bool:
        return identifier.lower() in cls._registry

    @classmethod
    def get_registered(cls, identifier: str) -> Type[StringMatchRule]:
        if not cls.is_registered(identifier): raise NotRegisteredException(identifier)
        return cls._registry[identifier.lower()]

    @classmethod
    def create(cls, identifier: str, comparison_value: str, case_sensitive: bool = False) -> StringMatchRule:
        return cls.get_registered(identifier)(comparison_value, case_sensitive)

    def fits(self, line: str) -> bool:
        if self.case_sensitive:
            return self._compare(line, self.comparison_value)
        return self._compare(line.casefold(), self.comparison_value.casefold())

    @abstractmethod
    def _compare(self, line: str, value: str) -> bool: pass

    def __str__(self) -> str:
        return f"{self.label}({self.comparison_value})"


@match_rule("prefix", "Prefix")
@dataclass(frozen=True)
class PrefixMatchRule(StringMatchRule):
    def _compare(self, line: str, value: str) -> bool:
        return line.startswith(value)


@match_rule("postfix", "Postfix")
@dataclass(frozen=True)
class PostfixMatchRule(StringMatchRule):
    def _compare(self, line: str, value: str) -> bool:
        return line.endswith(value)


@match_rule("infix", "Infix")
@dataclass(frozen=True)
class InfixMatchRule(StringMatchRule):
    def _compare(self, line: str, value: str) -> bool:
        return value in line


@match_rule("equals", "Equals")
@dataclass(frozen=True)
class EqualsMatchRule(StringMatchRule):
    def _compare(self, line: str, value: str) -> bool:
        return line == value

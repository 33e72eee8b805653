from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from ..matching.StringMatchRule import StringMatchRule

if TYPE_CHECKING:
    from .CodeFile import IndentableCodeFile


class IndentAction(Enum):
    PRE_INDENT = "pre-indent"
    POST_INDENT = "post-indent"
    PRE_DEINDENT = "pre-deindent"
    POST_DEINDENT = "post-deindent"
    TEMPORARY_INDENT = "temporary-indent"
    TEMPORARY_DEINDENT = "temporary-deindent"

    @property
    def label(self) -> str:
        return {
            IndentAction.PRE_INDENT: "PreIndent",
            IndentAction.POST_INDENT: "PostIndent",
            IndentAction.PRE_DEINDENT: "PreDeIndent",
            IndentAction.POST_DEINDENT: "PostDeIndent",
            IndentAction.TEMPORARY_INDENT: "TempIndent",
            IndentAction.TEMPORARY_DEINDENT: "TempDeIndent",
        }[self]


@dataclass(frozen=True)
class IndentRule:
    """A match rule guarding the indent change applied around one line."""

    match: StringMatchRule
    action: IndentAction

    def fits(self, line: str) -> bool:
        return self.match.fits(line)

    def apply(self, code_file: IndentableCodeFile, line: str) -> None:
        match self.action:
            case IndentAction.PRE_INDENT:
                code_file.indent()
                code_file.add_indented(line)
            case IndentAction.POST_INDENT:
                code_file.add_indented(line)
                code_file.indent()
            case IndentAction.PRE_DEINDENT:
                code_file.deindent()
                code_file.add_indented(line)
            case IndentAction.POST_DEINDENT:
                code_file.add_indented(line)
                code_file.deindent()
            case IndentAction.TEMPORARY_INDENT:
                code_file.indent()
                code_file.add_indented(line)
                code_file.deindent()
            case IndentAction.TEMPORARY_DEINDENT:
                code_file.deindent()
                code_file.add_indented(line)
                code_file.indent()

    def __str__(self) -> str:
        return f"{self.action.label} {self.match}"


MatchKind = Literal["prefix", "postfix", "infix", "equals"]


class IndentRuleConfig(BaseModel):
    """The serialisable form of an `IndentRule`."""

    match: MatchKind
    value: str
    action: IndentAction
    case_sensitive: bool = False

    def to_rule(self) -> IndentRule:
        return IndentRule(StringMatchRule.create(self.match, self.value, self.case_sensitive), self.action)

    @classmethod
    def from_rule(cls, rule: IndentRule) -> IndentRuleConfig:
        return cls(
            match=rule.match.id,
            value=rule.match.comparison_value,
            action=rule.action,
            case_sensitive=rule.match.case_sensitive,
        )


class IndentRuleSet(BaseModel):
    indent_amount: int = Field(4, ge=0)
    rules: list[IndentRuleConfig] = Field(default_factory=list)

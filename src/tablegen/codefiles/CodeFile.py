from __future__ import annotations
from pathlib import Path
from typing import ClassVar, Iterable, Optional, Type

from loguru import logger

from .IndentRule import IndentAction, IndentRule, IndentRuleConfig, IndentRuleSet
from .OutputStrategy import OutputStrategyBase
from .OverwriteStrategy import OverwriteStrategyBase
from ..matching.StringMatchRule import EqualsMatchRule, PostfixMatchRule, PrefixMatchRule
from ..exceptions import *


def code_file(identifier: str):
    def decorator(cls: Type[CodeFileBase]):
        cls.id = identifier
        CodeFileBase._register_code_file(cls)
        return cls
    return decorator


class CodeFileBase:
    """
    The line buffer one rendering pass writes into.

    Rendered template output arrives through `write_text`, which may hold a
    partial line until the next newline (or `flush`). Complete lines go
    through `add_line`. Persisting the buffer is left to the output strategy.
    """

    # Class-level fields
    id: ClassVar[str]
    default_extension: ClassVar[str] = "txt"

    # Class-level internals
    _registry: ClassVar[dict[str, Type[CodeFileBase]]] = {}

    LOGGER: logger = logger

    def __init__(
        self,
        filename: str = "output",
        path: str | Path = "",
        root_path: str | Path = ".",
        extension: Optional[str] = None,
        output_strategy: str | OutputStrategyBase = "string",
        overwrite_strategy: str | OverwriteStrategyBase = "always",
    ):
        self.filename = filename
        self.path = Path(path)
        self.root_path = Path(root_path)
        self.extension = extension or self.default_extension
        self.output_strategy = (
            OutputStrategyBase.create(output_strategy) if isinstance(output_strategy, str) else output_strategy
        )
        self.overwrite_strategy = (
            OverwriteStrategyBase.create(overwrite_strategy) if isinstance(overwrite_strategy, str) else overwrite_strategy
        )
        self.lines: list[str] = []
        self._pending = ""

    # ------------------------------------------------------------------ #
    # REGISTRY
    # ------------------------------------------------------------------ #
    @classmethod
    def _register_code_file(cls, code_file_: Type[CodeFileBase]):
        if code_file_.id in cls._registry: raise AlreadyRegisteredException(code_file_.id)
        cls._registry[code_file_.id] = code_file_

    @classmethod
    def file_types(cls) -> list[str]:
        return list(cls._registry)

    @classmethod
    def get_registered(cls, file_type: str) -> Type[CodeFileBase]:
        key = file_type.lower()
        if key not in cls._registry:
            cls.LOGGER.error(f"Code file type '{file_type}' not found")
            raise NotRegisteredException(f"Code file type '{file_type}' not found")
        return cls._registry[key]

    @classmethod
    def create(cls, file_type: str, **options) -> CodeFileBase:
        return cls.get_registered(file_type)(**options)

    # ------------------------------------------------------------------ #
    # LINES
    # ------------------------------------------------------------------ #
    @property
    def full_filename(self) -> Path:
        return self.root_path / self.path / f"{self.filename}.{self.extension}"

    def add_line(self, line: str) -> None:
        self.lines.append(line)

    def add_verbatim(self, line: str) -> None:
        self.lines.append(line)

    def write_text(self, text: str) -> None:
        self._pending += text
        while "\n" in self._pending:
            line, self._pending = self._pending.split("\n", 1)
            self.add_line(line)

    def flush(self) -> None:
        if self._pending:
            line, self._pending = self._pending, ""
            self.add_line(line)

    def get_text(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    # ------------------------------------------------------------------ #
    # OUTPUT
    # ------------------------------------------------------------------ #
    def contents(self) -> str:
        return self.output_strategy.contents(self)

    def exists(self) -> bool:
        return self.output_strategy.exists(self)

    def write(self) -> None:
        self.output_strategy.write(self)

    def write_using_overwrite_strategy(self) -> bool:
        return self.overwrite_strategy.write(self)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}; {self.full_filename}, {len(self.lines)} lines>"


class IndentableCodeFile(CodeFileBase):
    """
    A code file that works out each line's indentation itself.

    Incoming text is trimmed and checked against the rules in order; the first
    rule that fits moves the indent level around the line, otherwise the line
    is written at the current level. Blank lines skip the rules.
    """

    DEFAULT_INDENT_AMOUNT: ClassVar[int] = 4

    def __init__(self, *args, indent_amount: Optional[int] = None, rules: Optional[Iterable[IndentRule]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.indent_amount = self.DEFAULT_INDENT_AMOUNT if indent_amount is None else indent_amount
        self.indent_level = 0
        self.rules: list[IndentRule] = list(self.default_rules() if rules is None else rules)

    @classmethod
    def default_rules(cls) -> list[IndentRule]:
        return []

    def add_rule(self, rule: IndentRule) -> None:
        self.rules.append(rule)

    def indent(self) -> None:
        self.indent_level += 1

    def deindent(self) -> None:
        if self.indent_level == 0:
            self.LOGGER.error(f"Indent level of {self.filename} would drop below zero")
            raise IndentUnderflowError(f"Indent level of {self.filename} would drop below zero")
        self.indent_level -= 1

    def add_line(self, line: str) -> None:
        if not line or not line.strip():
            self.lines.append(line)
            return

        text = line.strip()
        for rule in self.rules:
            if rule.fits(text):
                rule.apply(self, text)
                return
        self.add_indented(text)

    def add_indented(self, text: str) -> None:
        self.lines.append(" " * (self.indent_amount * self.indent_level) + text)

    def load_rules_from_file(self, filename: str | Path) -> None:
        rule_set = IndentRuleSet.model_validate_json(Path(filename).read_text(encoding="utf-8"))
        self.indent_amount = rule_set.indent_amount
        self.rules = [rule.to_rule() for rule in rule_set.rules]

    def save_rules_to_file(self, filename: str | Path) -> None:
        rule_set = IndentRuleSet(
            indent_amount=self.indent_amount,
            rules=[IndentRuleConfig.from_rule(rule) for rule in self.rules],
        )
        with open(str(filename), "w", encoding="utf-8") as fh:
            fh.write(rule_set.model_dump_json(indent=2))


@code_file("text")
class TextCodeFile(CodeFileBase):
    default_extension = "txt"


@code_file("sql")
class SQLCodeFile(IndentableCodeFile):
    default_extension = "sql"

    @classmethod
    def default_rules(cls) -> list[IndentRule]:
        return [
            IndentRule(EqualsMatchRule("ELSE"), IndentAction.TEMPORARY_DEINDENT),
            IndentRule(PostfixMatchRule("BEGIN"), IndentAction.POST_INDENT),
            IndentRule(PrefixMatchRule("END"), IndentAction.PRE_DEINDENT),
            IndentRule(PostfixMatchRule("("), IndentAction.POST_INDENT),
            IndentRule(PrefixMatchRule(")"), IndentAction.PRE_DEINDENT),
        ]


@code_file("csharp")
class CSharpCodeFile(IndentableCodeFile):
    default_extension = "cs"

    @classmethod
    def default_rules(cls) -> list[IndentRule]:
        return [
            IndentRule(PrefixMatchRule("} else"), IndentAction.TEMPORARY_DEINDENT),
            IndentRule(PostfixMatchRule("{"), IndentAction.POST_INDENT),
            IndentRule(PrefixMatchRule("}"), IndentAction.PRE_DEINDENT),
        ]

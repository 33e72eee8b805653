from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Protocol, Sequence

from loguru import logger

from ..interpreter.Literal import (
    CommandParameter, is_bool_text, is_double_text, is_identifier, is_integer_text,
)
from ..matching.StringMatchRule import InfixMatchRule, PostfixMatchRule, PrefixMatchRule
from ..exceptions import *


class InternalParsable(Protocol):
    """What a structural parser forwards the interesting part of a line to."""

    def can_parse_internal(self, parts: Sequence[str]) -> bool: ...
    def parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]: ...


class CommandParserBase(ABC):
    LOGGER: logger = logger

    def __init__(self, parsable: Optional[InternalParsable] = None):
        self.parsable = parsable

    @abstractmethod
    def can_parse(self, line: str) -> bool: pass

    def parse(self, line: str) -> list[CommandParameter]:
        if not self.can_parse(line):
            self.LOGGER.error(f"{self} cannot parse '{line}'")
            raise ParseMismatchError(f"{self} cannot parse '{line}'")
        return self._parse(line)

    @abstractmethod
    def _parse(self, line: str) -> list[CommandParameter]: pass

    def _can_parse_internal(self, parts: Sequence[str]) -> bool:
        return self.parsable is not None and self.parsable.can_parse_internal(parts)

    def _parse_internal(self, parts: Sequence[str]) -> list[CommandParameter]:
        return self.parsable.parse_internal(parts)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class NullParser(CommandParserBase):
    def can_parse(self, line: str) -> bool:
        return not line or not line.strip()

    def _parse(self, line: str) -> list[CommandParameter]:
        return []


class PrefixParser(CommandParserBase):
    def __init__(self, parsable: InternalParsable, prefix: str):
        super().__init__(parsable)
        self.prefix = prefix
        self._rule = PrefixMatchRule(prefix, case_sensitive=True)

    def _without_token(self, line: str) -> str:
        return line.strip()[len(self.prefix):].strip()

    def can_parse(self, line: str) -> bool:
        if not line or not self._rule.fits(line.strip()):
            return False
        return self._can_parse_internal([self._without_token(line)])

    def _parse(self, line: str) -> list[CommandParameter]:
        return self._parse_internal([self._without_token(line)])

    def __repr__(self) -> str:
        return f"<PrefixParser {self.prefix!r}>"


class InfixParser(CommandParserBase):
    def __init__(self, parsable: InternalParsable, infix: str):
        super().__init__(parsable)
        self.infix = infix
        self._rule = InfixMatchRule(infix, case_sensitive=True)

    def _line_parts(self, line: str) -> list[str]:
        return [part.strip() for part in line.strip().split(self.infix) if part]

    def can_parse(self, line: str) -> bool:
        if not line or not self._rule.fits(line):
            return False
        return self._can_parse_internal(self._line_parts(line))

    def _parse(self, line: str) -> list[CommandParameter]:
        return self._parse_internal(self._line_parts(line))

    def __repr__(self) -> str:
        return f"<InfixParser {self.infix!r}>"


class SurroundParser(CommandParserBase):
    def __init__(self, parsable: Optional[InternalParsable], prefix: str, suffix: str):
        super().__init__(parsable)
        self.prefix = prefix
        self.suffix = suffix
        self._prefix_rule = PrefixMatchRule(prefix, case_sensitive=True)
        self._suffix_rule = PostfixMatchRule(suffix, case_sensitive=True)

    def _surrounds(self, line: str) -> bool:
        return (
            len(line) >= len(self.prefix) + len(self.suffix)
            and self._prefix_rule.fits(line)
            and self._suffix_rule.fits(line)
        )

    def _without_tokens(self, line: str) -> str:
        line = line.strip()
        return line[len(self.prefix):len(line) - len(self.suffix)].strip()

    def can_parse(self, line: str) -> bool:
        if not line or not self._surrounds(line.strip()):
            return False
        content = self._without_tokens(line)
        if not content:
            return False
        return self._can_parse_internal([content])

    def _parse(self, line: str) -> list[CommandParameter]:
        return self._parse_internal([self._without_tokens(line)])

    def __repr__(self) -> str:
        return f"<SurroundParser {self.prefix!r} {self.suffix!r}>"


class StringLiteralParser(SurroundParser):
    """``"..."`` as a string literal; unlike its base the content may be empty."""

    QUOTE = '"'

    def __init__(self):
        super().__init__(None, self.QUOTE, self.QUOTE)

    def can_parse(self, line: str) -> bool:
        return bool(line) and self._surrounds(line.strip())

    def _parse(self, line: str) -> list[CommandParameter]:
        line = line.strip()
        return [CommandParameter.string(line[len(self.prefix):len(line) - len(self.suffix)])]


class IntegerParser(CommandParserBase):
    def can_parse(self, line: str) -> bool:
        return bool(line) and is_integer_text(line)

    def _parse(self, line: str) -> list[CommandParameter]:
        return [CommandParameter.integer(line)]


class DoubleParser(CommandParserBase):
    def can_parse(self, line: str) -> bool:
        return bool(line) and is_double_text(line)

    def _parse(self, line: str) -> list[CommandParameter]:
        return [CommandParameter.double(line)]


class BoolParser(CommandParserBase):
    def can_parse(self, line: str) -> bool:
        return bool(line) and is_bool_text(line)

    def _parse(self, line: str) -> list[CommandParameter]:
        return [CommandParameter.boolean(line)]


class FallbackParser(CommandParserBase):
    """Any non-empty line. ``strip=False`` forwards it exactly as written."""

    def __init__(self, parsable: Optional[InternalParsable] = None, strip: bool = True):
        super().__init__(parsable)
        self.strip = strip

    def _forwarded(self, line: str) -> list[str]:
        return [line.strip() if self.strip else line]

    def can_parse(self, line: str) -> bool:
        if not line:
            return False
        return self._can_parse_internal(self._forwarded(line))

    def _parse(self, line: str) -> list[CommandParameter]:
        return self._parse_internal(self._forwarded(line))


class VariableNameParser(CommandParserBase):
    """Last resort of a value chain: a bare identifier names a variable."""

    def can_parse(self, line: str) -> bool:
        return bool(line) and is_identifier(line.strip())

    def _parse(self, line: str) -> list[CommandParameter]:
        return [CommandParameter.variable_name(line)]


class ParserChain(CommandParserBase):
    """Ordered parsers; the first one whose `can_parse` accepts the line wins."""

    def __init__(self, parsers: Iterable[CommandParserBase]):
        super().__init__()
        self.parsers: tuple[CommandParserBase, ...] = tuple(parsers)

    @classmethod
    def value_chain(cls) -> ParserChain:
        return cls([IntegerParser(), DoubleParser(), BoolParser(), StringLiteralParser(), VariableNameParser()])

    def select(self, line: str) -> Optional[CommandParserBase]:
        for parser in self.parsers:
            if parser.can_parse(line):
                return parser
        return None

    def can_parse(self, line: str) -> bool:
        return self.select(line) is not None

    def _parse(self, line: str) -> list[CommandParameter]:
        return self.select(line)._parse(line)

    def __repr__(self) -> str:
        return f"<ParserChain {', '.join(repr(p) for p in self.parsers)}>"

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from ..exceptions import *

DYNAMIC_PREFIX = "!@"
DYNAMIC_SUFFIX = "@!"


class LinePartKind(Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class LinePart:
    kind: LinePartKind
    text: str
    # whitespace trimmed away next to a dynamic span; rendered back as one space
    space_before: bool = field(default=False, compare=False)
    space_after: bool = field(default=False, compare=False)

    @classmethod
    def static(cls, text: str, space_before: bool = False, space_after: bool = False) -> LinePart:
        return cls(LinePartKind.STATIC, text, space_before, space_after)

    @classmethod
    def dynamic(cls, text: str, space_before: bool = False) -> LinePart:
        return cls(LinePartKind.DYNAMIC, text, space_before)

    @property
    def is_dynamic(self) -> bool:
        return self.kind is LinePartKind.DYNAMIC

    def pad(self, rendered: str) -> str:
        return f"{' ' if self.space_before else ''}{rendered}{' ' if self.space_after else ''}"

    def __str__(self) -> str:
        if self.is_dynamic:
            return f"{DYNAMIC_PREFIX}{self.text}{DYNAMIC_SUFFIX}"
        return self.text


def has_marker(line: str) -> bool:
    """Any marker at all, paired or not. Such lines go through `tokenize`."""
    return bool(line) and (DYNAMIC_PREFIX in line or DYNAMIC_SUFFIX in line)


def _unterminated(line: str, reason: str) -> UnterminatedMarkerError:
    logger.error(f"{reason} in template line '{line}'")
    return UnterminatedMarkerError(f"{reason} in template line '{line}'")


def tokenize(line: str) -> list[LinePart]:
    """
    Split a template line into static and dynamic parts, left to right.

    Text in front of each ``!@ ... @!`` span becomes a trimmed static part
    (dropped when blank), the span itself a dynamic part with the markers
    removed. Whatever follows the last span is the final static part. A line
    without any marker is a single static part holding the line untouched.
    """
    if DYNAMIC_PREFIX not in line and DYNAMIC_SUFFIX not in line:
        return [LinePart.static(line)]

    parts: list[LinePart] = []
    rest = line
    while rest:
        start = rest.find(DYNAMIC_PREFIX)
        close = rest.find(DYNAMIC_SUFFIX)

        if start < 0:
            if close >= 0:
                raise _unterminated(line, f"'{DYNAMIC_SUFFIX}' without '{DYNAMIC_PREFIX}'")
            text = rest.strip()
            if text:
                parts.append(LinePart.static(text, space_before=bool(parts) and rest[0].isspace()))
            break

        if 0 <= close < start:
            raise _unterminated(line, f"'{DYNAMIC_SUFFIX}' without '{DYNAMIC_PREFIX}'")

        end = rest.find(DYNAMIC_SUFFIX, start + len(DYNAMIC_PREFIX))
        if end < 0:
            raise _unterminated(line, f"Unterminated '{DYNAMIC_PREFIX}'")

        expression = rest[start + len(DYNAMIC_PREFIX):end]
        if DYNAMIC_PREFIX in expression:
            raise _unterminated(line, f"Nested '{DYNAMIC_PREFIX}'")
        if not expression.strip():
            raise _unterminated(line, "Empty dynamic expression")

        before = rest[:start]
        gap = False
        if before.strip():
            parts.append(LinePart.static(
                before.strip(),
                space_before=bool(parts) and before[0].isspace(),
                space_after=before[-1].isspace(),
            ))
        elif before and parts:
            gap = True
        parts.append(LinePart.dynamic(expression.strip(), space_before=gap))

        rest = rest[end + len(DYNAMIC_SUFFIX):]

    return parts

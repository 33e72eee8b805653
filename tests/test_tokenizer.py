import pytest

from tablegen.exceptions import UnterminatedMarkerError
from tablegen.templates.LinePart import LinePart, has_marker, tokenize


# --------------------------------------------------------------------------- #
def test_single_dynamic_part():
    assert tokenize("!@TableName@!") == [LinePart.dynamic("TableName")]


def test_static_parts_are_trimmed_around_dynamic_spans():
    parts = tokenize("class !@TableName@! {")
    assert parts == [LinePart.static("class"), LinePart.dynamic("TableName"), LinePart.static("{")]

    # the trimmed whitespace is remembered so rendering keeps the words apart
    assert parts[0].space_after
    assert parts[2].space_before


def test_expression_whitespace_is_dropped():
    assert tokenize("!@  x = 5  @!") == [LinePart.dynamic("x = 5")]


def test_adjacent_dynamic_parts():
    assert tokenize("!@a@!!@b@!") == [LinePart.dynamic("a"), LinePart.dynamic("b")]


def test_line_without_markers_is_one_untouched_static_part():
    assert tokenize("    plain  text ") == [LinePart.static("    plain  text ")]


def test_marker_detection():
    assert has_marker("x !@y@!")
    assert not has_marker("plain text")
    assert has_marker("x @!y!@")
    assert not has_marker("")


# --------------------------------------------------------------------------- #
@pytest.mark.parametrize("line", [
    "x !@ y",             # never closed
    "a @! b",             # closed, never opened
    "a @! b !@ c @!",     # close before the first open
    "!@ a !@ b @!",       # nested
    "!@   @!",            # empty expression
])
def test_malformed_markers(line):
    with pytest.raises(UnterminatedMarkerError):
        tokenize(line)

import pytest

from tablegen.exceptions import ParseMismatchError
from tablegen.interpreter.Literal import CommandParameter, ParameterKind
from tablegen.parser.CommandParser import (
    BoolParser, DoubleParser, FallbackParser, InfixParser, IntegerParser, NullParser,
    ParserChain, PrefixParser, StringLiteralParser, SurroundParser,
)


class _Collect:
    """Accepts anything and hands the parts back as string parameters."""

    def can_parse_internal(self, parts):
        return True

    def parse_internal(self, parts):
        return [CommandParameter.string(part) for part in parts]


# --------------------------------------------------------------------------- #
@pytest.mark.parametrize("text", ["42", "-7", " +3 ", "0"])
def test_integers_are_never_doubles(text):
    assert IntegerParser().can_parse(text)
    assert not DoubleParser().can_parse(text)


@pytest.mark.parametrize("text", ["4.2", "-0.5", ".5", "1.0e3"])
def test_doubles_are_never_integers(text):
    assert DoubleParser().can_parse(text)
    assert not IntegerParser().can_parse(text)


def test_literal_parsers():
    assert IntegerParser().parse("42") == [CommandParameter(ParameterKind.INT, 42)]
    assert DoubleParser().parse("2.50") == [CommandParameter(ParameterKind.DOUBLE, 2.5)]
    assert BoolParser().parse("TRUE") == [CommandParameter(ParameterKind.BOOL, True)]
    assert not BoolParser().can_parse("yes")


def test_string_literal_may_be_empty():
    parser = StringLiteralParser()
    assert parser.parse('""') == [CommandParameter.string("")]
    assert parser.parse('"a b"') == [CommandParameter.string("a b")]
    assert not parser.can_parse('"')
    assert not parser.can_parse("abc")


def test_parse_rejects_what_can_parse_rejects():
    with pytest.raises(ParseMismatchError):
        IntegerParser().parse("abc")


# --------------------------------------------------------------------------- #
def test_prefix_parser():
    parser = PrefixParser(_Collect(), "int ")
    assert parser.parse("  int   x ") == [CommandParameter.string("x")]
    assert not parser.can_parse("integer x")
    assert not parser.can_parse("")


def test_infix_parser_splits_and_trims():
    parser = InfixParser(_Collect(), "=")
    assert parser.parse(" a = 5 ") == [CommandParameter.string("a"), CommandParameter.string("5")]
    assert not parser.can_parse("a 5")


def test_surround_parser_needs_content():
    parser = SurroundParser(_Collect(), "(", ")")
    assert parser.parse("( x )") == [CommandParameter.string("x")]
    assert not parser.can_parse("()")
    assert not parser.can_parse("(x")


def test_null_and_fallback_parsers():
    assert NullParser().can_parse("")
    assert NullParser().can_parse("   ")
    assert not NullParser().can_parse("x")

    fallback = FallbackParser(_Collect())
    assert fallback.parse("  hi  ") == [CommandParameter.string("hi")]
    assert not fallback.can_parse("")


# --------------------------------------------------------------------------- #
def test_value_chain_first_match_wins():
    chain = ParserChain.value_chain()
    assert chain.parse("3") == [CommandParameter(ParameterKind.INT, 3)]
    assert chain.parse("3.5") == [CommandParameter(ParameterKind.DOUBLE, 3.5)]
    assert chain.parse("false") == [CommandParameter(ParameterKind.BOOL, False)]
    assert chain.parse('"3"') == [CommandParameter.string("3")]

    name = chain.parse("Total")[0]
    assert name.is_variable_name
    assert name.get_result() == "Total"

    assert isinstance(chain.select("1"), IntegerParser)
    assert chain.select("not a name") is None


def test_fallback_parser_can_keep_the_line_as_written():
    parser = FallbackParser(_Collect(), strip=False)
    assert parser.parse("    return 1 ") == [CommandParameter.string("    return 1 ")]

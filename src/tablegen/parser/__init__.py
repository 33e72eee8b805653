from .CommandParser import (
    BoolParser, CommandParserBase, DoubleParser, FallbackParser, InfixParser,
    IntegerParser, NullParser, ParserChain, PrefixParser, StringLiteralParser,
    SurroundParser, VariableNameParser,
)
from .TemplateParser import TemplateParser

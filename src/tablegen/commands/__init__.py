from .CommandBase import CommandBase, ResultCommand, command
from .Declarations import (
    BoolVariableDeclarationCommand, DoubleVariableDeclarationCommand,
    IntegerVariableDeclarationCommand, StringVariableDeclarationCommand,
    VariableDeclarationCommand,
)
from .Expressions import (
    AssignmentCommand, GlobalAssignmentCommand, GlobalVariableCommand,
    LiteralCommand, VariableCommand,
)
from .TemplateCommands import NullCommand, TemplateLineCommand

# Candidates for the content of a dynamic span, tried in this order.
DEFAULT_EXPRESSION_COMMANDS = (
    IntegerVariableDeclarationCommand,
    BoolVariableDeclarationCommand,
    StringVariableDeclarationCommand,
    DoubleVariableDeclarationCommand,
    GlobalAssignmentCommand,
    GlobalVariableCommand,
    AssignmentCommand,
    LiteralCommand,
    VariableCommand,
)

# Candidates for a whole template line.
DEFAULT_TEMPLATE_COMMANDS = (
    NullCommand,
    TemplateLineCommand,
)

from .Literal import CommandParameter, ParameterKind, VariableKind, format_value
from .Variable import Variable, VariableStack, VariableStackFrame

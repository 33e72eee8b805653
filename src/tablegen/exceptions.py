class TableGenError(Exception):
    """Base-class for *all* tablegen exceptions."""

class TemplateParseError(TableGenError):
    """Syntax or structural problem in a template line."""

class ParseMismatchError(TemplateParseError):
    """A parser was asked to parse a line its `can_parse` rejects."""

class UnterminatedMarkerError(TemplateParseError):
    """A dynamic marker is unterminated, unopened or nested inside another one."""

class UnknownCommandError(TemplateParseError):
    """No command in the configured chain accepted a line."""

class ScopeError(TableGenError):
    """Base-class for variable-stack problems."""

class ScopeUnderflowError(ScopeError):
    """Attempted to destroy the global stack frame."""

class VariableError(TableGenError):
    """Base-class for variable problems."""

class UnknownVariableError(VariableError):
    """A variable was written or read without being defined first."""

class VariableTypeError(VariableError):
    """A value does not match the kind a variable was created with."""

class UnknownVariableKindError(VariableError):
    """A variable kind name is not known."""

class IndentUnderflowError(TableGenError):
    """A de-indent would take the indent level below zero."""

class AlreadyRegisteredException(TableGenError):
    """An identifier was registered twice."""

class NotRegisteredException(TableGenError):
    """An identifier was looked up but never registered."""

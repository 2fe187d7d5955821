# diagnostics.py

from dataclasses import dataclass


class ErrorKind:
    """Enumeration of validation error kinds."""
    OPERAND_REQUIRED = 'OPERAND_REQUIRED'
    OPERATION_REQUIRED = 'OPERATION_REQUIRED'
    CLOSING_PARENTHESIS_REQUIRED = 'CLOSING_PARENTHESIS_REQUIRED'
    OPEN_PARENTHESIS_REQUIRED = 'OPEN_PARENTHESIS_REQUIRED'
    UNRESOLVED_SYMBOL = 'UNRESOLVED_SYMBOL'


_MESSAGE_TEMPLATES = {
    ErrorKind.OPERAND_REQUIRED: "Operand required at position [{position}]!",
    ErrorKind.OPERATION_REQUIRED: "Operation sign required at position [{position}]!",
    ErrorKind.CLOSING_PARENTHESIS_REQUIRED: "Closing parenthesis for [{position}] required!",
    ErrorKind.OPEN_PARENTHESIS_REQUIRED: "Open parenthesis for [{position}] required!",
    ErrorKind.UNRESOLVED_SYMBOL: "Unresolved symbol detected at [{position}]",
}

DEFAULT_MESSAGE = "There is an error in your expression!"


@dataclass(frozen=True)
class Diagnostic:
    """A validation error: its kind and the 1-based character position it refers to."""
    kind: str
    position: int

    @property
    def message(self) -> str:
        template = _MESSAGE_TEMPLATES.get(self.kind)
        if template is None:
            return DEFAULT_MESSAGE
        return template.format(position=self.position)

    def __repr__(self) -> str:
        return f"Diagnostic({self.kind}, pos={self.position})"


def render_diagnostic(diagnostic: Diagnostic) -> str:
    return diagnostic.message

# validator.py

"""
Syntax validation for arithmetic expressions.

The validator walks the expression once, left to right, and collects every problem it finds
as a positioned Diagnostic. It never stops at the first error and never raises for malformed
input: an expression may legitimately produce several diagnostics at unrelated positions.

Positions are 1-based, so the character at index ``i`` is reported as ``i + 1``.
"""

import logging
from typing import List, Optional

from .classifier import (
    CLOSE_PAREN,
    OPEN_PAREN,
    char_at,
    is_digit,
    is_multiplicative,
    is_operator,
    is_parenthesis,
)
from .diagnostics import Diagnostic, ErrorKind

logger = logging.getLogger(__name__)


class Validator:
    """
    Collects validation errors for an expression.

    ``validate`` returns the validator itself so the errors can be read off the same call:

        errors = Validator().validate("2+").errors
    """

    def __init__(self):
        self._errors: List[Diagnostic] = []

    @property
    def errors(self) -> List[Diagnostic]:
        return list(self._errors)

    def _report(self, kind: str, position: int) -> None:
        self._errors.append(Diagnostic(kind, position))

    def validate(self, expression: Optional[str]) -> 'Validator':
        if not expression:
            return self

        open_parens: List[int] = []

        for i, char in enumerate(expression):
            position = i + 1
            prev_char = char_at(expression, i - 1)
            next_char = char_at(expression, i + 1)

            if not (is_digit(char) or is_operator(char) or is_parenthesis(char)):
                self._report(ErrorKind.UNRESOLVED_SYMBOL, position)

            if is_operator(char) and not (is_digit(next_char) or next_char == OPEN_PAREN):
                self._report(ErrorKind.OPERAND_REQUIRED, position + 1)

            if char == OPEN_PAREN:
                open_parens.append(position)

                # Juxtaposition like "2(" or ")(" needs an operator in between.
                if prev_char is not None and not is_operator(prev_char):
                    self._report(ErrorKind.OPERATION_REQUIRED, position)

                # Only additive signs may open a group: "(-2)" is fine, "(*2)" is not.
                if is_multiplicative(next_char):
                    self._report(ErrorKind.OPERAND_REQUIRED, position + 1)

            if char == CLOSE_PAREN:
                if is_operator(prev_char):
                    self._report(ErrorKind.OPERAND_REQUIRED, position)

                if next_char is not None and not is_operator(next_char):
                    self._report(ErrorKind.OPERATION_REQUIRED, position + 1)

                if not open_parens:
                    self._report(ErrorKind.OPEN_PARENTHESIS_REQUIRED, position)
                else:
                    open_parens.pop()

                if prev_char == OPEN_PAREN:
                    self._report(ErrorKind.OPERAND_REQUIRED, position + 1)

        if open_parens:
            self._report(ErrorKind.CLOSING_PARENTHESIS_REQUIRED, open_parens.pop())

        logger.debug("Validated %r: %d diagnostic(s)", expression, len(self._errors))
        return self


def validate(expression: Optional[str]) -> List[Diagnostic]:
    """Return the diagnostics for ``expression`` in the order they were found."""
    return Validator().validate(expression).errors

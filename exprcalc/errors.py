# errors.py

from typing import List

from .diagnostics import Diagnostic


class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass


class EmptyExpressionError(CalculatorError):
    """Raised when there is nothing to evaluate."""
    pass


class InvalidExpressionError(CalculatorError):
    """Raised when validation reports one or more diagnostics."""

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        super().__init__("\n".join(d.message for d in self.diagnostics))

"""Arithmetic expression validation and evaluation."""

from .diagnostics import Diagnostic, ErrorKind, render_diagnostic
from .errors import CalculatorError, EmptyExpressionError, InvalidExpressionError
from .parser import inverse_expression, parse
from .evaluator import evaluate
from .processor import ExpressionProcessor, calculate
from .tokens import Token, TokenKind
from .validator import Validator, validate

__all__ = [
    "CalculatorError",
    "Diagnostic",
    "EmptyExpressionError",
    "ErrorKind",
    "ExpressionProcessor",
    "InvalidExpressionError",
    "Token",
    "TokenKind",
    "Validator",
    "calculate",
    "evaluate",
    "inverse_expression",
    "parse",
    "render_diagnostic",
    "validate",
]

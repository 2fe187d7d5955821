# classifier.py

"""
Single-character predicates shared by the validator and the parser.

Every predicate accepts a one-character string or ``None`` (an absent neighbour, e.g. the
character before position 0 or after the last one) and returns False for absence.
"""

from typing import Optional

DIGITS = '0123456789'
OPERATORS = '+-*/'
PARENTHESES = '()'
MULTIPLICATIVE = '*/'
ADDITIVE = '+-'

OPEN_PAREN = '('
CLOSE_PAREN = ')'
PLUS = '+'
MINUS = '-'


def _is_one_of(char: Optional[str], charset: str) -> bool:
    return bool(char) and len(char) == 1 and char in charset


def is_digit(char: Optional[str]) -> bool:
    return _is_one_of(char, DIGITS)


def is_operator(char: Optional[str]) -> bool:
    return _is_one_of(char, OPERATORS)


def is_parenthesis(char: Optional[str]) -> bool:
    return _is_one_of(char, PARENTHESES)


def is_multiplicative(char: Optional[str]) -> bool:
    """`*` or `/`."""
    return _is_one_of(char, MULTIPLICATIVE)


def is_additive(char: Optional[str]) -> bool:
    """`+` or `-`."""
    return _is_one_of(char, ADDITIVE)


def char_at(text: Optional[str], index: int) -> Optional[str]:
    """Return ``text[index]`` or None when the index falls outside the string."""
    if not text or index < 0 or index >= len(text):
        return None
    return text[index]

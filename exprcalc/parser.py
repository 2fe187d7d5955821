# parser.py

"""
Recursive descent parser turning an expression string into nested parse nodes.

Grammar:
    expression : [ADDITIVE] term (ADDITIVE term)*
    term       : factor (MULTIPLICATIVE factor)*
    factor     : DIGITS | '(' expression ')'

The output mirrors the precedence through nesting alone:

    "2+3*4"   -> (2, +, (3, *, 4))
    "(2+3)*4" -> (((2, +, 3), *, 4),)

A term with more than one factor becomes a single nested group standing in place of one
operand. Subtraction never appears as an operator: the parser emits '+' and negates the
operand that follows. A minus in front of a parenthesized group is distributed over the
group's text with ``inverse_expression`` before the group is parsed.

The parser expects validated input. On malformed input it does not raise; a missing
operand is parsed as an empty group, which the evaluator reduces to NaN.
"""

import logging
from typing import List, Optional, Tuple

from .classifier import (
    CLOSE_PAREN,
    MINUS,
    OPEN_PAREN,
    PLUS,
    char_at,
    is_additive,
    is_digit,
    is_multiplicative,
)
from .tokens import Node, Token, format_nodes

logger = logging.getLogger(__name__)

_SIGN_SWAP = str.maketrans({PLUS: MINUS, MINUS: PLUS})


def inverse_expression(expression: str) -> str:
    """
    Distribute a leading unary minus over ``expression``.

    A flat substitution over the whole string: every '+' becomes '-' and every '-' becomes
    '+', including those inside nested parentheses. A leading '-' is dropped (the first term
    turns positive); otherwise a '-' is prefixed to the result.

        inverse_expression("2+3")        -> "-2-3"
        inverse_expression("-2+3")       -> "2-3"
        inverse_expression("2-(3+4)+1")  -> "-2+(3-4)-1"
    """
    inverted = expression.translate(_SIGN_SWAP)
    if expression.startswith(MINUS):
        return inverted[1:]
    return MINUS + inverted


def find_closing_paren(expression: str, open_index: int) -> int:
    """
    Return the index of the ')' matching the '(' at ``open_index``, or ``len(expression)``
    when the group is never closed.
    """
    depth = 0
    for index in range(open_index, len(expression)):
        char = expression[index]
        if char == OPEN_PAREN:
            depth += 1
        elif char == CLOSE_PAREN:
            depth -= 1
            if depth == 0:
                return index
    return len(expression)


class Parser:
    """Parses a single expression string. Create one instance per string."""

    def __init__(self, text: Optional[str]):
        self.text = text or ''
        self.pos = 0

    def _peek(self) -> Optional[str]:
        return char_at(self.text, self.pos)

    def _next(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        return char

    def parse(self) -> Tuple[Node, ...]:
        """Parse the whole string and return the top-level sequence of nodes."""
        return self.expression()

    def expression(self) -> Tuple[Node, ...]:
        """
        expression : [ADDITIVE] term (ADDITIVE term)*
        """
        negative = False
        if is_additive(self._peek()):
            # A leading sign has no left operand, so it only affects the first term.
            negative = self._next() == MINUS

        nodes: List[Node] = [self.term(negative)]
        while is_additive(self._peek()):
            sign = self._next()
            nodes.append(Token.operator(PLUS))
            nodes.append(self.term(sign == MINUS))
        return tuple(nodes)

    def term(self, negative: bool = False) -> Node:
        """
        term : factor (MULTIPLICATIVE factor)*

        The sign applies to the first factor only: "-2*3" is (-2) * 3.
        """
        first = self.factor(negative)
        if not is_multiplicative(self._peek()):
            return first

        nodes: List[Node] = [first]
        while is_multiplicative(self._peek()):
            nodes.append(Token.operator(self._next()))
            nodes.append(self.factor())
        return tuple(nodes)

    def factor(self, negative: bool = False) -> Node:
        """
        factor : DIGITS | '(' expression ')'
        """
        char = self._peek()
        if is_digit(char):
            return self._integer(negative)
        if char == OPEN_PAREN:
            return self._group(negative)
        return ()

    def _integer(self, negative: bool) -> Token:
        start = self.pos
        while is_digit(self._peek()):
            self.pos += 1
        value = int(self.text[start:self.pos])
        return Token.integer(-value if negative else value)

    def _group(self, negative: bool) -> Tuple[Node, ...]:
        close_index = find_closing_paren(self.text, self.pos)
        inner = self.text[self.pos + 1:close_index]
        if negative:
            inner = inverse_expression(inner)
        self.pos = close_index + 1
        return Parser(inner).parse()


def parse(expression: Optional[str]) -> Tuple[Node, ...]:
    """Parse ``expression`` into nested parse nodes."""
    nodes = Parser(expression).parse()
    logger.debug("Parsed %r as %s", expression, format_nodes(nodes))
    return nodes

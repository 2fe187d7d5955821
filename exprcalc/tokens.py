# tokens.py

"""
Parse-tree value types.

A parse node is either a Token (an integer literal or an operator) or a tuple of parse
nodes. Tuples stand for groups: a parenthesized sub-expression or an implicit cluster of
multiplications/divisions. Nesting is the only way precedence is represented; there is no
priority field anywhere.
"""

from dataclasses import dataclass
from typing import Tuple, Union


class TokenKind:
    """Enumeration of token kinds."""
    INTEGER = 'INTEGER'
    OPERATOR = 'OPERATOR'


@dataclass(frozen=True)
class Token:
    """
    A leaf of the parse tree.

    Integer tokens carry a signed int (a unary minus is folded into the literal). Operator
    tokens carry one of '+', '*', '/'.
    """
    kind: str
    value: Union[int, str]

    @classmethod
    def integer(cls, value: int) -> 'Token':
        return cls(TokenKind.INTEGER, value)

    @classmethod
    def operator(cls, symbol: str) -> 'Token':
        return cls(TokenKind.OPERATOR, symbol)

    @property
    def is_integer(self) -> bool:
        return self.kind == TokenKind.INTEGER

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r})"


Node = Union[Token, Tuple['Node', ...]]


def format_nodes(node: Node) -> str:
    """Render a parse node compactly, e.g. ``[2, +, [3, *, 4]]``."""
    if isinstance(node, Token):
        return str(node.value)
    return '[' + ', '.join(format_nodes(child) for child in node) + ']'

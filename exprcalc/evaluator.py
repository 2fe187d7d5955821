# evaluator.py

"""
Reduces nested parse nodes to a number.

Groups are reduced first, then the flat sequence ``operand (operator operand)*`` is folded
left to right. Precedence is entirely encoded by the parser's nesting, so the fold itself
treats every operator alike: "8/4/2" is (8/4)/2.
"""

import logging
import math
import operator
from typing import Callable, Dict, List, Sequence, Union

from .tokens import Node, Token

logger = logging.getLogger(__name__)

Number = Union[int, float]


def true_divide(left: Number, right: Number) -> float:
    """
    Divide like IEEE-754 floats do: x/0 is +-inf and 0/0 is nan, no exception.
    """
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_OPERATIONS: Dict[str, Callable[[Number, Number], Number]] = {
    '+': operator.add,
    '*': operator.mul,
    '/': true_divide,
}


def _reduce(node: Node) -> Union[Number, str]:
    if isinstance(node, Token):
        return node.value
    return evaluate(node)


def evaluate(nodes: Union[Node, Sequence[Node]]) -> Number:
    """
    Evaluate a parse node or a sequence of them.

    An empty sequence (a missing operand in malformed input) evaluates to nan.
    """
    if isinstance(nodes, Token):
        return nodes.value

    flat: List[Union[Number, str]] = [_reduce(node) for node in nodes]
    if not flat:
        return math.nan

    result = flat[0]
    for index in range(1, len(flat) - 1, 2):
        symbol, operand = flat[index], flat[index + 1]
        result = _OPERATIONS[symbol](result, operand)

    logger.debug("Reduced %d node(s) to %r", len(flat), result)
    return result

# processor.py

import logging
from typing import Optional, Sequence, Tuple

from .evaluator import Number, evaluate
from .parser import parse
from .tokens import Node

logger = logging.getLogger(__name__)


class ExpressionProcessor:
    """
    Solves an expression by parsing it into nested tokens and reducing them.

    The expression must already be validated; on malformed input the result is unspecified
    (typically nan).
    """

    def parse(self, expression: Optional[str]) -> Tuple[Node, ...]:
        return parse(expression)

    def process(self, nodes: Sequence[Node]) -> Number:
        return evaluate(nodes)

    def calculate(self, expression: Optional[str]) -> Number:
        result = self.process(self.parse(expression))
        logger.debug("Calculated %r = %r", expression, result)
        return result


def calculate(expression: Optional[str]) -> Number:
    """Evaluate a validated expression."""
    return ExpressionProcessor().calculate(expression)

# main.py

"""
Command-line front end for the expression calculator.

This is a thin adapter over the core: it reads an expression, runs the validator, and
either prints the rendered diagnostics or evaluates the expression and prints the result.
There is no arithmetic or syntax logic here.

Usage:
    exprcalc                 start the interactive REPL
    exprcalc "2+3*4"         evaluate once and print the result
    exprcalc --check "2+"    validate only
    exprcalc --tree "2+3*4"  print the nested parse structure
"""

import argparse
import logging
import math
import sys
from typing import List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .config import Settings, load_settings
from .errors import CalculatorError, EmptyExpressionError, InvalidExpressionError
from .evaluator import Number
from .processor import calculate
from .parser import parse
from .tokens import format_nodes
from .validator import validate

logger = logging.getLogger(__name__)

EMPTY_EXPRESSION = "Expression is empty"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


# ---------------------------
# Core boundary
# ---------------------------

def evaluate_expression(expression: str) -> Number:
    """
    Validate, then calculate.

    Raises:
        EmptyExpressionError: if the expression is empty
        InvalidExpressionError: if validation reports any diagnostics
    """
    if not expression:
        raise EmptyExpressionError(EMPTY_EXPRESSION)
    diagnostics = validate(expression)
    if diagnostics:
        logger.info("Rejected %r with %d diagnostic(s)", expression, len(diagnostics))
        raise InvalidExpressionError(diagnostics)
    return calculate(expression)


def format_result(value: Number) -> str:
    """Print integer-valued floats as ints; inf and nan as Python spells them."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_diagnostics(error: InvalidExpressionError) -> str:
    lines = ["Invalid expression:"]
    lines.extend(f"  - {d.message}" for d in error.diagnostics)
    return "\n".join(lines)


def check_expression(expression: str) -> Tuple[bool, str]:
    """Validate only. Returns (ok, output)."""
    if not expression:
        return False, f"Error: {EMPTY_EXPRESSION}"
    diagnostics = validate(expression)
    if not diagnostics:
        return True, "OK"
    return False, format_diagnostics(InvalidExpressionError(diagnostics))


def describe_expression(expression: str) -> Tuple[bool, str]:
    """Validate, then render the parse structure. Returns (ok, output)."""
    ok, output = check_expression(expression)
    if not ok:
        return ok, output
    return True, format_nodes(parse(expression))


# ---------------------------
# REPL
# ---------------------------

HELP_TEXT = """
Expression Calculator Help
--------------------------
Supported syntax:
  - Integers:           42
  - Addition:           1+2
  - Subtraction:        3-4
  - Multiplication:     5*6
  - Division:           7/2      (true division, 3.5)
  - Parentheses:        (1+2)*3
  - Unary minus:        -5, -(2+3)

Spaces are not allowed inside an expression.

Commands:
  - help      : Show this help message
  - exit/quit : Exit the calculator

Examples:
  > 2+3*4
  14
  > -(2-3)
  1
  > 2+
  Invalid expression:
    - Operand required at position [3]!
"""


class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[PromptSession] = None):
        self.settings = settings or load_settings()
        self.session = session

    def _get_session(self) -> PromptSession:
        if self.session is None:
            self.session = PromptSession(history=FileHistory(self.settings.history_file))
        return self.session

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """
        Evaluate a single line (either the help command or an expression). Returns (ok, output).

        The expression is validated exactly as given, so surrounding whitespace is reported
        as unresolved symbols. The interactive loop strips lines before calling this.
        """
        if line.strip().lower() == 'help':
            return True, HELP_TEXT.strip()

        try:
            result = evaluate_expression(line)
        except InvalidExpressionError as e:
            return False, format_diagnostics(e)
        except CalculatorError as e:
            return False, f"Error: {e}"
        return True, format_result(result)

    def run(self) -> None:
        """Interactive loop. Ctrl-D or exit/quit leaves, Ctrl-C discards the current line."""
        session = self._get_session()
        print("Expression Calculator. Type 'help' for instructions, or 'exit' to quit.")
        while True:
            try:
                line = session.prompt(self.settings.prompt)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Goodbye!")
                break

            line = line.strip()
            if not line:
                continue
            if line.lower() in ('exit', 'quit'):
                print("Goodbye!")
                break

            ok, out = self.evaluate_line(line)
            print(out)


# ---------------------------
# Entry point
# ---------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="Validate and evaluate integer arithmetic expressions.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate. Starts the interactive REPL when omitted.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Only validate the expression and print its diagnostics.",
    )
    mode.add_argument(
        "--tree",
        action="store_true",
        help="Print the nested parse structure instead of the value.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: EXPRCALC_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level or settings.log_level)

    if args.expression is None:
        if args.check or args.tree:
            print("An expression is required with --check and --tree.", file=sys.stderr)
            return 2
        REPL(settings).run()
        return 0

    if args.check:
        ok, out = check_expression(args.expression)
    elif args.tree:
        ok, out = describe_expression(args.expression)
    else:
        ok, out = REPL(settings).evaluate_line(args.expression)
    print(out)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())

"""Command line entry point for the calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from tddbook.calculator.engine import Engine
from tddbook.calculator.formatting import CalculationError
from tddbook.calculator.parser import Parser
from tddbook.calculator.validator import Validator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate a simple arithmetic expression.")
    parser.add_argument(
        "-expression",
        "--expression",
        dest="expression",
        default="",
        help="mathematical expression to parse",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the given expression, print the result and return an exit status."""
    args = _build_parser().parse_args(argv)
    engine = Engine()
    validator = Validator(engine.num_operands, engine.valid_operators)
    parser = Parser(engine, validator)
    try:
        result = parser.process_expression(args.expression)
    except CalculationError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Formatting of calculation results and errors."""

from __future__ import annotations


class CalculationError(Exception):
    """An expression could not be calculated."""

    def __init__(self, expression: str, cause: object) -> None:
        super().__init__(f"CALCULATION ERROR: expression {expression} is invalid: {cause}")
        self.expression = expression
        self.cause = cause


def format_error(expr: str, err: object) -> CalculationError:
    """Wrap ``err`` in a :class:`CalculationError` for the expression ``expr``."""
    return CalculationError(expr, err)


def format_result(expr: str, result: float) -> str:
    """Render a successful calculation with two decimal places."""
    return f"CALCULATION SUCCESS: {expr} = {result:.2f}"
"""The arithmetic engine of the calculator."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from tddbook.calculator.formatting import format_error, format_result


@dataclass(frozen=True)
class Operation:
    """An operator applied to operands, with the expression it came from."""

    expression: str
    operator: str
    operands: tuple[float, ...]


class Engine:
    """Evaluates binary arithmetic operations."""

    def __init__(self) -> None:
        self._expected_length = 2
        self._operations: dict[str, Callable[[float, float], float]] = {
            "+": self.add,
            "-": self.sub,
            "/": self.div,
            "*": self.mult,
        }

    @property
    def num_operands(self) -> int:
        """The number of operands every operation takes."""
        return self._expected_length

    @property
    def valid_operators(self) -> list[str]:
        """The operators the engine understands."""
        return list(self._operations)

    def process_operation(self, operation: Operation) -> str:
        """Evaluate ``operation`` and return the formatted result.

        Raises CalculationError for an unknown operator or a failed calculation.
        """
        func = self._operations.get(operation.operator)
        if func is None:
            raise format_error(
                operation.expression,
                f"no operation for operator {operation.operator} found",
            )
        x, y = operation.operands
        try:
            result = func(x, y)
        except ArithmeticError as exc:
            raise format_error(operation.expression, exc) from exc
        return format_result(operation.expression, result)

    def add(self, x: float, y: float) -> float:
        return x + y

    def sub(self, x: float, y: float) -> float:
        return x - y

    def mult(self, x: float, y: float) -> float:
        return x * y

    def div(self, x: float, y: float) -> float:
        if y == 0:
            raise ZeroDivisionError("cannot divide by zero")
        return x / y
"""Validation of operators and operands."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class InputError(ValueError):
    """The input to the calculator is malformed."""


class Validator:
    """Checks operand counts and operators against what the engine accepts."""

    def __init__(self, expected_length: int, valid_operators: Iterable[str]) -> None:
        self.expected_length = expected_length
        self.valid_operators = list(valid_operators)

    def check_input(self, operator: str, operands: Sequence[float]) -> None:
        """Raise InputError unless the operands and operator are acceptable."""
        if len(operands) != self.expected_length:
            raise InputError(
                f"unexpected operands length: got {len(operands)}, want {self.expected_length}"
            )
        if operator not in self.valid_operators:
            raise InputError(f"invalid operator:{operator}")
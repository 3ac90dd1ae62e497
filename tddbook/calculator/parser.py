"""Turning text expressions into operations."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

from tddbook.calculator.engine import Operation
from tddbook.calculator.formatting import format_error
from tddbook.calculator.validator import InputError

_EXPRESSION_LENGTH = 3


class OperationProcessor(Protocol):
    """Anything that can evaluate an Operation into a formatted result."""

    def process_operation(self, operation: Operation) -> str: ...


class ValidationHelper(Protocol):
    """Anything that can check an operator and its operands."""

    def check_input(self, operator: str, operands: Sequence[float]) -> None: ...


def _parse_number(token: str) -> float:
    if "_" not in token:
        try:
            value = float(token)
        except ValueError:
            pass
        else:
            if not math.isinf(value) or "inf" in token.lower():
                return value
    raise InputError(f'unable to process expression:invalid number "{token}"')


class Parser:
    """Parses expressions of the form ``<number> <operator> <number>``."""

    def __init__(self, engine: OperationProcessor, validator: ValidationHelper) -> None:
        self.engine = engine
        self.validator = validator

    def process_expression(self, expr: str) -> str:
        """Parse ``expr``, evaluate it and return the formatted result.

        Raises CalculationError if the expression is malformed or fails.
        """
        try:
            operation = self._get_operation(expr)
        except ValueError as exc:
            raise format_error(expr, exc) from exc
        return self.engine.process_operation(operation)

    def _get_operation(self, expr: str) -> Operation:
        tokens = expr.split()
        if len(tokens) != _EXPRESSION_LENGTH:
            raise InputError(
                f"incorrect expression length:got {len(tokens)}, want {_EXPRESSION_LENGTH}"
            )
        left_token, operator, right_token = tokens
        operands = (_parse_number(left_token), _parse_number(right_token))
        self.validator.check_input(operator, operands)
        return Operation(expression=expr, operator=operator, operands=operands)
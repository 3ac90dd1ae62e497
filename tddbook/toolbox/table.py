"""Division of small signed integers."""

from __future__ import annotations

_INT8_MIN = -128
_INT8_MAX = 127


def divide(x: int, y: int) -> str:
    """Divide two signed 8-bit integers and format the quotient to two decimals."""
    for value in (x, y):
        if not _INT8_MIN <= value <= _INT8_MAX:
            raise ValueError(f"{value} is outside the signed 8-bit range")
    if y == 0:
        raise ZeroDivisionError("cannot divide by 0")
    return f"{x / y:.2f}"
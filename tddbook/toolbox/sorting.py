"""Returning the values of an integer-keyed mapping in key order."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class SortDirection(Enum):
    ASC = 0
    DESC = 1


def get_sorted_values(
    values: Mapping[int, str] | None, direction: SortDirection
) -> list[str]:
    """Return the values of ``values`` ordered by key in ``direction``."""
    if values is None:
        raise ValueError("cannot sort nil input map")
    if not isinstance(direction, SortDirection):
        raise ValueError("sort direction not recognised")
    keys = sorted(values, reverse=direction is SortDirection.DESC)
    return [values[key] for key in keys]


def get_values(values: Mapping[int, str], direction: str) -> list[str]:
    """Return the values ordered by key for ``"asc"`` or ``"desc"``.

    Any other direction leaves the mapping's own order.
    """
    keys = list(values)
    if direction == "asc":
        keys.sort()
    elif direction == "desc":
        keys.sort(reverse=True)
    return [values[key] for key in keys]
"""Records and errors of the book swapping service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, TypeVar

_T = TypeVar("_T")


class BookStatus(str, Enum):
    """Whether a book can still be swapped."""

    AVAILABLE = "AVAILABLE"
    SWAPPED = "SWAPPED"

    def __str__(self) -> str:
        return self.value


class BookSwapError(Exception):
    """Base class of the service's errors."""


class NotFoundError(BookSwapError, LookupError):
    """A requested book or user does not exist."""


class UnavailableError(BookSwapError):
    """A book cannot be swapped because it is not available."""


def _from_mapping(cls: type[_T], data: Any) -> _T:
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    values: dict[str, str] = {}
    for field in fields(cls):  # type: ignore[arg-type]
        raw = data.get(field.name)
        if raw is None:
            values[field.name] = ""
        elif isinstance(raw, str):
            values[field.name] = raw
        else:
            raise ValueError(
                f"field {field.name} must be a string, got {type(raw).__name__}"
            )
    return cls(**values)


@dataclass(frozen=True)
class Book:
    """A book offered for swapping."""

    id: str = ""
    name: str = ""
    author: str = ""
    owner_id: str = ""
    status: str = ""

    def to_dict(self) -> dict[str, str]:
        """The JSON object form of the book."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> Book:
        """Build a book from a JSON object; missing fields are empty.

        Raises ValueError if ``data`` is not an object or a field is not a string.
        """
        return _from_mapping(cls, data)


@dataclass(frozen=True)
class User:
    """A member of the service."""

    id: str = ""
    name: str = ""
    address: str = ""
    post_code: str = ""
    country: str = ""

    def to_dict(self) -> dict[str, str]:
        """The JSON object form of the user."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> User:
        """Build a user from a JSON object; missing fields are empty.

        Raises ValueError if ``data`` is not an object or a field is not a string.
        """
        return _from_mapping(cls, data)
"""
conventions.models
==================

Small value types showing which dunder method each piece of syntax calls.

===================  ==========================
Syntax               Method
===================  ==========================
``a + b``            ``a.__add__(b)``
``a * k``            ``a.__mul__(k)``
``-a``               ``a.__neg__()``
``a[i]``             ``a.__getitem__(i)``
``a[i] = v``         ``a.__setitem__(i, v)``
``p in r``           ``r.__contains__(p)``
``x, y = p``         ``iter(p)``
``a < b``            ``a.__lt__(b)``
===================  ==========================

Everything here is standard library only so importing the package stays
cheap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property, total_ordering
from typing import Any, Callable, Dict, Iterator, List

from .errors import InvalidFieldError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Arithmetic and indexing
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Point:
    """Immutable 2‑D integer point."""
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, scale: float) -> "Point":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Point(int(self.x * scale), int(self.y * scale))

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __getitem__(self, index: int) -> int:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Invalid coordinate {index}")

    def __iter__(self) -> Iterator[int]:  # destructuring: x, y = p
        yield self.x
        yield self.y


@dataclass
class MutablePoint:
    """2‑D point whose coordinates can be assigned by index."""
    x: int
    y: int

    def __setitem__(self, index: int, value: int) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError(f"Invalid coordinate {index}")

    def set(self, index: int, value: int) -> None:
        """Call form of ``p[index] = value``."""
        self[index] = value


@dataclass(frozen=True)
class Rectangle:
    """Axis‑aligned rectangle; membership is half‑open on both axes."""
    upper_left: Point
    lower_right: Point

    def __contains__(self, p: object) -> bool:
        if not isinstance(p, Point):
            return False
        return (self.upper_left.x <= p.x < self.lower_right.x
                and self.upper_left.y <= p.y < self.lower_right.y)


def repeat_char(ch: str, count: int) -> str:
    """``'a' * 3`` spelled as a function."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return ch * count


# ---------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------
@total_ordering
@dataclass(frozen=True, eq=True)
class Person:
    """Person ordered by last name, then first name."""
    first_name: str
    last_name: str

    def _key(self):
        return (self.last_name, self.first_name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self._key() < other._key()


# ---------------------------------------------------------------------
# Destructuring
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class NameComponents:
    name: str
    extension: str

    def __iter__(self) -> Iterator[str]:
        yield self.name
        yield self.extension


def split_filename(full_name: str) -> NameComponents:
    """
    Split ``"example.py"`` into ``NameComponents("example", "py")``.

    Only the first dot separates; ``"a.tar.gz"`` gives extension ``"tar.gz"``.
    Raises :class:`ValueError` when there is no dot at all.
    """
    name, sep, extension = full_name.partition(".")
    if not sep:
        raise ValueError(f"no extension in {full_name!r}")
    return NameComponents(name, extension)


def format_entries(mapping: Dict[str, str]) -> List[str]:
    """Return ``"key -> value"`` lines, one per entry, in mapping order."""
    return [f"{key} -> {value}" for key, value in mapping.items()]


# ---------------------------------------------------------------------
# Lazy and expando properties
# ---------------------------------------------------------------------
class LazyContact:
    """
    Contact whose ``emails`` are loaded on first access, then cached.

    Parameters
    ----------
    name : str
        Contact name, passed to *loader*.
    loader : callable
        ``loader(contact) -> list[str]``; called at most once.
    """

    def __init__(self, name: str, loader: Callable[["LazyContact"], List[str]]) -> None:
        self.name = name
        self._loader = loader

    @cached_property
    def emails(self) -> List[str]:
        logger.info("Loading emails for %s", self.name)
        return list(self._loader(self))


class ExpandoPerson:
    """Person whose attributes arrive as arbitrary key/value pairs."""

    def __init__(self) -> None:
        self._attributes: Dict[str, Any] = {}

    def set_attribute(self, attr_name: str, value: Any) -> None:
        self._attributes[attr_name] = value

    @property
    def name(self) -> Any:
        try:
            return self._attributes["name"]
        except KeyError:
            raise InvalidFieldError("name", self._attributes) from None

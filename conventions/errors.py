"""
conventions.errors
==================

Exception hierarchy shared by the observable store and the date range.

Both errors signal programmer mistakes (unknown field, iterating past the
end) and are never caught inside the package; they surface to the caller.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Tuple


class ConventionsError(Exception):
    """Base class for every error raised by :pymod:`conventions`."""


class InvalidFieldError(ConventionsError, KeyError):
    """
    Raised when a field name is not one of the entity's recognised fields.

    Subclasses :class:`KeyError` so ``except KeyError`` keeps working for
    callers that treat entities like mappings.
    """

    def __init__(self, field: str, known: Iterable[str] = ()) -> None:
        self.field = field
        self.known: Tuple[str, ...] = tuple(known)
        super().__init__(field)

    def __str__(self) -> str:  # KeyError would repr() the message
        if self.known:
            return f"unknown field {self.field!r} (expected one of: {', '.join(self.known)})"
        return f"unknown field {self.field!r}"


class ExhaustedIteratorError(ConventionsError):
    """Raised by ``DateIterator.next()`` once the cursor has passed the end date."""

    def __init__(self, end: date) -> None:
        self.end = end
        super().__init__(f"date range exhausted (end was {end.isoformat()})")

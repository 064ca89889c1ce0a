"""
conventions.daterange
=====================

Inclusive, lazily iterated range of calendar dates.

:class:`DateRange` is an immutable value; :pymeth:`DateRange.iterate` hands
out a fresh :class:`DateIterator` each time, so any number of traversals can
run side by side without affecting one another or the range itself.

The iterator's native protocol is the explicit pair ``has_next()`` /
``next()``; Python's ``for`` loop is layered on top via ``__iter__`` /
``__next__``.

>>> from datetime import date
>>> [d.day for d in DateRange(date(2023, 1, 1), date(2023, 1, 3))]
[1, 2, 3]
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .errors import ExhaustedIteratorError

_ONE_DAY = timedelta(days=1)


class DateIterator:
    """Forward‑only cursor over a :class:`DateRange`; owned by one traversal."""

    def __init__(self, start: date, end: date) -> None:
        self._current = start
        self._end = end
        self._done = start > end

    def has_next(self) -> bool:
        """True until the (inclusive) end date has been returned."""
        return not self._done

    def next(self) -> date:
        """Return the cursor date, then advance it by one day."""
        if not self.has_next():
            raise ExhaustedIteratorError(self._end)
        result = self._current
        if result >= self._end:
            # stop here; date.max + 1 day would overflow
            self._done = True
        else:
            self._current = result + _ONE_DAY
        return result

    # ------------------------------------------------------------------
    # Python iterator protocol
    # ------------------------------------------------------------------
    def __iter__(self) -> "DateIterator":
        return self

    def __next__(self) -> date:
        if not self.has_next():
            raise StopIteration
        return self.next()


@dataclass(frozen=True)
class DateRange:
    """
    Dates from *start* to *end*, both inclusive.

    No validation is done: ``end < start`` is a well‑formed, empty range.

    Parameters
    ----------
    start : datetime.date
        First date yielded.
    end : datetime.date
        Last date yielded.
    """

    start: date
    end: date

    def iterate(self) -> DateIterator:
        """Return a new, independent iterator positioned at ``start``."""
        return DateIterator(self.start, self.end)

    def __iter__(self) -> DateIterator:
        return self.iterate()

    def __len__(self) -> int:
        return max(0, (self.end - self.start).days + 1)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        elif not isinstance(day, date):
            return False
        return self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


def date_range(start: date, end: date) -> DateRange:
    """Shorthand for ``DateRange(start, end)``."""
    return DateRange(start, end)

"""
tests/test_daterange.py
=======================

Unit tests for conventions.daterange.DateRange / DateIterator
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from conventions.daterange import DateIterator, DateRange, date_range
from conventions.errors import ExhaustedIteratorError


def _drain(it: DateIterator):
    out = []
    while it.has_next():
        out.append(it.next())
    return out


def test_three_day_range_in_order():
    rng = DateRange(date(2023, 1, 1), date(2023, 1, 3))
    assert _drain(rng.iterate()) == [
        date(2023, 1, 1),
        date(2023, 1, 2),
        date(2023, 1, 3),
    ]


def test_single_day_range():
    d = date(2023, 6, 15)
    it = DateRange(d, d).iterate()
    assert it.has_next()
    assert it.next() == d
    assert not it.has_next()


def test_range_ending_at_date_max():
    """The last representable date is yielded without stepping past it."""
    it = DateRange(date.max, date.max).iterate()
    assert it.next() == date.max
    assert not it.has_next()
    with pytest.raises(ExhaustedIteratorError):
        it.next()
    assert list(DateRange(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date.max]


def test_reversed_bounds_are_empty():
    it = DateRange(date(2023, 1, 5), date(2023, 1, 1)).iterate()
    assert it.has_next() is False
    assert list(DateRange(date(2023, 1, 5), date(2023, 1, 1))) == []


def test_next_past_end_raises():
    it = DateRange(date(2023, 1, 1), date(2023, 1, 1)).iterate()
    it.next()
    with pytest.raises(ExhaustedIteratorError) as exc_info:
        it.next()
    assert exc_info.value.end == date(2023, 1, 1)


def test_iterators_are_independent():
    rng = DateRange(date(2023, 1, 1), date(2023, 1, 3))
    first = rng.iterate()
    second = rng.iterate()

    first.next()
    first.next()

    assert second.next() == date(2023, 1, 1)
    assert first.next() == date(2023, 1, 3)
    assert rng.start == date(2023, 1, 1)


def test_range_is_immutable():
    rng = DateRange(date(2023, 1, 1), date(2023, 1, 3))
    with pytest.raises(FrozenInstanceError):
        rng.start = date(2024, 1, 1)


def test_for_loop_crosses_year_boundary():
    days = [d for d in date_range(date(2022, 12, 31), date(2023, 1, 1))]
    assert days == [date(2022, 12, 31), date(2023, 1, 1)]


def test_for_loop_restarts_on_each_use():
    rng = DateRange(date(2024, 2, 28), date(2024, 3, 1))
    assert list(rng) == list(rng)
    assert len(list(rng)) == 3  # leap day included


def test_builtin_next_stops_cleanly():
    it = DateRange(date(2023, 1, 1), date(2023, 1, 1)).iterate()
    assert next(it) == date(2023, 1, 1)
    with pytest.raises(StopIteration):
        next(it)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (date(2023, 1, 1), date(2023, 1, 1), 1),
        (date(2023, 1, 1), date(2023, 1, 31), 31),
        (date(2023, 1, 2), date(2023, 1, 1), 0),
        (date(2023, 1, 31), date(2023, 1, 1), 0),
    ],
)
def test_len_matches_yielded_count(start, end, expected):
    rng = DateRange(start, end)
    assert len(rng) == expected
    assert len(list(rng)) == expected


def test_membership_is_inclusive():
    vacation = DateRange(date(2023, 7, 1), date(2023, 7, 11))
    assert date(2023, 7, 1) in vacation
    assert date(2023, 7, 8) in vacation
    assert date(2023, 7, 11) in vacation
    assert date(2023, 7, 12) not in vacation
    assert datetime(2023, 7, 5, 12, 30) in vacation
    assert "2023-07-05" not in vacation


def test_str():
    assert str(DateRange(date(2023, 1, 1), date(2023, 1, 3))) == "2023-01-01..2023-01-03"

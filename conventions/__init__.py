"""
Conventions
===========

A small sampler showing how Python syntax desugars into ordinary method
calls: operator overloading, indexing, membership, destructuring, lazy and
observable properties, and custom iteration.

Import structure
----------------
`import conventions` is intentionally cheap: only the stdlib-based
sub‑modules are imported by default.  *pydantic-settings* is only imported
when you access :pymod:`conventions.settings` or run the CLI.

Sub‑modules
~~~~~~~~~~~
- :pymod:`conventions.observable`  – ``ObservableEntity`` change‑notifying store + ``Employee``
- :pymod:`conventions.daterange`   – inclusive ``DateRange`` with independent ``DateIterator`` cursors
- :pymod:`conventions.models`      – ``Point``, ``Rectangle``, ``Person`` and friends
- :pymod:`conventions.errors`      – ``InvalidFieldError`` / ``ExhaustedIteratorError``
- :pymod:`conventions.settings`    – environment‑driven configuration
- :pymod:`conventions.cli`         – console driver (``python -m conventions``)

Quick start
-----------
>>> from datetime import date
>>> from conventions.daterange import DateRange
>>> from conventions.observable import Employee
>>> emp = Employee("Stuart", 25, 1000)
>>> emp.register_listener(lambda f, old, new: print(f, old, new))
>>> emp.salary = 1100
salary 1000 1100
>>> [d.isoformat() for d in DateRange(date(2022, 12, 31), date(2023, 1, 1))]
['2022-12-31', '2023-01-01']

"""

from .daterange import DateIterator, DateRange, date_range
from .errors import ConventionsError, ExhaustedIteratorError, InvalidFieldError
from .observable import ChangeSupport, Employee, ObservableEntity, ObservableProperty

__all__ = [
    "ChangeSupport",
    "ConventionsError",
    "DateIterator",
    "DateRange",
    "Employee",
    "ExhaustedIteratorError",
    "InvalidFieldError",
    "ObservableEntity",
    "ObservableProperty",
    "date_range",
]

__version__ = "0.1.0"

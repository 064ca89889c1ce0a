"""
conventions.observable
======================

Change‑notifying property store.

An :class:`ObservableEntity` keeps its mutable fields in a private mapping
and owns a :class:`ChangeSupport` object holding the listener list.  Every
write goes through :pymeth:`ObservableEntity.set_field`, which compares the
old and new value and notifies listeners **only** on an observed transition
(``old != new``).

:class:`ObservableProperty` is a descriptor that lets subclasses expose
fields as ordinary attributes (``emp.age = 35``) while still routing the
assignment through ``set_field``.

Re‑entrancy
-----------
A listener that itself calls ``set_field`` on the same entity triggers a
nested dispatch before the outer one has finished; remaining outer
listeners then observe events out of order.  Pass a ``threading.RLock`` as
``lock=`` if such listeners must run under a lock (a plain ``Lock`` would
deadlock).

Example
-------
>>> emp = Employee("Stuart", 25, 1000)
>>> emp.register_listener(lambda f, old, new: print(f, old, new))
>>> emp.age = 26
age 25 26
>>> emp.age = 26
"""

from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Any, Callable, ContextManager, Dict, Iterator, List, Optional, Tuple

from .errors import InvalidFieldError

logger = logging.getLogger(__name__)

# (field name, old value, new value)
Listener = Callable[[str, Any, Any], None]


def format_change(name: str, old: Any, new: Any) -> str:
    """Human‑readable one‑liner for a change event."""
    return f"Property {name} changed from {old} to {new}"


class ChangeSupport:
    """
    Append‑only list of listeners shared by all fields of one entity.

    Listener exceptions are not caught: the first one to raise aborts the
    dispatch and propagates to whoever triggered the change.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def fire(self, name: str, old: Any, new: Any) -> None:
        """Invoke every listener, in registration order, with ``(name, old, new)``."""
        logger.debug(
            "Dispatching change of %r (%r -> %r) to %d listener(s)",
            name, old, new, len(self._listeners),
        )
        # snapshot: listeners added during dispatch only see later events
        for listener in tuple(self._listeners):
            listener(name, old, new)

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> Iterator[Listener]:
        return iter(tuple(self._listeners))


class ObservableEntity:
    """
    Entity whose fields notify listeners when they change.

    Parameters
    ----------
    lock : context manager, optional
        Held around compare‑and‑set *and* dispatch.  Defaults to a no‑op.
    **fields
        Initial field values; the keys become the recognised field names.
    """

    def __init__(self, *, lock: Optional[ContextManager[Any]] = None, **fields: Any) -> None:
        self._fields: Dict[str, Any] = dict(fields)
        self._changes = ChangeSupport()
        self._lock: ContextManager[Any] = lock if lock is not None else nullcontext()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _check_field(self, name: Any) -> None:
        try:
            known = name in self._fields
        except TypeError:  # unhashable name
            known = False
        if not known:
            raise InvalidFieldError(name, self._fields)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(self._fields)

    @property
    def change_support(self) -> ChangeSupport:
        return self._changes

    def register_listener(self, listener: Listener) -> None:
        """Append *listener*; it receives every future observed transition."""
        self._changes.add_listener(listener)

    def get_field(self, name: str) -> Any:
        """Return the current value of *name* (raise InvalidFieldError if unknown)."""
        self._check_field(name)
        return self._fields[name]

    def set_field(self, name: str, new_value: Any) -> None:
        """
        Store *new_value* and notify listeners, unless it equals the current value.

        The value is stored before the first listener runs, so listeners
        reading the field back see the new value.
        """
        with self._lock:
            self._check_field(name)
            old_value = self._fields[name]
            if old_value == new_value:
                return
            self._fields[name] = new_value
            self._changes.fire(name, old_value, new_value)


class ObservableProperty:
    """
    Descriptor exposing an :class:`ObservableEntity` field as an attribute.

    The attribute name is the field name::

        class Employee(ObservableEntity):
            age = ObservableProperty()
    """

    def __init__(self) -> None:
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional[ObservableEntity], objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return obj.get_field(self.name)

    def __set__(self, obj: ObservableEntity, value: Any) -> None:
        obj.set_field(self.name, value)


class Employee(ObservableEntity):
    """Demo entity: a fixed name plus observable ``age`` and ``salary``."""

    age = ObservableProperty()
    salary = ObservableProperty()

    def __init__(
        self,
        name: str,
        age: int,
        salary: int,
        *,
        lock: Optional[ContextManager[Any]] = None,
    ) -> None:
        super().__init__(lock=lock, age=age, salary=salary)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Employee(name={self._name!r}, age={self.age!r}, salary={self.salary!r})"

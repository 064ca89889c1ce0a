"""
conventions.cli
===============

Console driver that walks through every convention the package shows.

Examples
--------
$ python -m conventions                      # every section
$ python -m conventions --section ranges     # just the date‑range demo
$ python -m conventions --log-level DEBUG    # also log listener dispatch
"""

from __future__ import annotations

import argparse
import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from .daterange import date_range
from .models import (
    ExpandoPerson,
    LazyContact,
    MutablePoint,
    Person,
    Point,
    Rectangle,
    format_entries,
    repeat_char,
    split_filename,
)
from .observable import Employee, format_change
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------
def demo_operators(cfg: Settings) -> None:
    p1, p2 = Point(10, 20), Point(30, 40)
    print(p1 + p2)
    print(p1.__add__(p2))  # what `+` desugars to
    print(Point(10, 20) * 1.5)
    print(repeat_char("a", 3))

    point = Point(1, 2)
    point += Point(3, 4)
    print(point)

    print(-Point(10, 20))

    bd = Decimal(0)
    print(bd)  # postfix: print, then increment
    bd += 1
    bd += 1    # prefix: increment, then print
    print(bd)

    print(Point(10, 20) == Point(10, 20))
    print(Point(10, 20) != Point(5, 5))
    print(None == Point(1, 2))  # noqa: E711
    print(Point(5, 3) == Point(2, 1))
    print(Person("Alice", "Smith") < Person("Bob", "Johnson"))
    print("abc" > "bac")


def demo_collections(cfg: Settings) -> None:
    numbers: List[int] = []
    numbers += [42]
    numbers += [40]
    numbers += [20]
    for n in numbers:
        print(n)

    items = [1, 2]
    items += [3]
    print(items)
    print(items + [4, 5])

    print(Point(10, 20)[1])

    mp = MutablePoint(10, 20)
    mp.set(0, 30)
    mp[1] = 25
    print(mp)

    rect = Rectangle(Point(10, 20), Point(50, 50))
    print(Point(20, 30) in rect)
    print(Point(5, 40) in rect)


def demo_ranges(cfg: Settings) -> None:
    today = date.today()
    vacation = date_range(today, today + timedelta(days=cfg.vacation_days))
    print(today + timedelta(weeks=1) in vacation)

    n = 9
    print(range(0, n + 2))
    print("".join(str(i) for i in range(0, n + 1)))
    for ch in "abc":
        print(ch)

    new_year = date(cfg.demo_year, 1, 1)
    days_off = date_range(new_year - timedelta(days=1), new_year)
    for day_off in days_off:
        print(day_off.isoformat())


def demo_destructuring(cfg: Settings) -> None:
    x, y = Point(10, 20)
    print(x)
    print(y)

    name, ext = split_filename("example.py")
    print(name)
    print(ext)

    for line in format_entries({"Oracle": "Java", "JetBrains": "Kotlin"}):
        print(line)


def demo_properties(cfg: Settings) -> None:
    contact = LazyContact("Alice", lambda c: [f"{c.name.lower()}@example.com"])
    print(contact.emails)

    emp = Employee("Dmitry", 34, 2000)
    emp.register_listener(lambda field, old, new: print(format_change(field, old, new)))
    emp.age = 35
    emp.salary = 2100
    emp.salary = 2100  # unchanged: no event

    expando = ExpandoPerson()
    for attr_name, value in {"name": "Dmitry", "company": "JetBrains"}.items():
        expando.set_attribute(attr_name, value)
    print(expando.name)


SECTIONS: Dict[str, Callable[[Settings], None]] = {
    "operators": demo_operators,
    "collections": demo_collections,
    "ranges": demo_ranges,
    "destructuring": demo_destructuring,
    "properties": demo_properties,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def build_parser(cfg: Optional[Settings] = None) -> argparse.ArgumentParser:
    cfg = cfg or default_settings
    parser = argparse.ArgumentParser(
        prog="python -m conventions",
        description="Print what each syntax convention desugars to.",
    )
    parser.add_argument(
        "--section",
        choices=[*SECTIONS, "all"],
        default="all",
        help="run a single section (default: all)",
    )
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="root logger level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, cfg: Optional[Settings] = None) -> int:
    cfg = cfg or default_settings
    args = build_parser(cfg).parse_args(argv)
    logging.basicConfig(level=args.log_level, format=cfg.log_format)

    selected = list(SECTIONS) if args.section == "all" else [args.section]
    for name in selected:
        logger.debug("Running section %s", name)
        SECTIONS[name](cfg)
    return 0

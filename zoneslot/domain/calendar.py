"""
Weekday numbering and weekday predicates.

Weekdays use the ISO convention (1=Monday ... 7=Sunday) everywhere in the
package. Predicates are plain callables so business windows and day counters
can take any rule without subclassing.
"""

from typing import Callable, FrozenSet

from pendulum import DateTime

MONDAY = 1
TUESDAY = 2
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6
SUNDAY = 7

ALL_DAYS: FrozenSet[int] = frozenset(range(MONDAY, SUNDAY + 1))
WEEKEND: FrozenSet[int] = frozenset({SATURDAY, SUNDAY})
WORKDAYS: FrozenSet[int] = ALL_DAYS - WEEKEND

WeekdayFilter = Callable[[int], bool]


def weekday_number(instant: DateTime) -> int:
    """Return the ISO weekday number of an instant."""
    return instant.isoweekday()


def is_weekday(instant: DateTime) -> bool:
    """Check if an instant falls on Monday through Friday."""
    return weekday_number(instant) in WORKDAYS


def workdays_only(day: int) -> bool:
    """Accept Monday through Friday."""
    return day in WORKDAYS


def every_day(day: int) -> bool:
    """Accept any valid weekday number."""
    return day in ALL_DAYS


def only_on(*days: int) -> WeekdayFilter:
    """
    Build a weekday filter accepting exactly the given ISO weekday numbers.

    Raises:
        ValueError: If a day is outside 1..7
    """
    allowed = _validate_days(days)
    return lambda day: day in allowed


def excluding(*days: int) -> WeekdayFilter:
    """Build a weekday filter rejecting the given ISO weekday numbers."""
    rejected = _validate_days(days)
    return lambda day: day in ALL_DAYS and day not in rejected


def _validate_days(days) -> FrozenSet[int]:
    invalid = sorted(day for day in days if day not in ALL_DAYS)
    if invalid:
        raise ValueError(f"Weekdays must be between 1 and 7, got {invalid}")
    return frozenset(days)

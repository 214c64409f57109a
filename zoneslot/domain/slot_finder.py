"""
First-fit search for a meeting hour acceptable to several business windows.

Algorithm:
1. Walk the UTC hours of the requested day in ascending order
2. Build the candidate instant ``day at hh:00 UTC``
3. Ask every business window whether it is open at the candidate
4. Stop at the first candidate every window accepts (FOUND)
5. If the hours run out, report that no slot exists (EXHAUSTED)

No wall-clock "now" is consulted, so identical input always yields the same
result.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

import pendulum
from pendulum import DateTime

from .business_window import BusinessWindow
from .exceptions import NoConstraintsError
from .interval import Interval
from .sequencer import generate_sequence
from .zones import as_utc

logger = logging.getLogger(__name__)

FULL_DAY = range(24)


class SearchState(Enum):
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class SlotSearch:
    """Outcome of a slot search."""
    state: SearchState
    slot: Optional[DateTime]
    hours_checked: int

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND


class SlotFinder:
    """
    Finds the earliest UTC hour at which every business window is open.

    Windows are evaluated independently against the same candidate, in the
    order given.
    """

    def __init__(self, windows: Sequence[BusinessWindow]):
        if not windows:
            raise NoConstraintsError("At least one business window is required to search for a slot")
        self._windows: Tuple[BusinessWindow, ...] = tuple(windows)

    @property
    def windows(self) -> Tuple[BusinessWindow, ...]:
        return self._windows

    def accepts(self, candidate: DateTime) -> bool:
        """Check if every window is open at a UTC instant."""
        return all(window.is_open_at(candidate) for window in self._windows)

    def search(self, day: date, hours: range = FULL_DAY) -> SlotSearch:
        """
        Scan one UTC day for the first acceptable hour.

        Args:
            day: Calendar day to scan; datetimes are reduced to their UTC date
            hours: UTC hours to try, in order (default: whole day)

        Returns:
            SlotSearch in state FOUND or EXHAUSTED

        Raises:
            ValueError: If hours contains values outside 0..23
        """
        return self._scan(day, hours, bounds=None)

    def search_interval(self, interval: Interval, hours: range = FULL_DAY) -> SlotSearch:
        """
        Scan every UTC day touched by an interval and return the first slot.

        Candidates outside the interval itself are skipped, so a search
        starting at 14:00 never proposes 09:00 on the same day.
        """
        first_day = as_utc(interval.start).start_of("day")
        days = Interval(start=first_day, end=as_utc(interval.end))
        checked = 0

        for day in generate_sequence(days, pendulum.duration(days=1)):
            result = self._scan(day, hours, bounds=interval)
            checked += result.hours_checked
            if result.found:
                return SlotSearch(state=SearchState.FOUND, slot=result.slot, hours_checked=checked)

        logger.debug("No slot in %s after checking %d hours", interval, checked)
        return SlotSearch(state=SearchState.EXHAUSTED, slot=None, hours_checked=checked)

    def _scan(self, day: date, hours: range, bounds: Optional[Interval]) -> SlotSearch:
        _validate_hours(hours)
        utc_day = _utc_date(day)
        state = SearchState.SEARCHING
        checked = 0

        for hour in hours:
            candidate = pendulum.datetime(utc_day.year, utc_day.month, utc_day.day, hour, tz="UTC")
            if bounds is not None and not bounds.contains(candidate):
                continue

            checked += 1
            if self.accepts(candidate):
                state = SearchState.FOUND
                logger.debug("Slot found at %s after %d candidate(s)", candidate, checked)
                return SlotSearch(state=state, slot=candidate, hours_checked=checked)

        state = SearchState.EXHAUSTED
        logger.debug("No slot on %s (%d candidate(s) checked)", utc_day, checked)
        return SlotSearch(state=state, slot=None, hours_checked=checked)


def find_slot(
    day: date,
    windows: Sequence[BusinessWindow],
    hours: range = FULL_DAY,
) -> Optional[DateTime]:
    """
    Return the earliest UTC hour on ``day`` accepted by all windows.

    Returns None when no hour qualifies; that is a normal outcome.

    Raises:
        NoConstraintsError: If windows is empty
    """
    return SlotFinder(windows).search(day, hours).slot


def _validate_hours(hours: Iterable[int]) -> None:
    invalid = [hour for hour in hours if not 0 <= hour <= 23]
    if invalid:
        raise ValueError(f"Hours to scan must be between 0 and 23, got {invalid}")


def _utc_date(day: date) -> date:
    if isinstance(day, datetime):
        return as_utc(day).date()
    return day

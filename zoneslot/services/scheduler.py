"""
Application service for cross-timezone scheduling and working-day reports.

The service holds an explicitly injected zone table and the business windows
to satisfy, and composes the domain-level interval, sequencer and slot finder
operations. Nothing here reads the wall clock, so results only depend on the
arguments given.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from pendulum import DateTime

from ..config import SchedulerConfig
from ..domain.business_window import BusinessWindow
from ..domain.calendar import is_weekday
from ..domain.interval import Interval
from ..domain.sequencer import calendar_days, count_working_days, split_by_calendar_month
from ..domain.slot_finder import FULL_DAY, SlotFinder, SlotSearch
from ..domain.zones import ZoneTable

logger = logging.getLogger(__name__)


class SchedulingService:
    """
    Orchestrates zone conversions, slot searches and working-day counts.

    The zone table and the windows are passed in rather than looked up from
    global state, so tests can run against synthetic zones.
    """

    def __init__(
        self,
        zone_table: ZoneTable,
        windows: Sequence[BusinessWindow],
        default_hours: range = FULL_DAY,
    ) -> None:
        self._zone_table = zone_table
        self._slot_finder = SlotFinder(windows)
        self._default_hours = default_hours

    @classmethod
    def from_config(cls, config: SchedulerConfig) -> "SchedulingService":
        """Build a service from a loaded configuration."""
        zone_table = config.build_zone_table()
        return cls(
            zone_table=zone_table,
            windows=config.build_windows(zone_table),
            default_hours=config.search.hours(),
        )

    @property
    def zone_table(self) -> ZoneTable:
        return self._zone_table

    @property
    def windows(self) -> Tuple[BusinessWindow, ...]:
        return self._slot_finder.windows

    def find_slot(self, day: date, hours: Optional[range] = None) -> Optional[DateTime]:
        """Find the earliest acceptable UTC hour on a single day."""
        return self.search_day(day, hours).slot

    def search_day(self, day: date, hours: Optional[range] = None) -> SlotSearch:
        """Search one day and return the full search outcome."""
        scan = self._default_hours if hours is None else hours
        result = self._slot_finder.search(day, scan)
        logger.info("Slot search for %s: %s", day, result.state.value)
        return result

    def find_next_slot(self, interval: Interval, hours: Optional[range] = None) -> Optional[DateTime]:
        """
        Find the first acceptable UTC hour on any day of an interval.

        Returns None if no day in the interval has a common slot.
        """
        scan = self._default_hours if hours is None else hours
        result = self._slot_finder.search_interval(interval, scan)
        logger.info(
            "Slot search for %s: %s after %d candidate(s)",
            interval,
            result.state.value,
            result.hours_checked,
        )
        return result.slot

    def convert(self, instant: DateTime, from_zone: str, to_zone: str) -> DateTime:
        """Convert a wall-clock reading between configured zones."""
        return self._zone_table.convert(instant, from_zone, to_zone)

    @staticmethod
    def working_days(interval: Interval) -> int:
        """Count Monday-to-Friday days in an interval."""
        return count_working_days(interval)

    @staticmethod
    def working_days_by_month(interval: Interval) -> List[Tuple[Interval, int]]:
        """
        Count working days for each calendar month touched by an interval.

        Days are visited exactly as ``working_days`` visits them (at the
        wall-clock time of ``interval.start``) and each visited day is
        credited to the month piece it falls in. A day landing on a shared
        boundary belongs to the month it starts, so the monthly counts add
        up to ``working_days(interval)``.

        Returns:
            List of (month interval, working-day count) in calendar order
        """
        pieces = split_by_calendar_month(interval)
        counts = [0] * len(pieces)
        index = 0

        for instant in calendar_days(interval):
            while index < len(pieces) - 1 and instant >= pieces[index].end:
                index += 1
            if is_weekday(instant):
                counts[index] += 1

        return list(zip(pieces, counts))

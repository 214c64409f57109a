"""
Business-hour rules for a single zone.
"""

from dataclasses import dataclass, field
from datetime import datetime

from .calendar import WeekdayFilter, workdays_only
from .exceptions import InvalidWindowError
from .zones import ZoneOffset, as_utc


@dataclass(frozen=True)
class BusinessWindow:
    """
    Local opening hours ``[start_hour, end_hour)`` of one zone.

    The window is open on days where ``weekday_filter`` accepts the ISO
    weekday number (1=Monday, 7=Sunday) of the local date. Checks are made
    on the local hour only: 16:59 local is open for a window ending at 17.

    Invariant: 0 <= start_hour < end_hour <= 24.
    """
    zone: ZoneOffset
    start_hour: int
    end_hour: int
    weekday_filter: WeekdayFilter = field(default=workdays_only, compare=False)

    def __post_init__(self):
        if not 0 <= self.start_hour < 24:
            raise InvalidWindowError(f"start_hour must be between 0 and 23, got {self.start_hour}")
        if not 0 < self.end_hour <= 24:
            raise InvalidWindowError(f"end_hour must be between 1 and 24, got {self.end_hour}")
        if self.start_hour >= self.end_hour:
            raise InvalidWindowError(
                f"start_hour {self.start_hour} must be before end_hour {self.end_hour}"
            )

    def open_hours(self) -> range:
        """Return the local hours during which the window is open."""
        return range(self.start_hour, self.end_hour)

    def is_open_at(self, utc_instant: datetime) -> bool:
        """Check if a UTC instant falls inside local business hours."""
        local = as_utc(utc_instant) + self.zone.offset

        if not self.weekday_filter(local.isoweekday()):
            return False

        return self.start_hour <= local.hour < self.end_hour

    def __str__(self) -> str:
        return f"{self.zone.label} {self.start_hour:02d}:00-{self.end_hour:02d}:00"

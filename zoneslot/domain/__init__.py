"""
Domain layer - Pure interval and scheduling logic without I/O.
"""

from .business_window import BusinessWindow
from .exceptions import (
    InvalidRangeError,
    InvalidStepError,
    InvalidWindowError,
    NoConstraintsError,
    SchedulingError,
    UnknownZoneError,
)
from .interval import Interval
from .sequencer import (
    InstantSequence,
    calendar_days,
    count_matching,
    count_working_days,
    generate_sequence,
    split_by_calendar_month,
)
from .slot_finder import SearchState, SlotFinder, SlotSearch, find_slot
from .zones import ZoneOffset, ZoneTable, parse_offset

__all__ = [
    "BusinessWindow",
    "Interval",
    "InstantSequence",
    "InvalidRangeError",
    "InvalidStepError",
    "InvalidWindowError",
    "NoConstraintsError",
    "SchedulingError",
    "SearchState",
    "SlotFinder",
    "SlotSearch",
    "UnknownZoneError",
    "ZoneOffset",
    "ZoneTable",
    "calendar_days",
    "count_matching",
    "count_working_days",
    "find_slot",
    "generate_sequence",
    "parse_offset",
    "split_by_calendar_month",
]

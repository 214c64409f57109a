"""
Domain-specific exception hierarchy for the zoneslot scheduler.

Everything raised here is a usage error detected while constructing or
validating input. Negative but valid outcomes (an empty intersection, a search
that finds no slot) are returned as values instead.
"""


class SchedulingError(Exception):
    """Base class for all scheduler errors."""


class InvalidRangeError(SchedulingError, ValueError):
    """Raised when an interval would start after it ends."""


class InvalidStepError(SchedulingError, ValueError):
    """Raised when a sequence step is zero or negative."""


class UnknownZoneError(SchedulingError, LookupError):
    """Raised when a zone label is not present in the zone table."""


class NoConstraintsError(SchedulingError, ValueError):
    """Raised when a slot search is started without any business window."""


class InvalidWindowError(SchedulingError, ValueError):
    """Raised when business hours are out of range or out of order."""

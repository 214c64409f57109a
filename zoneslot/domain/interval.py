"""
Closed time interval model.
"""

from dataclasses import dataclass

import pendulum
from pendulum import DateTime, Duration

from .exceptions import InvalidRangeError


@dataclass(frozen=True)
class Interval:
    """
    Represents an immutable, closed time interval ``[start, end]``.

    Both endpoints belong to the interval, so an interval whose start equals
    its end is valid: it has zero duration and contains exactly one instant.

    Invariant: start must not be after end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRangeError(
                f"Start time {self.start} must not be after end time {self.end}"
            )

    @classmethod
    def parse(cls, start: str, end: str, tz: str = "UTC") -> "Interval":
        """
        Build an interval from two ISO-8601 strings.

        Args:
            start: Start instant, e.g. "2024-01-01" or "2024-01-01T09:00"
            end: End instant
            tz: Timezone applied to strings without an explicit offset

        Returns:
            Interval instance
        """
        return cls(start=pendulum.parse(start, tz=tz), end=pendulum.parse(end, tz=tz))

    @property
    def is_empty(self) -> bool:
        """True for zero-length intervals, including empty intersections."""
        return self.start == self.end

    def duration(self) -> Duration:
        """Return the elapsed time between start and end."""
        delta = self.end - self.start
        return pendulum.duration(
            days=delta.days,
            seconds=delta.seconds,
            microseconds=delta.microseconds,
        )

    def duration_minutes(self) -> int:
        """Return the duration in whole minutes."""
        return int(self.duration().total_seconds() // 60)

    def contains(self, instant: DateTime) -> bool:
        """Check if an instant lies within the interval, endpoints included."""
        return self.start <= instant <= self.end

    def overlaps(self, other: "Interval") -> bool:
        """Check if two intervals share at least one instant."""
        return self.start <= other.end and other.start <= self.end

    def intersection_with(self, other: "Interval") -> "Interval":
        """
        Calculate the intersection of two intervals.

        When the intervals do not overlap the result is a zero-length interval
        anchored at the later start. Callers check ``is_empty`` to tell
        "no overlap" apart from a real result; note that two intervals
        touching at a single instant also produce an empty interval.
        """
        start = max(self.start, other.start)
        end = min(self.end, other.end)

        if start > end:
            return Interval(start=start, end=start)

        return Interval(start=start, end=end)

    def union_with(self, other: "Interval") -> "Interval":
        """
        Return the smallest interval covering both intervals.

        This is the convex hull: for disjoint intervals the gap between them
        is included in the result.
        """
        return Interval(
            start=min(self.start, other.start),
            end=max(self.end, other.end),
        )

    def __str__(self) -> str:
        return f"{self.start.to_iso8601_string()} - {self.end.to_iso8601_string()}"

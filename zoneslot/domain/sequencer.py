"""
Sequences, day counts and calendar partitions derived from an interval.

All calendar stepping is delegated to pendulum, so day and month boundaries
follow the calendar rather than a fixed number of seconds.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterator, List

from pendulum import DateTime

from .calendar import is_weekday
from .exceptions import InvalidStepError
from .interval import Interval

InstantPredicate = Callable[[DateTime], bool]


@dataclass(frozen=True)
class InstantSequence:
    """
    Lazy, restartable sequence of instants ``start, start + step, ...``.

    Every call to ``iter()`` starts again at ``interval.start``; the sequence
    stops before the first instant that would pass ``interval.end``. The n-th
    element is computed as ``start + step * n`` rather than accumulated.
    """
    interval: Interval
    step: timedelta

    def __post_init__(self):
        if self.step <= timedelta(0):
            raise InvalidStepError(f"Step must be positive, got {self.step}")

    def __iter__(self) -> Iterator[DateTime]:
        index = 0
        current = self.interval.start

        while current <= self.interval.end:
            yield current
            index += 1
            current = self.interval.start + self.step * index


def generate_sequence(interval: Interval, step: timedelta) -> InstantSequence:
    """
    Generate instants from the start of an interval in fixed steps.

    Args:
        interval: Range to walk
        step: Positive duration between consecutive instants

    Returns:
        A lazy iterable; nothing is computed until it is iterated

    Raises:
        InvalidStepError: If step is zero or negative
    """
    return InstantSequence(interval=interval, step=step)


def calendar_days(interval: Interval) -> Iterator[DateTime]:
    """
    Walk an interval one calendar day at a time.

    Yields ``interval.start`` and then the same wall-clock time on each
    following day, up to and including ``interval.end``.
    """
    days = 0
    current = interval.start

    while current <= interval.end:
        yield current
        days += 1
        current = interval.start.add(days=days)


def count_matching(interval: Interval, predicate: InstantPredicate) -> int:
    """
    Count the calendar days of an interval on which a predicate holds.

    Each day is tested at the wall-clock time of ``interval.start``; see
    ``calendar_days``.
    """
    return sum(1 for instant in calendar_days(interval) if predicate(instant))


def count_working_days(interval: Interval) -> int:
    """Count Monday-to-Friday days in an interval."""
    return count_matching(interval, is_weekday)


def split_by_calendar_month(interval: Interval) -> List[Interval]:
    """
    Partition an interval into one sub-interval per calendar month touched.

    Adjacent pieces share their boundary instant, which is the first instant
    of the later month. The first piece starts at ``interval.start`` and the
    last one ends at ``interval.end``, so chaining ``union_with`` over the
    pieces reproduces the original interval.

    Example:
        [2024-01-15, 2024-03-10] ->
        [2024-01-15, 2024-02-01], [2024-02-01, 2024-03-01],
        [2024-03-01, 2024-03-10]
    """
    pieces: List[Interval] = []
    cursor = interval.start

    while True:
        next_month = cursor.start_of("month").add(months=1)
        piece_end = min(next_month, interval.end)
        pieces.append(Interval(start=cursor, end=piece_end))

        if piece_end == interval.end:
            break

        cursor = next_month

    return pieces

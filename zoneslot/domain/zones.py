"""
Fixed-offset zone table.

Zones are plain numeric UTC offsets attached to a label. There is no DST and
no historical offset data: converting through UTC and applying the offset
difference directly give the same result, and the table relies on that.

Local wall-clock readings are represented as UTC-tagged DateTimes whose
fields hold the local time, so conversions are plain duration arithmetic.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Mapping, Union

import pendulum
from pendulum import DateTime, Duration, FixedTimezone

from .exceptions import UnknownZoneError

MAX_OFFSET = pendulum.duration(hours=18)

_OFFSET_PATTERN = re.compile(
    r"^(?P<sign>[+-])(?:(?P<hours>\d{1,2})(?::(?P<minutes>\d{2}))?|(?P<hh>\d{2})(?P<mm>\d{2}))$"
)

OffsetValue = Union[int, float, str]


def parse_offset(value: OffsetValue) -> Duration:
    """
    Convert a configured offset into an exact duration.

    Accepts numeric hours (``-5``, ``5.5``, ``5.75``) or strings such as
    ``"+05:30"``, ``"-0800"``, ``"+1"``, ``"Z"`` and ``"UTC"``.

    Raises:
        ValueError: If the value cannot be interpreted as an offset
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid UTC offset: {value!r}")

    if isinstance(value, (int, float)):
        # Round to whole minutes so 5.5 and 5.75 stay exact
        return pendulum.duration(minutes=round(value * 60))

    text = value.strip()
    if text.upper() in ("Z", "UTC"):
        return pendulum.duration()

    match = _OFFSET_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid UTC offset: {value!r}")

    hours = match.group("hours") or match.group("hh")
    minutes = int(hours) * 60 + int(match.group("minutes") or match.group("mm") or 0)
    if match.group("sign") == "-":
        minutes = -minutes

    return pendulum.duration(minutes=minutes)


def as_utc(instant: datetime) -> DateTime:
    """Normalize an aware or naive (assumed UTC) datetime to a UTC DateTime."""
    return pendulum.instance(instant).in_timezone("UTC")


@dataclass(frozen=True)
class ZoneOffset:
    """
    A labelled, fixed offset from UTC.

    Invariant: the offset lies within +/-18 hours.
    """
    label: str
    offset: Duration

    def __post_init__(self):
        if abs(self.offset) > MAX_OFFSET:
            raise ValueError(
                f"Offset for zone '{self.label}' must be within +/-18 hours, got {self.offset}"
            )

    @classmethod
    def from_value(cls, label: str, value: OffsetValue) -> "ZoneOffset":
        """Build a zone from numeric hours or an offset string."""
        return cls(label=label, offset=parse_offset(value))

    @property
    def total_minutes(self) -> int:
        return int(self.offset.total_seconds() // 60)

    def as_timezone(self) -> FixedTimezone:
        """Return the equivalent pendulum fixed timezone."""
        return pendulum.FixedTimezone(int(self.offset.total_seconds()), name=self.label)

    def __str__(self) -> str:
        sign = "-" if self.total_minutes < 0 else "+"
        hours, minutes = divmod(abs(self.total_minutes), 60)
        return f"{self.label} (UTC{sign}{hours:02d}:{minutes:02d})"


class ZoneTable(Mapping[str, ZoneOffset]):
    """
    Read-only mapping from zone label to fixed UTC offset.

    Built once and passed explicitly to whatever needs zone lookups, so tests
    can supply their own synthetic tables.
    """

    def __init__(self, zones: Iterable[ZoneOffset]):
        table: Dict[str, ZoneOffset] = {}

        for zone in zones:
            if zone.label in table:
                raise ValueError(f"Duplicate zone label: {zone.label}")
            table[zone.label] = zone

        self._zones = table

    @classmethod
    def from_mapping(cls, offsets: Mapping[str, OffsetValue]) -> "ZoneTable":
        """
        Build a table from ``{label: offset}`` pairs.

        Example:
            ZoneTable.from_mapping({"EST": -5, "IST": "+05:30"})
        """
        return cls(ZoneOffset.from_value(label, value) for label, value in offsets.items())

    def __getitem__(self, label: str) -> ZoneOffset:
        return self._zones[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def labels(self) -> List[str]:
        return list(self._zones)

    def offset_for(self, label: str) -> ZoneOffset:
        """
        Look up a zone by label.

        Raises:
            UnknownZoneError: If the label is not in the table
        """
        zone = self._zones.get(label)
        if zone is None:
            known = ", ".join(sorted(self._zones)) or "none"
            raise UnknownZoneError(f"Unknown zone '{label}'. Known zones: {known}")
        return zone

    def to_utc(self, local: DateTime, label: str) -> DateTime:
        """Convert a local wall-clock reading in the given zone to UTC."""
        return local - self.offset_for(label).offset

    def to_local(self, utc: datetime, label: str) -> DateTime:
        """Convert a UTC instant to the wall-clock reading in the given zone."""
        return as_utc(utc) + self.offset_for(label).offset

    def convert(self, instant: DateTime, from_label: str, to_label: str) -> DateTime:
        """
        Convert a wall-clock reading from one zone to another.

        The value is always normalized through UTC first, then shifted into
        the target zone.
        """
        target = self.offset_for(to_label)
        return self.to_utc(instant, from_label) + target.offset

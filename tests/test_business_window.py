"""
Tests for business windows and weekday filters.
"""

import pendulum
import pytest

from zoneslot.domain.business_window import BusinessWindow
from zoneslot.domain.calendar import SATURDAY, SUNDAY, every_day, excluding, only_on, workdays_only
from zoneslot.domain.exceptions import InvalidWindowError
from zoneslot.domain.zones import ZoneOffset

CET = ZoneOffset.from_value("CET", 1)
PST = ZoneOffset.from_value("PST", -8)


class TestBusinessWindow:
    """Tests for BusinessWindow.is_open_at."""

    def test_open_at_local_start_hour(self):
        """Test that the opening hour itself is open."""
        window = BusinessWindow(zone=CET, start_hour=9, end_hour=17)

        # Friday 08:00 UTC is 09:00 CET
        assert window.is_open_at(pendulum.datetime(2024, 3, 15, 8, 0))

    def test_closed_at_local_end_hour(self):
        """Test that the closing hour is not open."""
        window = BusinessWindow(zone=CET, start_hour=9, end_hour=17)

        # 16:00 UTC is 17:00 CET
        assert not window.is_open_at(pendulum.datetime(2024, 3, 15, 16, 0))

    def test_checks_are_hour_granular(self):
        """Test that minutes inside the last open hour still count as open."""
        window = BusinessWindow(zone=CET, start_hour=9, end_hour=17)

        # 15:59 UTC is 16:59 CET
        assert window.is_open_at(pendulum.datetime(2024, 3, 15, 15, 59))

    def test_weekend_is_closed(self):
        """Test that the default filter rejects Saturday."""
        window = BusinessWindow(zone=CET, start_hour=9, end_hour=17)

        assert not window.is_open_at(pendulum.datetime(2024, 3, 16, 10, 0))

    def test_weekday_uses_local_date(self):
        """Test that the weekday is taken after applying the offset."""
        window = BusinessWindow(zone=PST, start_hour=9, end_hour=18)

        # Monday 01:00 UTC is Sunday 17:00 PST
        assert not window.is_open_at(pendulum.datetime(2024, 3, 18, 1, 0))
        # Saturday 01:00 UTC is Friday 17:00 PST
        assert window.is_open_at(pendulum.datetime(2024, 3, 16, 1, 0))

    def test_aware_instants_are_normalized(self):
        """Test that instants given in another timezone are compared as UTC."""
        window = BusinessWindow(zone=CET, start_hour=9, end_hour=17)
        instant = pendulum.datetime(2024, 3, 15, 4, 0, tz="America/New_York")  # 08:00 UTC

        assert window.is_open_at(instant)

    def test_custom_weekday_filter(self):
        """Test that any callable can act as the weekday rule."""
        window = BusinessWindow(zone=CET, start_hour=10, end_hour=14, weekday_filter=every_day)
        saturday_only = BusinessWindow(zone=CET, start_hour=10, end_hour=14, weekday_filter=only_on(SATURDAY))

        saturday_noon = pendulum.datetime(2024, 3, 16, 11, 0)
        friday_noon = pendulum.datetime(2024, 3, 15, 11, 0)

        assert window.is_open_at(saturday_noon)
        assert saturday_only.is_open_at(saturday_noon)
        assert not saturday_only.is_open_at(friday_noon)

    def test_window_until_midnight(self):
        """Test that end_hour 24 keeps the last hour of the day open."""
        window = BusinessWindow(zone=CET, start_hour=20, end_hour=24)

        # 22:30 UTC is 23:30 CET on the same Friday
        assert window.is_open_at(pendulum.datetime(2024, 3, 15, 22, 30))
        assert list(window.open_hours()) == [20, 21, 22, 23]

    def test_invalid_hours(self):
        """Test that out-of-range or inverted hours are rejected."""
        for start_hour, end_hour in ((17, 9), (9, 9), (-1, 5), (0, 25), (24, 24)):
            with pytest.raises(InvalidWindowError):
                BusinessWindow(zone=CET, start_hour=start_hour, end_hour=end_hour)

    def test_str(self):
        """Test the readable representation."""
        assert str(BusinessWindow(zone=CET, start_hour=9, end_hour=17)) == "CET 09:00-17:00"


class TestWeekdayFilters:
    """Tests for weekday predicate factories."""

    def test_workdays_only(self):
        """Test the default Monday to Friday rule."""
        assert [day for day in range(1, 8) if workdays_only(day)] == [1, 2, 3, 4, 5]

    def test_excluding(self):
        """Test rejecting selected days."""
        no_sunday = excluding(SUNDAY)

        assert [day for day in range(1, 8) if no_sunday(day)] == [1, 2, 3, 4, 5, 6]
        assert not no_sunday(8)

    def test_invalid_days_rejected(self):
        """Test that weekday numbers must be 1..7."""
        with pytest.raises(ValueError, match="between 1 and 7"):
            only_on(0, 6)

"""
Tests for configuration loading.
"""

from pathlib import Path

import pendulum
import pytest

from zoneslot.config import SchedulerConfig, SearchConfig, WindowConfig

CONFIG_YAML = """
zones:
  EST: -5
  PST: -8
  CET: 1
  IST: "+05:30"
windows:
  - zone: EST
  - zone: PST
    start_hour: 8
  - zone: CET
    end_hour: 18
    days: [1, 2, 3, 4, 5, 5]
search:
  start_hour: 6
  end_hour: 20
"""


def _write(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "zoneslot.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


class TestLoadFromYaml:
    """Tests for SchedulerConfig.load_from_yaml."""

    def test_load_valid_config(self, tmp_path):
        """Test loading zones, windows and search hours."""
        config = SchedulerConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert set(config.zones) == {"EST", "PST", "CET", "IST"}
        assert [window.zone for window in config.windows] == ["EST", "PST", "CET"]
        assert config.windows[0].start_hour == 9
        assert config.windows[0].days == [1, 2, 3, 4, 5]
        assert config.windows[2].days == [1, 2, 3, 4, 5]
        assert config.search.hours() == range(6, 20)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            SchedulerConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that malformed YAML raises ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            SchedulerConfig.load_from_yaml(_write(tmp_path, "zones: [EST: -5\n"))

    def test_root_must_be_mapping(self, tmp_path):
        """Test that a list at the root is rejected."""
        with pytest.raises(ValueError, match="mapping at the root"):
            SchedulerConfig.load_from_yaml(_write(tmp_path, "- EST\n- PST\n"))

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file loads as an empty configuration."""
        config = SchedulerConfig.load_from_yaml(_write(tmp_path, ""))

        assert config.zones == {}
        assert config.windows == []
        assert config.search.hours() == range(24)


class TestValidation:
    """Tests for configuration validation."""

    def test_window_with_unknown_zone(self):
        """Test that windows must reference configured zones."""
        with pytest.raises(ValueError, match="Unknown zone\\(s\\) referenced by windows: MST"):
            SchedulerConfig(zones={"EST": -5}, windows=[{"zone": "MST"}])

    def test_invalid_offset(self):
        """Test that unparsable offsets are rejected."""
        with pytest.raises(ValueError, match="Invalid UTC offset"):
            SchedulerConfig(zones={"EST": "five hours"})

    def test_offset_out_of_range(self):
        """Test that offsets beyond 18 hours are rejected."""
        with pytest.raises(ValueError, match="18 hours"):
            SchedulerConfig(zones={"FAR": 20})

    def test_invalid_days(self):
        """Test that weekday numbers must be 1..7."""
        with pytest.raises(ValueError, match="days must be between 1 and 7"):
            WindowConfig(zone="EST", days=[0, 1])

    def test_window_hours_order(self):
        """Test that a window must open before it closes."""
        with pytest.raises(ValueError, match="end_hour must be later than start_hour"):
            WindowConfig(zone="EST", start_hour=17, end_hour=9)

    def test_search_hours_range(self):
        """Test that search hours stay inside a day."""
        with pytest.raises(ValueError):
            SearchConfig(start_hour=0, end_hour=25)
        with pytest.raises(ValueError):
            SearchConfig(start_hour=12, end_hour=12)


class TestBuildDomainObjects:
    """Tests for building the zone table and windows."""

    def test_build_zone_table(self, tmp_path):
        """Test that offsets are converted exactly."""
        config = SchedulerConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        table = config.build_zone_table()

        assert table.offset_for("IST").total_minutes == 330
        assert table.offset_for("EST").offset == pendulum.duration(hours=-5)

    def test_build_windows(self, tmp_path):
        """Test that windows resolve their zones and weekday rules."""
        config = SchedulerConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        windows = config.build_windows()

        assert [window.zone.label for window in windows] == ["EST", "PST", "CET"]
        assert windows[1].start_hour == 8
        assert windows[2].end_hour == 18
        assert windows[0].weekday_filter(5)
        assert not windows[0].weekday_filter(6)

    def test_build_windows_with_weekend_days(self):
        """Test that configured days become the weekday filter."""
        config = SchedulerConfig(zones={"CET": 1}, windows=[{"zone": "CET", "days": [6, 7]}])

        window = config.build_windows()[0]

        assert window.is_open_at(pendulum.datetime(2024, 3, 16, 10, 0))
        assert not window.is_open_at(pendulum.datetime(2024, 3, 15, 10, 0))

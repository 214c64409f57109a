"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.business_window import BusinessWindow
from .domain.calendar import WORKDAYS, only_on
from .domain.zones import ZoneOffset, ZoneTable

logger = logging.getLogger(__name__)


class SearchConfig(BaseModel):
    """UTC hours scanned per day when searching for a slot."""
    start_hour: int = 0
    end_hour: int = 24

    @field_validator("start_hour")
    @classmethod
    def validate_start_hour(cls, v: int) -> int:
        """Validate start hour is between 0 and 23."""
        if not 0 <= v <= 23:
            raise ValueError(f"start_hour must be between 0 and 23, got {v}")
        return v

    @field_validator("end_hour")
    @classmethod
    def validate_end_hour(cls, v: int) -> int:
        """Validate end hour is between 1 and 24."""
        if not 1 <= v <= 24:
            raise ValueError(f"end_hour must be between 1 and 24, got {v}")
        return v

    @model_validator(mode="after")
    def validate_hours_order(self) -> "SearchConfig":
        """Ensure the scan range is not empty."""
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be later than start_hour")
        return self

    def hours(self) -> range:
        return range(self.start_hour, self.end_hour)


class WindowConfig(BaseModel):
    """Business hours of one zone."""
    zone: str
    start_hour: int = 9
    end_hour: int = 17
    days: List[int] = Field(default_factory=lambda: sorted(WORKDAYS))  # 1=Monday, 7=Sunday

    @field_validator("days")
    @classmethod
    def validate_days(cls, value: List[int]) -> List[int]:
        """Ensure weekdays are in valid range and deduplicated."""
        invalid_days = [day for day in value if day not in range(1, 8)]
        if invalid_days:
            raise ValueError(f"days must be between 1 and 7, got {invalid_days}")
        if not value:
            raise ValueError("days must name at least one weekday")
        # Preserve order while removing duplicates
        seen: set[int] = set()
        deduped: List[int] = []
        for day in value:
            if day not in seen:
                deduped.append(day)
                seen.add(day)
        return deduped

    @model_validator(mode="after")
    def validate_hours_order(self) -> "WindowConfig":
        """Ensure the window opens before it closes."""
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"start_hour must be between 0 and 23, got {self.start_hour}")
        if not 1 <= self.end_hour <= 24:
            raise ValueError(f"end_hour must be between 1 and 24, got {self.end_hour}")
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be later than start_hour")
        return self


class SchedulerConfig(BaseModel):
    """Application configuration."""
    zones: Dict[str, Union[float, str]] = Field(default_factory=dict)
    windows: List[WindowConfig] = Field(default_factory=list)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @field_validator("zones")
    @classmethod
    def validate_zones(cls, value: Dict[str, Union[float, str]]) -> Dict[str, Union[float, str]]:
        """Ensure every offset can be parsed and labels are unambiguous."""
        seen: Dict[str, str] = {}
        for label, offset in value.items():
            ZoneOffset.from_value(label, offset)
            key = label.lower()
            if key in seen:
                logger.warning("Zone labels '%s' and '%s' differ only in case", seen[key], label)
            seen[key] = label
        return value

    @model_validator(mode="after")
    def validate_window_zones(self) -> "SchedulerConfig":
        """Ensure every window refers to a configured zone."""
        unknown = sorted({window.zone for window in self.windows if window.zone not in self.zones})
        if unknown:
            raise ValueError(
                f"Unknown zone(s) referenced by windows: {', '.join(unknown)}. "
                "Add them to the 'zones' section."
            )
        return self

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "SchedulerConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to the YAML config file
            
        Returns:
            SchedulerConfig instance
            
        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                "Please create a zoneslot.yaml file with 'zones' and 'windows' sections."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        config = cls(**data)
        logger.info(
            "Loaded %d zone(s) and %d window(s) from %s",
            len(config.zones),
            len(config.windows),
            config_path,
        )
        return config

    def build_zone_table(self) -> ZoneTable:
        """Build the zone table described by the 'zones' section."""
        return ZoneTable.from_mapping(self.zones)

    def build_windows(self, zone_table: Optional[ZoneTable] = None) -> List[BusinessWindow]:
        """
        Resolve window definitions against a zone table.

        Args:
            zone_table: Table to resolve zone labels with; defaults to the
                table built from this configuration

        Returns:
            List of BusinessWindow objects in configuration order
        """
        table = zone_table if zone_table is not None else self.build_zone_table()

        return [
            BusinessWindow(
                zone=table.offset_for(window.zone),
                start_hour=window.start_hour,
                end_hour=window.end_hour,
                weekday_filter=only_on(*window.days),
            )
            for window in self.windows
        ]


"""
Value objects for time tracking.
Immutable, compared by value, validated on construction.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from timetrack.domain.models.base import ValidationError


WEEK_ID_PATTERN = re.compile(r"^(\d{4})-W(\d{2})$")
DAYS_IN_WEEK = 7
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects.
    Value objects are immutable and are compared by their values.
    """

    def __post_init__(self):
        """Validate value object after creation."""
        self.validate()

    @abstractmethod
    def validate(self) -> None:
        """Validate the value object's state."""
        pass


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """Closed interval between two timestamps."""

    start: datetime
    end: datetime

    def validate(self) -> None:
        """End must be strictly after start."""
        if self.end <= self.start:
            raise ValidationError("End time must be after start time", "end_time")

    @property
    def duration_seconds(self) -> int:
        return int((self.end - self.start).total_seconds())

    @property
    def duration_hours(self) -> float:
        return self.duration_seconds / 3600


@dataclass(frozen=True, order=True)
class WeekId(ValueObject):
    """
    ISO-8601 week identifier, rendered as ``YYYY-Www``.

    Weeks start on Monday and week 1 is the week holding the year's first
    Thursday, which is what ``date.isocalendar`` implements.
    """

    year: int
    week: int

    def validate(self) -> None:
        if not 1 <= self.year <= 9999:
            raise ValidationError(f"Invalid ISO year: {self.year}", "week_id")
        try:
            date.fromisocalendar(self.year, self.week, 1)
        except ValueError:
            raise ValidationError(
                f"Week {self.week} does not exist in ISO year {self.year}", "week_id"
            )

    @classmethod
    def parse(cls, value: str) -> "WeekId":
        """Parse a ``YYYY-Www`` string."""
        match = WEEK_ID_PATTERN.match(value or "")
        if not match:
            raise ValidationError(
                f"Invalid week id '{value}', expected format YYYY-Www", "week_id"
            )
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_date(cls, value: date) -> "WeekId":
        """Week containing the given calendar date (or datetime)."""
        if isinstance(value, datetime):
            value = value.date()
        iso_year, iso_week, _ = value.isocalendar()
        return cls(iso_year, iso_week)

    def __str__(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}"

    @property
    def start_date(self) -> date:
        """Monday of the week."""
        return date.fromisocalendar(self.year, self.week, 1)

    @property
    def end_date(self) -> date:
        """Sunday of the week."""
        return self.start_date + timedelta(days=DAYS_IN_WEEK - 1)

    @property
    def week_start(self) -> datetime:
        """Monday 00:00:00."""
        return datetime.combine(self.start_date, time.min)

    @property
    def week_end(self) -> datetime:
        """Sunday 23:59:59."""
        return datetime.combine(self.end_date, time(23, 59, 59))

    def day(self, index: int) -> date:
        """Calendar date of a day within the week, Monday being 0."""
        if not isinstance(index, int) or not 0 <= index < DAYS_IN_WEEK:
            raise ValidationError("Day index must be between 0 (Monday) and 6 (Sunday)", "day_index")
        return self.start_date + timedelta(days=index)

    def contains(self, value: date) -> bool:
        if isinstance(value, datetime):
            value = value.date()
        return self.start_date <= value <= self.end_date

    def day_index(self, value: date) -> int:
        """Position of a date inside this week."""
        if not self.contains(value):
            raise ValidationError(f"{value} is not inside week {self}", "date")
        if isinstance(value, datetime):
            value = value.date()
        return (value - self.start_date).days


def get_week_id(value: date) -> str:
    """ISO week id string of a date, e.g. ``2026-W05``."""
    return str(WeekId.from_date(value))


def format_duration(seconds: Optional[int]) -> str:
    """Render seconds as ``HH:MM:SS``."""
    seconds = max(0, int(seconds or 0))
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"

"""
TimeLog domain model.
A finalized worked interval, entered manually or produced by stopping a timer.
"""

from datetime import datetime, date
from typing import Optional, Dict, Any
from enum import Enum

from timetrack.domain.models.base import BaseEntity, ValidationError
from timetrack.domain.models.value_objects import TimeRange, WeekId


MAX_DESCRIPTION_LENGTH = 500


class TimeLogSource(str, Enum):
    """Where a time log came from."""
    MANUAL = "manual"
    TIMER = "timer"


class TimeLog(BaseEntity):
    """
    TimeLog entity.
    Duration is always derived from the closed time range.
    """

    def __init__(
        self,
        user_id: str,
        task_id: str,
        project_id: str,
        log_date: date,
        started_at: datetime,
        ended_at: datetime,
        source: TimeLogSource = TimeLogSource.MANUAL,
        description: Optional[str] = None,
        **kwargs
    ):
        super().__init__(**kwargs)

        self.user_id = user_id
        self.task_id = task_id
        self.project_id = project_id
        self.log_date = log_date
        self.started_at = started_at
        self.ended_at = ended_at
        self.source = TimeLogSource(source)
        self.description = description

        self.validate()

    def validate(self) -> None:
        """Validate time log state."""
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")

        if not self.task_id:
            raise ValidationError("Task ID is required", "task_id")

        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")

        if self.log_date is None:
            raise ValidationError("Date is required", "date")

        # Raises when end <= start
        TimeRange(self.started_at, self.ended_at)

        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description too long (max {MAX_DESCRIPTION_LENGTH} characters)", "description"
            )

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(self.started_at, self.ended_at)

    @property
    def duration_seconds(self) -> int:
        return self.time_range.duration_seconds

    @property
    def duration_hours(self) -> float:
        return self.duration_seconds / 3600

    @property
    def week_id(self) -> WeekId:
        return WeekId.from_date(self.log_date)

    @property
    def is_manual(self) -> bool:
        return self.source == TimeLogSource.MANUAL

    def reschedule(
        self,
        started_at: Optional[datetime] = None,
        ended_at: Optional[datetime] = None,
        description: Optional[str] = None
    ) -> None:
        """Change the interval and/or description of the log."""
        new_start = started_at or self.started_at
        new_end = ended_at or self.ended_at
        TimeRange(new_start, new_end)

        self.started_at = new_start
        self.ended_at = new_end
        if description is not None:
            self.description = description

        self.validate()
        self.mark_as_updated()

    @classmethod
    def from_timer(
        cls,
        user_id: str,
        task_id: str,
        project_id: str,
        started_at: datetime,
        ended_at: datetime,
        description: str
    ) -> "TimeLog":
        """Materialize a stopped timer session."""
        return cls(
            user_id=user_id,
            task_id=task_id,
            project_id=project_id,
            log_date=started_at.date(),
            started_at=started_at,
            ended_at=ended_at,
            source=TimeLogSource.TIMER,
            description=description,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = super().to_dict()
        data["log_date"] = self.log_date.isoformat()
        data["duration_seconds"] = self.duration_seconds
        data["duration_hours"] = self.duration_hours
        data["week_id"] = str(self.week_id)
        return data

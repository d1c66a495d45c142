"""
Time log DTOs.
"""

from typing import Dict, List, Optional
from datetime import datetime, date
from pydantic import Field

from timetrack.application.dto.base_dto import BaseDTO, RequestDTO, ResponseDTO, UtcDatetime
from timetrack.domain.models.time_log import TimeLog
from timetrack.domain.models.value_objects import WEEKDAY_LABELS
from timetrack.domain.services.timesheet_aggregator import WeekGrid


class CreateTimeLogRequestDTO(RequestDTO):
    """Request DTO for creating a manual time log."""

    task_id: str = Field(..., min_length=1)
    log_date: date = Field(..., alias="date")
    start_time: UtcDatetime
    end_time: UtcDatetime
    description: Optional[str] = Field(default=None, max_length=500)
    is_manual: bool = True


class UpdateTimeLogRequestDTO(RequestDTO):
    """Request DTO for editing a time log."""

    start_time: Optional[UtcDatetime] = None
    end_time: Optional[UtcDatetime] = None
    description: Optional[str] = Field(default=None, max_length=500)


class TimeLogResponseDTO(ResponseDTO):
    """Response DTO for a time log."""

    user_id: str
    task_id: str
    project_id: str
    log_date: date = Field(..., alias="date")
    start_time: datetime
    end_time: datetime
    duration_seconds: int
    duration_hours: float
    source: str
    is_manual: bool
    description: Optional[str] = None
    week_id: str

    @classmethod
    def from_domain(cls, time_log: TimeLog) -> "TimeLogResponseDTO":
        return cls(
            id=time_log.id,
            user_id=time_log.user_id,
            task_id=time_log.task_id,
            project_id=time_log.project_id,
            log_date=time_log.log_date,
            start_time=time_log.started_at,
            end_time=time_log.ended_at,
            duration_seconds=time_log.duration_seconds,
            duration_hours=round(time_log.duration_hours, 2),
            source=time_log.source.value,
            is_manual=time_log.is_manual,
            description=time_log.description,
            week_id=str(time_log.week_id),
            created_at=time_log.created_at,
            updated_at=time_log.updated_at,
        )


class DeletedTimeLogResponseDTO(BaseDTO):
    id: int


class WeekGridRowDTO(BaseDTO):
    task_id: str
    project_id: str
    hours: Dict[str, float]
    total: float


class WeekGridResponseDTO(BaseDTO):
    """Task x weekday hours for one week."""

    user_id: str
    week_id: str
    week_start: date
    week_end: date
    entries: List[WeekGridRowDTO]
    daily_totals: Dict[str, float]
    weekly_total: float

    @classmethod
    def from_domain(cls, grid: WeekGrid) -> "WeekGridResponseDTO":
        return cls(
            user_id=grid.user_id,
            week_id=str(grid.week_id),
            week_start=grid.week_id.start_date,
            week_end=grid.week_id.end_date,
            entries=[
                WeekGridRowDTO(
                    task_id=row.task_id,
                    project_id=row.project_id,
                    hours=dict(zip(WEEKDAY_LABELS, row.hours)),
                    total=row.total,
                )
                for row in grid.rows
            ],
            daily_totals=dict(zip(WEEKDAY_LABELS, grid.daily_totals)),
            weekly_total=grid.weekly_total,
        )

"""
Timesheet DTOs.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import Field

from timetrack.application.dto.base_dto import RequestDTO, ResponseDTO, BaseDTO
from timetrack.application.dto.time_log_dto import TimeLogResponseDTO
from timetrack.domain.models.timesheet import Timesheet
from timetrack.domain.services.timesheet_aggregator import CellEntry, WeeklyTimesheet


class TimesheetCellDTO(BaseDTO):
    """One grid cell: hours worked on a task on a weekday (0 = Monday)."""

    task_id: str = Field(..., min_length=1)
    day_index: int
    duration: float = Field(..., allow_inf_nan=False)
    project_id: Optional[str] = None

    def to_domain(self) -> CellEntry:
        return CellEntry(
            task_id=self.task_id,
            day_index=self.day_index,
            duration_hours=self.duration,
            project_id=self.project_id,
        )


class SaveTimesheetRequestDTO(RequestDTO):
    timesheet_id: int
    entries: List[TimesheetCellDTO] = Field(default_factory=list)


class SubmitTimesheetRequestDTO(RequestDTO):
    """Submit either a timesheet by id or the caller's sheet for a week."""

    timesheet_id: Optional[int] = None
    week_id: Optional[str] = None


class RejectTimesheetRequestDTO(RequestDTO):
    reason: Optional[str] = Field(default=None, max_length=1000)


class TimesheetResponseDTO(ResponseDTO):
    """Response DTO for a weekly timesheet."""

    user_id: str
    week_id: str
    week_start: datetime
    week_end: datetime
    total_hours: float
    entry_count: int
    status: str
    rejection_reason: Optional[str] = None
    submitted_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    approved_by: Optional[str] = None
    reviewed_by: Optional[str] = None
    entries: Optional[List[TimeLogResponseDTO]] = None

    @classmethod
    def from_domain(cls, timesheet: Timesheet) -> "TimesheetResponseDTO":
        return cls(
            id=timesheet.id,
            user_id=timesheet.user_id,
            week_id=str(timesheet.week_id),
            week_start=timesheet.week_start,
            week_end=timesheet.week_end,
            total_hours=timesheet.total_hours,
            entry_count=timesheet.entry_count,
            status=timesheet.status.value,
            rejection_reason=timesheet.rejection_reason,
            submitted_at=timesheet.submitted_at,
            approved_at=timesheet.approved_at,
            approved_by=timesheet.approved_by,
            reviewed_by=timesheet.reviewed_by,
            created_at=timesheet.created_at,
            updated_at=timesheet.updated_at,
        )

    @classmethod
    def from_weekly(cls, weekly: WeeklyTimesheet) -> "TimesheetResponseDTO":
        response = cls.from_domain(weekly.timesheet)
        response.entries = [TimeLogResponseDTO.from_domain(log) for log in weekly.logs]
        return response

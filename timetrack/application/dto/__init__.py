"""
Data transfer objects for the application layer.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO
from .timer_dto import StartTimerRequestDTO, ActiveTimerResponseDTO, TimerDiscardedResponseDTO
from .time_log_dto import (
    CreateTimeLogRequestDTO,
    UpdateTimeLogRequestDTO,
    TimeLogResponseDTO,
    DeletedTimeLogResponseDTO,
    WeekGridRowDTO,
    WeekGridResponseDTO,
)
from .timesheet_dto import (
    TimesheetCellDTO,
    SaveTimesheetRequestDTO,
    SubmitTimesheetRequestDTO,
    RejectTimesheetRequestDTO,
    TimesheetResponseDTO,
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "StartTimerRequestDTO",
    "ActiveTimerResponseDTO",
    "TimerDiscardedResponseDTO",
    "CreateTimeLogRequestDTO",
    "UpdateTimeLogRequestDTO",
    "TimeLogResponseDTO",
    "DeletedTimeLogResponseDTO",
    "WeekGridRowDTO",
    "WeekGridResponseDTO",
    "TimesheetCellDTO",
    "SaveTimesheetRequestDTO",
    "SubmitTimesheetRequestDTO",
    "RejectTimesheetRequestDTO",
    "TimesheetResponseDTO",
]

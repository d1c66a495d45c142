"""
Application layer use cases.
Time tracking and timesheet approval commands and queries.
"""

from .base_use_case import BaseUseCase, QueryUseCase, CommandUseCase
from .timer_use_cases import (
    StartTimerUseCase,
    StopTimerUseCase,
    DiscardTimerUseCase,
    GetActiveTimerUseCase,
)
from .time_log_use_cases import (
    TimeLogUpdate,
    WeekGridQuery,
    CreateTimeLogUseCase,
    UpdateTimeLogUseCase,
    DeleteTimeLogUseCase,
    ListUserTimeLogsUseCase,
    ListTaskTimeLogsUseCase,
    GetWeekGridUseCase,
)
from .timesheet_use_cases import (
    TimesheetWeekQuery,
    TimesheetReview,
    GetWeeklyTimesheetUseCase,
    SaveTimesheetEntriesUseCase,
    SubmitTimesheetUseCase,
    ApproveTimesheetUseCase,
    RejectTimesheetUseCase,
    ListPendingTimesheetsUseCase,
)

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",

    # Timer
    "StartTimerUseCase",
    "StopTimerUseCase",
    "DiscardTimerUseCase",
    "GetActiveTimerUseCase",

    # Time logs
    "TimeLogUpdate",
    "WeekGridQuery",
    "CreateTimeLogUseCase",
    "UpdateTimeLogUseCase",
    "DeleteTimeLogUseCase",
    "ListUserTimeLogsUseCase",
    "ListTaskTimeLogsUseCase",
    "GetWeekGridUseCase",

    # Timesheets
    "TimesheetWeekQuery",
    "TimesheetReview",
    "GetWeeklyTimesheetUseCase",
    "SaveTimesheetEntriesUseCase",
    "SubmitTimesheetUseCase",
    "ApproveTimesheetUseCase",
    "RejectTimesheetUseCase",
    "ListPendingTimesheetsUseCase",
]

"""
Domain services for the time tracking service.
This module exports all domain services for complex business logic.
"""

from .authorization import TimesheetAction, authorize, is_allowed
from .timesheet_aggregator import (
    TimesheetAggregator,
    CellEntry,
    WeeklyTimesheet,
    WeekGrid,
    GridRow,
)
from .timer_service import TimerService
from .time_log_service import TimeLogService
from .approval_workflow import ApprovalWorkflow

__all__ = [
    "TimesheetAction",
    "authorize",
    "is_allowed",
    "TimesheetAggregator",
    "CellEntry",
    "WeeklyTimesheet",
    "WeekGrid",
    "GridRow",
    "TimerService",
    "TimeLogService",
    "ApprovalWorkflow",
]

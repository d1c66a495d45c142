"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .time_log_repository import TimeLogRepository
from .timer_session_repository import TimerSessionRepository
from .timesheet_repository import TimesheetRepository
from .unit_of_work import UnitOfWork

__all__ = [
    "TimeLogRepository",
    "TimerSessionRepository",
    "TimesheetRepository",
    "UnitOfWork",
]

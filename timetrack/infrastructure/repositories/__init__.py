"""
SQLAlchemy implementations of the domain repositories.
"""

from .time_log_repository import SQLAlchemyTimeLogRepository
from .timer_session_repository import SQLAlchemyTimerSessionRepository
from .timesheet_repository import SQLAlchemyTimesheetRepository

__all__ = [
    "SQLAlchemyTimeLogRepository",
    "SQLAlchemyTimerSessionRepository",
    "SQLAlchemyTimesheetRepository",
]

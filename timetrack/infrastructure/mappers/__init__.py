"""
Mappers between domain entities and SQLAlchemy models.
"""

from .time_log_mapper import TimeLogMapper
from .timer_session_mapper import TimerSessionMapper
from .timesheet_mapper import TimesheetMapper

__all__ = [
    "TimeLogMapper",
    "TimerSessionMapper",
    "TimesheetMapper",
]

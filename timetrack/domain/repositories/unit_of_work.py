"""
Unit of work interface.
Groups the repositories touched by one command under a single transaction.
"""

from abc import ABC, abstractmethod

from .time_log_repository import TimeLogRepository
from .timer_session_repository import TimerSessionRepository
from .timesheet_repository import TimesheetRepository


class UnitOfWork(ABC):
    """Transaction boundary shared by the domain services."""

    time_logs: TimeLogRepository
    timer_sessions: TimerSessionRepository
    timesheets: TimesheetRepository

    def __enter__(self) -> "UnitOfWork":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is not None:
            self.rollback()

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass

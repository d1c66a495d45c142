"""
Time log repository interface.
Defines the contract for time log persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from datetime import date

from timetrack.domain.models.time_log import TimeLog


class TimeLogRepository(ABC):
    """
    Repository interface for TimeLog entity.
    """

    @abstractmethod
    def save(self, time_log: TimeLog) -> TimeLog:
        """
        Insert or update a time log.
        Returns the log with its identifier set.
        """
        pass

    @abstractmethod
    def get_by_id(self, log_id: int) -> Optional[TimeLog]:
        """
        Find a time log by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    def delete(self, log_id: int) -> bool:
        """
        Delete a time log by ID.
        Returns True if deleted, False if not found.
        """
        pass

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[TimeLog]:
        """All logs of a user, newest first."""
        pass

    @abstractmethod
    def list_for_task(self, task_id: str) -> List[TimeLog]:
        """All logs booked against a task, newest first."""
        pass

    @abstractmethod
    def list_for_user_between(self, user_id: str, start_date: date, end_date: date) -> List[TimeLog]:
        """Logs of a user whose date falls in the inclusive range, oldest first."""
        pass

    @abstractmethod
    def list_cell(self, user_id: str, task_id: str, log_date: date) -> List[TimeLog]:
        """Logs forming one (user, task, date) grid cell."""
        pass

    @abstractmethod
    def summarize_for_user_between(self, user_id: str, start_date: date, end_date: date) -> Tuple[int, int]:
        """
        Aggregate a user's logs over an inclusive date range.
        Returns (total seconds, number of logs).
        """
        pass

    @abstractmethod
    def seconds_on_date(self, user_id: str, log_date: date, exclude_ids: Optional[List[int]] = None) -> int:
        """Seconds already logged by a user on one day."""
        pass

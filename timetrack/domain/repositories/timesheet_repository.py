"""
Timesheet repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from timetrack.domain.models.timesheet import Timesheet, TimesheetStatus
from timetrack.domain.models.value_objects import WeekId


class TimesheetRepository(ABC):
    """
    Repository interface for Timesheet entity.
    (user_id, week_id) is unique.
    """

    @abstractmethod
    def save(self, timesheet: Timesheet) -> Timesheet:
        """Update an existing timesheet."""
        pass

    @abstractmethod
    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        pass

    @abstractmethod
    def get_by_user_and_week(self, user_id: str, week_id: WeekId) -> Optional[Timesheet]:
        pass

    @abstractmethod
    def add_if_absent(self, timesheet: Timesheet) -> Timesheet:
        """
        Insert a new timesheet unless one already exists for its user and week.
        Returns whichever row ends up stored.
        """
        pass

    @abstractmethod
    def list_by_status(self, status: TimesheetStatus) -> List[Timesheet]:
        """Timesheets in a status, most recently submitted first."""
        pass

"""
Active timer session repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from timetrack.domain.models.timer_session import ActiveTimerSession


class TimerSessionRepository(ABC):
    """
    Repository interface for ActiveTimerSession.
    A user holds at most one session; implementations must enforce this at
    the storage level.
    """

    @abstractmethod
    def get_active(self, user_id: str) -> Optional[ActiveTimerSession]:
        """Return the user's running session, if any."""
        pass

    @abstractmethod
    def add(self, session: ActiveTimerSession) -> ActiveTimerSession:
        """
        Persist a new session.
        Raises ConflictError when the user already has one.
        """
        pass

    @abstractmethod
    def delete(self, session_id: int) -> bool:
        """
        Remove a session.
        Returns True if deleted, False if not found.
        """
        pass

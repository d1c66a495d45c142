"""
Ports to the services this one depends on.
Task ownership, user roles and notification delivery live elsewhere.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from timetrack.domain.models.user import UserRole


@dataclass(frozen=True)
class TaskRef:
    """What the time tracking core needs to know about a task."""

    task_id: str
    project_id: str
    title: Optional[str] = None


class TaskDirectory(ABC):
    """Read access to tasks and their assignees."""

    @abstractmethod
    def get_task(self, task_id: str) -> Optional[TaskRef]:
        """Return the task or None when it does not exist."""
        pass

    @abstractmethod
    def is_assigned(self, user_id: str, task_id: str) -> bool:
        """Whether the user is an assignee of the task."""
        pass


class UserDirectory(ABC):
    """Resolves a user's organisation role."""

    @abstractmethod
    def get_user_role(self, user_id: str) -> Optional[UserRole]:
        """Return the role, or None for unknown users."""
        pass


class Notifier(ABC):
    """Delivers notification payloads to users."""

    @abstractmethod
    def notify(self, event: Dict[str, Any]) -> None:
        pass

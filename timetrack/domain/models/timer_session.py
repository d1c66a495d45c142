"""
Active timer session domain model.
"""

from datetime import datetime
from typing import Optional

from timetrack.domain.models.base import BaseEntity, ValidationError
from timetrack.domain.models.value_objects import format_duration


class ActiveTimerSession(BaseEntity):
    """
    A live stopwatch for one worker.

    Only the start instant is persisted; elapsed time is always computed
    against the caller's clock.
    """

    def __init__(
        self,
        user_id: str,
        task_id: str,
        project_id: str,
        started_at: datetime,
        description: Optional[str] = None,
        is_active: bool = True,
        **kwargs
    ):
        super().__init__(**kwargs)

        self.user_id = user_id
        self.task_id = task_id
        self.project_id = project_id
        self.started_at = started_at
        self.description = description
        self.is_active = is_active

        self.validate()

    def validate(self) -> None:
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")
        if not self.task_id:
            raise ValidationError("Task ID is required", "task_id")
        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")
        if self.started_at is None:
            raise ValidationError("Start time is required", "started_at")

    def elapsed_seconds(self, now: datetime) -> int:
        """Whole seconds since the session started, never negative."""
        return max(0, int((now - self.started_at).total_seconds()))

    def formatted_elapsed(self, now: datetime) -> str:
        return format_duration(self.elapsed_seconds(now))

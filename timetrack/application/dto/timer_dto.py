"""
Timer DTOs.
"""

from typing import Optional
from datetime import datetime
from pydantic import Field

from timetrack.application.dto.base_dto import RequestDTO, ResponseDTO
from timetrack.domain.models.timer_session import ActiveTimerSession


class StartTimerRequestDTO(RequestDTO):
    """Request DTO for starting a timer."""

    task_id: str = Field(..., min_length=1, description="Task to track time against")
    project_id: Optional[str] = Field(default=None, description="Defaults to the task's project")
    description: Optional[str] = Field(default=None, max_length=500)


class ActiveTimerResponseDTO(ResponseDTO):
    """Running timer with its elapsed time at read time."""

    user_id: str
    task_id: str
    project_id: str
    description: Optional[str] = None
    started_at: datetime
    is_active: bool = True
    elapsed_seconds: int = 0
    elapsed_formatted: str = "00:00:00"

    @classmethod
    def from_domain(cls, session: ActiveTimerSession, now: datetime) -> "ActiveTimerResponseDTO":
        return cls(
            id=session.id,
            user_id=session.user_id,
            task_id=session.task_id,
            project_id=session.project_id,
            description=session.description,
            started_at=session.started_at,
            is_active=session.is_active,
            elapsed_seconds=session.elapsed_seconds(now),
            elapsed_formatted=session.formatted_elapsed(now),
            created_at=session.created_at,
            updated_at=session.updated_at,
        )


class TimerDiscardedResponseDTO(ResponseDTO):
    message: str = "Timer discarded"

"""
Timer session mapper.
"""

from timetrack.domain.models.timer_session import ActiveTimerSession
from timetrack.infrastructure.db.models import TimerSessionModel


class TimerSessionMapper:
    """Maps between ActiveTimerSession and TimerSessionModel."""

    def domain_to_model(self, session: ActiveTimerSession) -> TimerSessionModel:
        return TimerSessionModel(
            id=session.id,
            user_id=session.user_id,
            task_id=session.task_id,
            project_id=session.project_id,
            started_at=session.started_at,
            is_active=session.is_active,
            description=session.description,
            created_at=session.created_at,
            updated_at=session.updated_at,
        )

    def model_to_domain(self, model: TimerSessionModel) -> ActiveTimerSession:
        return ActiveTimerSession(
            id=model.id,
            user_id=model.user_id,
            task_id=model.task_id,
            project_id=model.project_id,
            started_at=model.started_at,
            is_active=bool(model.is_active),
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

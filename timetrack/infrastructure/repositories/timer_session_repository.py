"""
Timer session repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from timetrack.domain.models.base import ConflictError
from timetrack.domain.models.timer_session import ActiveTimerSession
from timetrack.domain.repositories.timer_session_repository import (
    TimerSessionRepository as TimerSessionRepositoryInterface,
)
from timetrack.infrastructure.db.models import TimerSessionModel
from timetrack.infrastructure.mappers.timer_session_mapper import TimerSessionMapper


logger = logging.getLogger(__name__)


class SQLAlchemyTimerSessionRepository(TimerSessionRepositoryInterface):
    """SQLAlchemy implementation of the timer session repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimerSessionMapper()

    def get_active(self, user_id: str) -> Optional[ActiveTimerSession]:
        model = self.session.query(TimerSessionModel).filter_by(
            user_id=user_id,
            is_active=True
        ).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def add(self, timer: ActiveTimerSession) -> ActiveTimerSession:
        """Insert a session; the unique user constraint decides concurrent starts."""
        model = self.mapper.domain_to_model(timer)
        try:
            with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError:
            logger.warning(f"Concurrent timer start rejected for user {timer.user_id}")
            raise ConflictError("You already have an active timer. Stop it first.")

        timer.id = model.id
        return timer

    def delete(self, session_id: int) -> bool:
        model = self.session.query(TimerSessionModel).filter_by(id=session_id).first()
        if not model:
            return False

        self.session.delete(model)
        self.session.flush()
        return True

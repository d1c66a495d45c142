"""
SQLAlchemy unit of work.
One session transaction per command.
"""

import logging
from sqlalchemy.orm import Session

from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.infrastructure.repositories.time_log_repository import SQLAlchemyTimeLogRepository
from timetrack.infrastructure.repositories.timer_session_repository import SQLAlchemyTimerSessionRepository
from timetrack.infrastructure.repositories.timesheet_repository import SQLAlchemyTimesheetRepository


logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Binds the repositories to a single SQLAlchemy session."""

    def __init__(self, session: Session):
        self.session = session
        self.time_logs = SQLAlchemyTimeLogRepository(session)
        self.timer_sessions = SQLAlchemyTimerSessionRepository(session)
        self.timesheets = SQLAlchemyTimesheetRepository(session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        logger.debug("Rolling back unit of work")
        self.session.rollback()

"""
Timesheet repository implementation using SQLAlchemy.
"""

import logging
from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import desc

from timetrack.domain.models.base import EntityNotFoundError
from timetrack.domain.models.timesheet import Timesheet, TimesheetStatus
from timetrack.domain.models.value_objects import WeekId
from timetrack.domain.repositories.timesheet_repository import (
    TimesheetRepository as TimesheetRepositoryInterface,
)
from timetrack.infrastructure.db.models import TimesheetModel
from timetrack.infrastructure.mappers.timesheet_mapper import TimesheetMapper


logger = logging.getLogger(__name__)


class SQLAlchemyTimesheetRepository(TimesheetRepositoryInterface):
    """SQLAlchemy implementation of timesheet repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimesheetMapper()

    def save(self, timesheet: Timesheet) -> Timesheet:
        model = self.session.query(TimesheetModel).filter_by(id=timesheet.id).first()
        if not model:
            raise EntityNotFoundError("Timesheet", timesheet.id)

        self.mapper.update_model(model, timesheet)
        self.session.flush()
        return timesheet

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        model = self.session.query(TimesheetModel).filter_by(id=timesheet_id).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def get_by_user_and_week(self, user_id: str, week_id: WeekId) -> Optional[Timesheet]:
        model = self.session.query(TimesheetModel).filter_by(
            user_id=user_id,
            week_id=str(week_id)
        ).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def add_if_absent(self, timesheet: Timesheet) -> Timesheet:
        """Insert inside a savepoint; on a lost race return the winner's row."""
        model = self.mapper.domain_to_model(timesheet)
        try:
            with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError:
            logger.info(
                f"Timesheet for user {timesheet.user_id}, week {timesheet.week_id} "
                f"created concurrently; using the stored row"
            )
            existing = self.get_by_user_and_week(timesheet.user_id, timesheet.week_id)
            if existing is None:
                raise
            return existing

        timesheet.id = model.id
        return timesheet

    def list_by_status(self, status: TimesheetStatus) -> List[Timesheet]:
        models = self.session.query(TimesheetModel).filter_by(
            status=status
        ).order_by(desc(TimesheetModel.submitted_at), desc(TimesheetModel.id)).all()
        return [self.mapper.model_to_domain(model) for model in models]

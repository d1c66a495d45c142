"""
Time log repository implementation using SQLAlchemy.
"""

from typing import Optional, List, Tuple
from datetime import date
from sqlalchemy.orm import Session
from sqlalchemy import func, and_, desc, asc

from timetrack.domain.models.time_log import TimeLog
from timetrack.domain.repositories.time_log_repository import TimeLogRepository as TimeLogRepositoryInterface
from timetrack.domain.models.base import EntityNotFoundError
from timetrack.infrastructure.db.models import TimeLogModel
from timetrack.infrastructure.mappers.time_log_mapper import TimeLogMapper


class SQLAlchemyTimeLogRepository(TimeLogRepositoryInterface):
    """SQLAlchemy implementation of time log repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeLogMapper()

    def save(self, time_log: TimeLog) -> TimeLog:
        """Save a time log entity."""
        if time_log.is_new:
            model = self.mapper.domain_to_model(time_log)
            self.session.add(model)
        else:
            model = self.session.query(TimeLogModel).filter_by(id=time_log.id).first()
            if not model:
                raise EntityNotFoundError("TimeLog", time_log.id)
            self.mapper.update_model(model, time_log)

        self.session.flush()
        if time_log.is_new:
            time_log.id = model.id
        return time_log

    def get_by_id(self, log_id: int) -> Optional[TimeLog]:
        """Get time log by ID."""
        model = self.session.query(TimeLogModel).filter_by(id=log_id).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def delete(self, log_id: int) -> bool:
        """Delete time log by ID."""
        model = self.session.query(TimeLogModel).filter_by(id=log_id).first()
        if not model:
            return False

        self.session.delete(model)
        self.session.flush()
        return True

    def list_for_user(self, user_id: str) -> List[TimeLog]:
        models = self.session.query(TimeLogModel).filter_by(
            user_id=user_id
        ).order_by(desc(TimeLogModel.log_date), desc(TimeLogModel.started_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def list_for_task(self, task_id: str) -> List[TimeLog]:
        models = self.session.query(TimeLogModel).filter_by(
            task_id=task_id
        ).order_by(desc(TimeLogModel.log_date), desc(TimeLogModel.started_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def list_for_user_between(self, user_id: str, start_date: date, end_date: date) -> List[TimeLog]:
        """Get time logs within an inclusive date range."""
        models = self.session.query(TimeLogModel).filter(
            and_(
                TimeLogModel.user_id == user_id,
                TimeLogModel.log_date >= start_date,
                TimeLogModel.log_date <= end_date
            )
        ).order_by(asc(TimeLogModel.log_date), asc(TimeLogModel.started_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def list_cell(self, user_id: str, task_id: str, log_date: date) -> List[TimeLog]:
        models = self.session.query(TimeLogModel).filter_by(
            user_id=user_id,
            task_id=task_id,
            log_date=log_date
        ).order_by(asc(TimeLogModel.started_at)).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def summarize_for_user_between(self, user_id: str, start_date: date, end_date: date) -> Tuple[int, int]:
        total, count = self.session.query(
            func.coalesce(func.sum(TimeLogModel.duration_seconds), 0),
            func.count(TimeLogModel.id)
        ).filter(
            and_(
                TimeLogModel.user_id == user_id,
                TimeLogModel.log_date >= start_date,
                TimeLogModel.log_date <= end_date
            )
        ).one()
        return int(total or 0), int(count or 0)

    def seconds_on_date(self, user_id: str, log_date: date, exclude_ids: Optional[List[int]] = None) -> int:
        query = self.session.query(
            func.coalesce(func.sum(TimeLogModel.duration_seconds), 0)
        ).filter(
            and_(
                TimeLogModel.user_id == user_id,
                TimeLogModel.log_date == log_date
            )
        )
        if exclude_ids:
            query = query.filter(TimeLogModel.id.notin_(exclude_ids))
        return int(query.scalar() or 0)

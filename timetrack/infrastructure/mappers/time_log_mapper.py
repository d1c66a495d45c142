"""
Time log mapper for converting between domain entities and database models.
"""

from timetrack.domain.models.time_log import TimeLog, TimeLogSource
from timetrack.infrastructure.db.models import TimeLogModel


class TimeLogMapper:
    """Maps between TimeLog domain entity and TimeLogModel database model."""

    def domain_to_model(self, time_log: TimeLog) -> TimeLogModel:
        """Convert TimeLog domain entity to a new TimeLogModel."""
        model = TimeLogModel(id=time_log.id, created_at=time_log.created_at)
        self.update_model(model, time_log)
        return model

    def update_model(self, model: TimeLogModel, time_log: TimeLog) -> None:
        """Copy mutable entity state onto an existing row."""
        model.user_id = time_log.user_id
        model.task_id = time_log.task_id
        model.project_id = time_log.project_id
        model.log_date = time_log.log_date
        model.started_at = time_log.started_at
        model.ended_at = time_log.ended_at
        model.duration_seconds = time_log.duration_seconds
        model.source = time_log.source
        model.description = time_log.description
        model.updated_at = time_log.updated_at

    def model_to_domain(self, model: TimeLogModel) -> TimeLog:
        """Convert TimeLogModel to TimeLog domain entity."""
        return TimeLog(
            id=model.id,
            user_id=model.user_id,
            task_id=model.task_id,
            project_id=model.project_id,
            log_date=model.log_date,
            started_at=model.started_at,
            ended_at=model.ended_at,
            source=TimeLogSource(model.source) if model.source else TimeLogSource.MANUAL,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

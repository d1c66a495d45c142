"""
Manual time logging.
Creates, edits and removes finalized time logs outside of the timer.
"""

import logging
from datetime import datetime, date
from typing import Callable, List, Optional

from timetrack.domain.models.base import ValidationError, EntityNotFoundError, PermissionDeniedError
from timetrack.domain.models.time_log import TimeLog, TimeLogSource
from timetrack.domain.models.timesheet import Timesheet
from timetrack.domain.models.user import Actor
from timetrack.domain.models.value_objects import TimeRange
from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.domain.services.authorization import (
    TimesheetAction,
    authorize_owner_or,
    is_allowed,
    require_owner,
)
from timetrack.domain.services.timesheet_aggregator import TimesheetAggregator, CellEntry


logger = logging.getLogger(__name__)


class TimeLogService:
    """Domain service for manually entered time."""

    def __init__(
        self,
        uow: UnitOfWork,
        aggregator: TimesheetAggregator,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.uow = uow
        self.aggregator = aggregator
        self.clock = clock or datetime.utcnow

    def create_manual(
        self,
        actor: Actor,
        task_id: str,
        log_date: date,
        started_at: datetime,
        ended_at: datetime,
        description: Optional[str] = None,
    ) -> TimeLog:
        """Record a finished interval typed in by the worker."""
        time_range = TimeRange(started_at, ended_at)

        if log_date > self.clock().date():
            raise ValidationError("Cannot log time for future dates", "date")

        task = self.aggregator.resolve_task(actor, task_id)
        self.aggregator.ensure_within_daily_cap(actor.user_id, log_date, time_range.duration_seconds)

        timesheet = self.aggregator.timesheet_for_date(actor.user_id, log_date)
        timesheet.ensure_accepts_logs()

        time_log = self.uow.time_logs.save(TimeLog(
            user_id=actor.user_id,
            task_id=task_id,
            project_id=task.project_id,
            log_date=log_date,
            started_at=started_at,
            ended_at=ended_at,
            source=TimeLogSource.MANUAL,
            description=description,
        ))
        self.aggregator.recompute(timesheet)

        logger.info(
            f"Manual time log {time_log.id} created by user {actor.user_id} "
            f"on task {task_id} ({time_log.duration_seconds}s)"
        )
        return time_log

    def save_cell(
        self,
        actor: Actor,
        timesheet_id: int,
        task_id: str,
        day_index: int,
        duration_hours: float,
        project_id: Optional[str] = None,
    ) -> Timesheet:
        """Set one grid cell; a zero duration clears it."""
        cell = CellEntry(
            task_id=task_id,
            day_index=day_index,
            duration_hours=duration_hours,
            project_id=project_id,
        )
        return self.aggregator.save_entries(actor, timesheet_id, [cell])

    def list_for_user(self, actor: Actor, user_id: str) -> List[TimeLog]:
        authorize_owner_or(actor, user_id, TimesheetAction.VIEW_OTHERS)
        return self.uow.time_logs.list_for_user(user_id)

    def list_for_task(self, actor: Actor, task_id: str) -> List[TimeLog]:
        """Logs of a task, for its assignees and reviewers."""
        if not self.aggregator.tasks.get_task(task_id):
            raise EntityNotFoundError("Task", task_id)

        if not is_allowed(actor, TimesheetAction.VIEW_OTHERS) and \
                not self.aggregator.tasks.is_assigned(actor.user_id, task_id):
            raise PermissionDeniedError("Not authorized to view time logs of this task")

        return self.uow.time_logs.list_for_task(task_id)

    def update(
        self,
        actor: Actor,
        log_id: int,
        started_at: Optional[datetime] = None,
        ended_at: Optional[datetime] = None,
        description: Optional[str] = None,
    ) -> TimeLog:
        """Edit the interval or description of one's own log."""
        time_log, timesheet = self._load_editable(actor, log_id, "update")

        previous_seconds = time_log.duration_seconds
        time_log.reschedule(started_at=started_at, ended_at=ended_at, description=description)

        if time_log.duration_seconds > previous_seconds:
            self.aggregator.ensure_within_daily_cap(
                actor.user_id, time_log.log_date, time_log.duration_seconds, exclude_ids=[time_log.id]
            )

        time_log = self.uow.time_logs.save(time_log)
        self.aggregator.recompute(timesheet)

        logger.info(f"Time log {time_log.id} updated by user {actor.user_id}")
        return time_log

    def delete(self, actor: Actor, log_id: int) -> TimeLog:
        time_log, timesheet = self._load_editable(actor, log_id, "delete")

        self.uow.time_logs.delete(time_log.id)
        self.aggregator.recompute(timesheet)

        logger.info(f"Time log {time_log.id} deleted by user {actor.user_id}")
        return time_log

    def _load_editable(self, actor: Actor, log_id: int, verb: str):
        time_log = self.uow.time_logs.get_by_id(log_id)
        if not time_log:
            raise EntityNotFoundError("TimeLog", log_id)

        require_owner(actor, time_log.user_id, f"Not authorized to {verb} this time log")

        timesheet = self.aggregator.timesheet_for_date(time_log.user_id, time_log.log_date)
        timesheet.ensure_accepts_logs()
        return time_log, timesheet

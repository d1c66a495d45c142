"""Timer service for live time tracking.
Keeps at most one running stopwatch per worker and turns it into a time log.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from timetrack.domain.collaborators import TaskDirectory
from timetrack.domain.models.base import ValidationError, ConflictError, EntityNotFoundError
from timetrack.domain.models.time_log import TimeLog
from timetrack.domain.models.timer_session import ActiveTimerSession
from timetrack.domain.models.user import Actor
from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.domain.services.timesheet_aggregator import TimesheetAggregator


logger = logging.getLogger(__name__)


class TimerService:
    """
    Domain service for the active timer of each user.
    Elapsed time is never stored; it is derived from the start instant.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tasks: TaskDirectory,
        aggregator: TimesheetAggregator,
        clock: Optional[Callable[[], datetime]] = None,
        min_timer_seconds: int = 60,
        default_description: str = "Timer session",
    ):
        self.uow = uow
        self.tasks = tasks
        self.aggregator = aggregator
        self.clock = clock or datetime.utcnow
        self.min_timer_seconds = min_timer_seconds
        self.default_description = default_description

    def start(
        self,
        actor: Actor,
        task_id: str,
        project_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ActiveTimerSession:
        """Start a timer on a task the actor is assigned to."""
        task = self.aggregator.resolve_task(actor, task_id)

        if self.uow.timer_sessions.get_active(actor.user_id):
            logger.warning(f"User {actor.user_id} tried to start a second timer")
            raise ConflictError("You already have an active timer. Stop it first.")

        session = self.uow.timer_sessions.add(ActiveTimerSession(
            user_id=actor.user_id,
            task_id=task_id,
            project_id=project_id or task.project_id,
            started_at=self.clock(),
            description=description,
        ))
        logger.info(f"Timer {session.id} started by user {actor.user_id} on task {task_id}")
        return session

    def stop(self, actor: Actor) -> TimeLog:
        """
        Stop the actor's timer and record the elapsed interval as a time log.
        On any rejection the session stays active.
        """
        session = self._require_active(actor)
        now = self.clock()
        duration = session.elapsed_seconds(now)

        if duration < self.min_timer_seconds:
            logger.warning(
                f"Timer {session.id} of user {actor.user_id} stopped after {duration}s, "
                f"below the {self.min_timer_seconds}s minimum"
            )
            raise ValidationError(
                f"Timer must run for at least {self.min_timer_seconds} seconds to be saved",
                "duration",
            )

        log_date = session.started_at.date()
        self.aggregator.ensure_within_daily_cap(actor.user_id, log_date, duration)

        timesheet = self.aggregator.timesheet_for_date(actor.user_id, log_date)
        timesheet.ensure_accepts_logs()

        time_log = self.uow.time_logs.save(TimeLog.from_timer(
            user_id=actor.user_id,
            task_id=session.task_id,
            project_id=session.project_id,
            started_at=session.started_at,
            ended_at=now,
            description=session.description or self.default_description,
        ))
        self.uow.timer_sessions.delete(session.id)
        self.aggregator.recompute(timesheet)

        logger.info(
            f"Timer {session.id} stopped by user {actor.user_id}: "
            f"time log {time_log.id} ({time_log.duration_seconds}s)"
        )
        return time_log

    def discard(self, actor: Actor) -> ActiveTimerSession:
        """Drop the actor's timer without recording anything."""
        session = self._require_active(actor)
        self.uow.timer_sessions.delete(session.id)
        logger.info(f"Timer {session.id} discarded by user {actor.user_id}")
        return session

    def get_active(self, actor: Actor) -> Optional[ActiveTimerSession]:
        return self.uow.timer_sessions.get_active(actor.user_id)

    def _require_active(self, actor: Actor) -> ActiveTimerSession:
        session = self.uow.timer_sessions.get_active(actor.user_id)
        if not session:
            raise EntityNotFoundError("Timer", message="No active timer found")
        return session

"""
Weekly timesheet aggregation.
Keeps each timesheet's cached totals in step with the time logs of its week
and implements the grid (task x weekday) editing surface.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, date, time, timedelta
from typing import Callable, Dict, List, Optional, Union

from timetrack.domain.collaborators import TaskDirectory, TaskRef
from timetrack.domain.models.base import (
    ValidationError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from timetrack.domain.models.time_log import TimeLog, TimeLogSource
from timetrack.domain.models.timesheet import Timesheet
from timetrack.domain.models.user import Actor
from timetrack.domain.models.value_objects import WeekId, DAYS_IN_WEEK
from timetrack.domain.repositories.unit_of_work import UnitOfWork
from timetrack.domain.services.authorization import (
    TimesheetAction,
    authorize_owner_or,
    require_owner,
)


logger = logging.getLogger(__name__)

MAX_CELL_HOURS = 24.0


@dataclass
class CellEntry:
    """One (task, weekday) cell of the weekly grid, in hours."""

    task_id: str
    day_index: int
    duration_hours: float
    project_id: Optional[str] = None


@dataclass
class WeeklyTimesheet:
    """A timesheet together with the logs it aggregates."""

    timesheet: Timesheet
    logs: List[TimeLog] = field(default_factory=list)


@dataclass
class GridRow:
    task_id: str
    project_id: str
    hours: List[float]
    total: float


@dataclass
class WeekGrid:
    """Hours per task and weekday, Monday first."""

    user_id: str
    week_id: WeekId
    rows: List[GridRow]
    daily_totals: List[float]
    weekly_total: float


def _hours(seconds: int) -> float:
    return round(seconds / 3600, 2)


class TimesheetAggregator:
    """
    Domain service owning timesheet totals.

    ``recompute`` is the only code path that writes a timesheet's totals.
    Nothing here commits; the caller's unit of work does.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tasks: TaskDirectory,
        clock: Optional[Callable[[], datetime]] = None,
        max_daily_hours: float = 24.0,
    ):
        self.uow = uow
        self.tasks = tasks
        self.clock = clock or datetime.utcnow
        self.max_daily_hours = max_daily_hours

    def get_or_create(self, user_id: str, week_id: Union[WeekId, str]) -> Timesheet:
        """Return the user's timesheet for the week, creating a draft if needed."""
        if isinstance(week_id, str):
            week_id = WeekId.parse(week_id)

        existing = self.uow.timesheets.get_by_user_and_week(user_id, week_id)
        if existing:
            return existing

        timesheet = self.uow.timesheets.add_if_absent(Timesheet.create_draft(user_id, week_id))
        logger.info(f"Created draft timesheet {timesheet.id} for user {user_id}, week {week_id}")
        return self.recompute(timesheet)

    def timesheet_for_date(self, user_id: str, log_date: date) -> Timesheet:
        return self.get_or_create(user_id, WeekId.from_date(log_date))

    def recompute(self, timesheet: Timesheet) -> Timesheet:
        """Set the cached totals to the sum of the week's logs."""
        week = timesheet.week_id
        total_seconds, entry_count = self.uow.time_logs.summarize_for_user_between(
            timesheet.user_id, week.start_date, week.end_date
        )
        timesheet.apply_totals(total_seconds, entry_count, self.clock())
        logger.debug(
            f"Recomputed timesheet {timesheet.id}: {timesheet.total_hours}h over {entry_count} log(s)"
        )
        return self.uow.timesheets.save(timesheet)

    def ensure_within_daily_cap(
        self,
        user_id: str,
        log_date: date,
        added_seconds: int,
        exclude_ids: Optional[List[int]] = None,
    ) -> None:
        """Reject writes that would push a user's day past the configured cap."""
        logged = self.uow.time_logs.seconds_on_date(user_id, log_date, exclude_ids)
        if logged + added_seconds > self.max_daily_hours * 3600:
            logger.warning(
                f"Daily cap hit for user {user_id} on {log_date}: "
                f"{_hours(logged)}h logged, {_hours(added_seconds)}h requested"
            )
            raise ValidationError(
                f"Daily limit of {self.max_daily_hours:g} hours exceeded for {log_date.isoformat()} "
                f"({_hours(logged)} hours already logged)",
                "duration",
            )

    def save_entries(self, actor: Actor, timesheet_id: int, cells: List[CellEntry]) -> Timesheet:
        """
        Apply a batch of grid cells to one timesheet.
        Cells are written in order, so the last write to a cell wins.
        """
        timesheet = self.uow.timesheets.get_by_id(timesheet_id)
        if not timesheet:
            raise EntityNotFoundError("Timesheet", timesheet_id)

        require_owner(actor, timesheet.user_id, "Only the owner can edit this timesheet")
        timesheet.ensure_accepts_logs()

        for cell in cells:
            self._write_cell(actor, timesheet, cell)

        logger.info(f"Saved {len(cells)} cell(s) on timesheet {timesheet.id}")
        return self.recompute(timesheet)

    def get_timesheet(self, actor: Actor, user_id: str, week_id: Union[WeekId, str]) -> WeeklyTimesheet:
        authorize_owner_or(actor, user_id, TimesheetAction.VIEW_OTHERS)

        timesheet = self.get_or_create(user_id, week_id)
        week = timesheet.week_id
        logs = self.uow.time_logs.list_for_user_between(user_id, week.start_date, week.end_date)
        return WeeklyTimesheet(timesheet=timesheet, logs=logs)

    def week_grid(self, actor: Actor, user_id: str, week_id: Union[WeekId, str]) -> WeekGrid:
        """Hours per task and weekday for one user and week."""
        authorize_owner_or(actor, user_id, TimesheetAction.VIEW_OTHERS)
        if isinstance(week_id, str):
            week_id = WeekId.parse(week_id)

        logs = self.uow.time_logs.list_for_user_between(user_id, week_id.start_date, week_id.end_date)

        cells: Dict[str, List[int]] = {}
        projects: Dict[str, str] = {}
        for log in logs:
            row = cells.setdefault(log.task_id, [0] * DAYS_IN_WEEK)
            row[week_id.day_index(log.log_date)] += log.duration_seconds
            projects.setdefault(log.task_id, log.project_id)

        rows = [
            GridRow(
                task_id=task_id,
                project_id=projects[task_id],
                hours=[_hours(seconds) for seconds in seconds_by_day],
                total=_hours(sum(seconds_by_day)),
            )
            for task_id, seconds_by_day in cells.items()
        ]
        daily_seconds = [sum(row[day] for row in cells.values()) for day in range(DAYS_IN_WEEK)]

        return WeekGrid(
            user_id=user_id,
            week_id=week_id,
            rows=rows,
            daily_totals=[_hours(seconds) for seconds in daily_seconds],
            weekly_total=_hours(sum(daily_seconds)),
        )

    def _write_cell(self, actor: Actor, timesheet: Timesheet, cell: CellEntry) -> None:
        """Replace every log of a (user, task, date) cell with a single manual log."""
        if cell.duration_hours is None or not math.isfinite(cell.duration_hours):
            raise ValidationError("Duration must be a number of hours", "duration")
        if cell.duration_hours < 0:
            raise ValidationError("Duration cannot be negative", "duration")
        if cell.duration_hours > MAX_CELL_HOURS:
            raise ValidationError(f"Duration cannot exceed {MAX_CELL_HOURS:g} hours", "duration")

        log_date = timesheet.week_id.day(cell.day_index)
        existing = self.uow.time_logs.list_cell(timesheet.user_id, cell.task_id, log_date)
        seconds = int(round(cell.duration_hours * 3600))
        if seconds == 0 and cell.duration_hours > 0:
            raise ValidationError("Duration is shorter than one second", "duration")

        if seconds == 0:
            for log in existing:
                self.uow.time_logs.delete(log.id)
            return

        task = self.resolve_task(actor, cell.task_id)
        self.ensure_within_daily_cap(
            timesheet.user_id, log_date, seconds, exclude_ids=[log.id for log in existing]
        )

        for log in existing:
            self.uow.time_logs.delete(log.id)

        started_at = datetime.combine(log_date, time.min)
        self.uow.time_logs.save(TimeLog(
            user_id=timesheet.user_id,
            task_id=cell.task_id,
            project_id=cell.project_id or task.project_id,
            log_date=log_date,
            started_at=started_at,
            ended_at=started_at + timedelta(seconds=seconds),
            source=TimeLogSource.MANUAL,
        ))

    def resolve_task(self, actor: Actor, task_id: str) -> TaskRef:
        task = self.tasks.get_task(task_id)
        if not task:
            raise EntityNotFoundError("Task", task_id)
        if not self.tasks.is_assigned(actor.user_id, task_id):
            raise PermissionDeniedError("You are not assigned to this task")
        return task

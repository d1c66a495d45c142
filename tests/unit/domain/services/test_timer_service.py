"""
Unit tests for TimerService against an in-memory database.
"""

import pytest
from datetime import date

from timetrack.application.service_container import ServiceContainer
from timetrack.domain.models.base import (
    ConflictError,
    EntityNotFoundError,
    PermissionDeniedError,
    StateError,
    ValidationError,
)
from timetrack.domain.models.time_log import TimeLogSource
from timetrack.domain.models.timer_session import ActiveTimerSession
from tests.support import NOW, WORKER, OTHER_WORKER, MANAGER


class TestTimerService:
    """Test cases for TimerService."""

    @pytest.fixture(autouse=True)
    def setup(self, services, uow, clock):
        self.services = services
        self.timers = services.timers
        self.uow = uow
        self.clock = clock

    def test_start_uses_task_project(self):
        """Starting a timer stores the clock time and the task's project."""
        session = self.timers.start(WORKER, "t-design", description="wireframes")

        assert session.id is not None
        assert session.project_id == "p-web"
        assert session.started_at == NOW
        assert self.timers.get_active(WORKER).id == session.id

    def test_start_with_explicit_project(self):
        """An explicit project id wins over the task's."""
        session = self.timers.start(WORKER, "t-design", project_id="p-other")
        assert session.project_id == "p-other"

    def test_start_unknown_task(self):
        """Unknown tasks are reported as not found."""
        with pytest.raises(EntityNotFoundError):
            self.timers.start(WORKER, "t-missing")

    def test_start_requires_assignment(self):
        """Workers can only time tasks they are assigned to."""
        with pytest.raises(PermissionDeniedError, match="not assigned"):
            self.timers.start(WORKER, "t-audit")

    def test_second_start_conflicts(self):
        """Only one timer may run per user."""
        self.timers.start(WORKER, "t-design")
        with pytest.raises(ConflictError):
            self.timers.start(WORKER, "t-build")

    def test_other_users_are_independent(self):
        """Each user has their own timer."""
        self.timers.start(WORKER, "t-design")
        self.timers.start(OTHER_WORKER, "t-design")
        assert self.timers.get_active(OTHER_WORKER) is not None

    def test_store_enforces_single_timer(self):
        """The database refuses a second session even when the check is skipped."""
        self.timers.start(WORKER, "t-design")
        with pytest.raises(ConflictError):
            self.uow.timer_sessions.add(ActiveTimerSession(
                user_id=WORKER.user_id, task_id="t-build", project_id="p-web", started_at=NOW
            ))

    def test_stop_creates_timer_log(self):
        """Stopping records the interval and clears the session."""
        self.timers.start(WORKER, "t-design")
        self.clock.advance(hours=2)

        time_log = self.timers.stop(WORKER)

        assert time_log.id is not None
        assert time_log.source == TimeLogSource.TIMER
        assert time_log.duration_seconds == 7200
        assert time_log.log_date == date(2026, 1, 30)
        assert time_log.description == "Timer session"
        assert self.timers.get_active(WORKER) is None

        timesheet = self.uow.timesheets.get_by_user_and_week(WORKER.user_id, time_log.week_id)
        assert timesheet.total_hours == 2.0
        assert timesheet.entry_count == 1

    def test_stop_keeps_session_description(self):
        """The session description is carried over to the log."""
        self.timers.start(WORKER, "t-design", description="wireframes")
        self.clock.advance(minutes=5)
        assert self.timers.stop(WORKER).description == "wireframes"

    def test_stop_below_minimum_keeps_session(self):
        """Sessions shorter than the minimum are not saved and stay active."""
        self.timers.start(WORKER, "t-design")
        self.clock.advance(seconds=45)

        with pytest.raises(ValidationError, match="at least 60 seconds"):
            self.timers.stop(WORKER)

        assert self.timers.get_active(WORKER) is not None
        assert self.uow.time_logs.list_for_user(WORKER.user_id) == []

    def test_stop_without_session(self):
        """Stopping with nothing running is a not found error."""
        with pytest.raises(EntityNotFoundError, match="No active timer"):
            self.timers.stop(WORKER)

    def test_discard(self):
        """Discarding drops the session without a log."""
        self.timers.start(WORKER, "t-design")
        self.clock.advance(hours=1)

        self.timers.discard(WORKER)

        assert self.timers.get_active(WORKER) is None
        assert self.uow.time_logs.list_for_user(WORKER.user_id) == []

    def test_discard_without_session(self):
        """Discarding with nothing running is a not found error."""
        with pytest.raises(EntityNotFoundError):
            self.timers.discard(WORKER)

    def test_stop_into_approved_week(self, directory):
        """A week approved while the timer ran refuses the log."""
        self.timers.start(WORKER, "t-design")
        self.services.approvals.submit(WORKER, week_id="2026-W05")
        sheet = self.uow.timesheets.get_by_user_and_week(WORKER.user_id, "2026-W05")
        self.services.approvals.approve(MANAGER, sheet.id)
        self.clock.advance(hours=1)

        with pytest.raises(StateError):
            self.timers.stop(WORKER)
        assert self.timers.get_active(WORKER) is not None


class TestTimerDailyCap:
    """Timer stops respect the daily hours cap."""

    def test_stop_over_daily_cap(self, uow, directory, clock):
        """A stop pushing the day past the cap is refused."""
        services = ServiceContainer.build(uow, directory, clock=clock, max_daily_hours=8)
        services.time_logs.create_manual(
            WORKER, "t-build", NOW.date(),
            NOW.replace(hour=8), NOW.replace(hour=15),
        )
        services.timers.start(WORKER, "t-design")
        clock.advance(hours=2)

        with pytest.raises(ValidationError, match="8"):
            services.timers.stop(WORKER)
        assert services.timers.get_active(WORKER) is not None

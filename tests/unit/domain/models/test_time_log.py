"""
Unit tests for TimeLog and ActiveTimerSession entities.
"""

import pytest
from datetime import date, datetime, timedelta

from timetrack.domain.models.base import ValidationError
from timetrack.domain.models.time_log import TimeLog, TimeLogSource
from timetrack.domain.models.timer_session import ActiveTimerSession


def make_log(**overrides):
    values = dict(
        user_id="u1",
        task_id="t1",
        project_id="p1",
        log_date=date(2026, 1, 26),
        started_at=datetime(2026, 1, 26, 9, 0),
        ended_at=datetime(2026, 1, 26, 12, 0),
    )
    values.update(overrides)
    return TimeLog(**values)


class TestTimeLog:
    """Test cases for TimeLog entity."""

    def test_duration_is_derived(self):
        """Duration comes from the time range."""
        log = make_log()
        assert log.duration_seconds == 3 * 3600
        assert log.duration_hours == 3.0
        assert log.is_manual
        assert str(log.week_id) == "2026-W05"

    def test_requires_positive_range(self):
        """End must be after start."""
        with pytest.raises(ValidationError):
            make_log(ended_at=datetime(2026, 1, 26, 9, 0))

    @pytest.mark.parametrize("field_name", ["user_id", "task_id", "project_id"])
    def test_required_fields(self, field_name):
        """Ids are mandatory."""
        with pytest.raises(ValidationError) as exc_info:
            make_log(**{field_name: ""})
        assert exc_info.value.field == field_name

    def test_description_length(self):
        """Descriptions are capped at 500 characters."""
        make_log(description="x" * 500)
        with pytest.raises(ValidationError):
            make_log(description="x" * 501)

    def test_reschedule(self):
        """Rescheduling keeps unspecified bounds."""
        log = make_log()
        log.reschedule(ended_at=datetime(2026, 1, 26, 10, 30), description="standup")

        assert log.started_at == datetime(2026, 1, 26, 9, 0)
        assert log.duration_seconds == 5400
        assert log.description == "standup"

    def test_reschedule_rejects_inverted_range(self):
        """An edit may not invert the interval."""
        log = make_log()
        with pytest.raises(ValidationError):
            log.reschedule(started_at=datetime(2026, 1, 26, 13, 0))
        assert log.started_at == datetime(2026, 1, 26, 9, 0)

    def test_from_timer(self):
        """Timer logs are dated by their start instant."""
        log = TimeLog.from_timer(
            user_id="u1",
            task_id="t1",
            project_id="p1",
            started_at=datetime(2026, 1, 25, 23, 30),
            ended_at=datetime(2026, 1, 26, 0, 30),
            description="Timer session",
        )
        assert log.source == TimeLogSource.TIMER
        assert not log.is_manual
        assert log.log_date == date(2026, 1, 25)
        assert str(log.week_id) == "2026-W04"


class TestActiveTimerSession:
    """Test cases for ActiveTimerSession entity."""

    def setup_method(self):
        """Set up test fixtures."""
        self.started = datetime(2026, 1, 30, 9, 0)
        self.session = ActiveTimerSession(
            user_id="u1", task_id="t1", project_id="p1", started_at=self.started
        )

    def test_elapsed(self):
        """Elapsed time is computed against the given instant."""
        now = self.started + timedelta(hours=1, minutes=2, seconds=5)
        assert self.session.elapsed_seconds(now) == 3725
        assert self.session.formatted_elapsed(now) == "01:02:05"

    def test_elapsed_never_negative(self):
        """A clock behind the start reads as zero."""
        assert self.session.elapsed_seconds(self.started - timedelta(minutes=5)) == 0

    def test_requires_start(self):
        """A session needs a start instant."""
        with pytest.raises(ValidationError):
            ActiveTimerSession(user_id="u1", task_id="t1", project_id="p1", started_at=None)

"""
Unit tests for the Timesheet entity and its status transitions.
"""

import pytest
from datetime import datetime

from timetrack.domain.events.timesheet_events import (
    TimesheetSubmitted,
    TimesheetApproved,
    TimesheetRejected,
)
from timetrack.domain.models.base import ValidationError, StateError
from timetrack.domain.models.timesheet import Timesheet, TimesheetStatus
from timetrack.domain.models.value_objects import WeekId


WHEN = datetime(2026, 1, 30, 18, 0)


class TestTimesheet:
    """Test cases for Timesheet entity."""

    def setup_method(self):
        """Set up test fixtures."""
        self.timesheet = Timesheet(id=7, user_id="u1", week_id="2026-W05")

    def test_new_timesheet_is_an_editable_draft(self):
        """A fresh sheet is a draft with zero totals."""
        assert self.timesheet.status == TimesheetStatus.DRAFT
        assert self.timesheet.week_id == WeekId(2026, 5)
        assert self.timesheet.total_hours == 0.0
        assert self.timesheet.accepts_new_logs
        assert not self.timesheet.is_locked

    def test_week_bounds(self):
        """Week start and end come from the week id."""
        assert self.timesheet.week_start == datetime(2026, 1, 26)
        assert self.timesheet.week_end == datetime(2026, 2, 1, 23, 59, 59)

    def test_apply_totals(self):
        """Totals are stored in seconds and exposed in hours."""
        self.timesheet.apply_totals(9 * 3600 + 900, 3, WHEN)
        assert self.timesheet.total_seconds == 9 * 3600 + 900
        assert self.timesheet.total_hours == 9.25
        assert self.timesheet.entry_count == 3
        assert self.timesheet.updated_at == WHEN

    def test_negative_totals_rejected(self):
        """Totals can never be negative."""
        with pytest.raises(ValidationError):
            self.timesheet.apply_totals(-1, 0)

    def test_submit_from_draft(self):
        """Submitting records the time and emits an event."""
        self.timesheet.apply_totals(9 * 3600, 3)
        self.timesheet.submit("u1", WHEN)

        assert self.timesheet.status == TimesheetStatus.SUBMITTED
        assert self.timesheet.submitted_at == WHEN
        assert not self.timesheet.accepts_new_logs

        events = self.timesheet.pull_events()
        assert len(events) == 1
        assert isinstance(events[0], TimesheetSubmitted)
        assert events[0].total_hours == 9.0
        assert self.timesheet.pull_events() == []

    def test_approve_locks_the_sheet(self):
        """Approval is terminal."""
        self.timesheet.submit("u1", WHEN)
        self.timesheet.approve("boss", WHEN)

        assert self.timesheet.status == TimesheetStatus.APPROVED
        assert self.timesheet.approved_by == "boss"
        assert self.timesheet.approved_at == WHEN
        assert self.timesheet.is_locked
        assert isinstance(self.timesheet.pull_events()[-1], TimesheetApproved)

        with pytest.raises(StateError):
            self.timesheet.submit("u1", WHEN)
        with pytest.raises(StateError):
            self.timesheet.reject("boss", "late", WHEN)
        with pytest.raises(StateError):
            self.timesheet.ensure_accepts_logs()

    def test_approve_requires_submitted(self):
        """Drafts cannot be approved."""
        with pytest.raises(StateError) as exc_info:
            self.timesheet.approve("boss", WHEN)
        assert exc_info.value.current_status == "draft"

    def test_reject_and_resubmit(self):
        """A rejected sheet is editable and can be submitted again."""
        self.timesheet.submit("u1", WHEN)
        self.timesheet.reject("boss", "  Missing Friday  ", WHEN)

        assert self.timesheet.status == TimesheetStatus.REJECTED
        assert self.timesheet.rejection_reason == "Missing Friday"
        assert self.timesheet.reviewed_by == "boss"
        assert self.timesheet.accepts_new_logs

        rejected = self.timesheet.pull_events()[-1]
        assert isinstance(rejected, TimesheetRejected)
        assert rejected.reason == "Missing Friday"

        self.timesheet.submit("u1", WHEN)
        assert self.timesheet.status == TimesheetStatus.SUBMITTED
        assert self.timesheet.rejection_reason is None

    @pytest.mark.parametrize("reason", [None, "", "   "])
    def test_reject_requires_reason(self, reason):
        """Blank reasons are rejected before the state is looked at."""
        with pytest.raises(ValidationError) as exc_info:
            self.timesheet.reject("boss", reason, WHEN)
        assert exc_info.value.field == "reason"

    def test_submit_twice_fails(self):
        """A submitted sheet cannot be submitted again."""
        self.timesheet.submit("u1", WHEN)
        with pytest.raises(StateError):
            self.timesheet.submit("u1", WHEN)

    def test_to_dict(self):
        """Serialized form uses the week id string and hours."""
        data = self.timesheet.to_dict()
        assert data["week_id"] == "2026-W05"
        assert data["status"] == "draft"
        assert data["total_hours"] == 0.0

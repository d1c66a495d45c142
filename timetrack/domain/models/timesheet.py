"""
Timesheet domain model.
One row per worker and ISO week, carrying cached totals and approval status.
"""

from datetime import datetime
from typing import Optional, Dict, Any
from enum import Enum

from timetrack.domain.models.base import BaseEntity, ValidationError, StateError
from timetrack.domain.models.value_objects import WeekId
from timetrack.domain.events.timesheet_events import (
    TimesheetSubmitted,
    TimesheetApproved,
    TimesheetRejected,
)


class TimesheetStatus(str, Enum):
    """Approval status of a weekly timesheet."""
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


EDITABLE_STATUSES = (TimesheetStatus.DRAFT, TimesheetStatus.REJECTED)


class Timesheet(BaseEntity):
    """
    Timesheet entity.

    Status moves draft -> submitted -> approved | rejected, and a rejected
    sheet may be submitted again. Approved is terminal. Totals are cached
    values written only through ``apply_totals``.
    """

    def __init__(
        self,
        user_id: str,
        week_id: WeekId,
        status: TimesheetStatus = TimesheetStatus.DRAFT,
        total_seconds: int = 0,
        entry_count: int = 0,
        rejection_reason: Optional[str] = None,
        submitted_at: Optional[datetime] = None,
        approved_at: Optional[datetime] = None,
        approved_by: Optional[str] = None,
        reviewed_by: Optional[str] = None,
        **kwargs
    ):
        super().__init__(**kwargs)

        if isinstance(week_id, str):
            week_id = WeekId.parse(week_id)

        self.user_id = user_id
        self.week_id = week_id
        self.status = TimesheetStatus(status)
        self._total_seconds = int(total_seconds or 0)
        self._entry_count = int(entry_count or 0)
        self.rejection_reason = rejection_reason
        self.submitted_at = submitted_at
        self.approved_at = approved_at
        self.approved_by = approved_by
        self.reviewed_by = reviewed_by

        self.validate()

    def validate(self) -> None:
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")
        if self._total_seconds < 0:
            raise ValidationError("Total hours cannot be negative", "total_hours")

    # Derived values

    @property
    def week_start(self) -> datetime:
        return self.week_id.week_start

    @property
    def week_end(self) -> datetime:
        return self.week_id.week_end

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def total_hours(self) -> float:
        return round(self._total_seconds / 3600, 2)

    @property
    def entry_count(self) -> int:
        return self._entry_count

    @property
    def accepts_new_logs(self) -> bool:
        """Logs may be added, edited or removed only while the sheet is editable."""
        return self.status in EDITABLE_STATUSES

    @property
    def is_locked(self) -> bool:
        return self.status == TimesheetStatus.APPROVED

    def ensure_accepts_logs(self) -> None:
        if not self.accepts_new_logs:
            raise StateError(
                f"Timesheet for week {self.week_id} is {self.status.value} and cannot be changed",
                self.status.value,
            )

    def apply_totals(self, total_seconds: int, entry_count: int, when: Optional[datetime] = None) -> None:
        """Replace cached totals in a single assignment."""
        if total_seconds < 0:
            raise ValidationError("Total hours cannot be negative", "total_hours")
        self._total_seconds = int(total_seconds)
        self._entry_count = int(entry_count)
        self.mark_as_updated(when)

    # Workflow transitions

    def submit(self, actor_id: str, when: Optional[datetime] = None) -> None:
        """Owner hands the week in for review."""
        if self.status not in EDITABLE_STATUSES:
            raise StateError(
                f"Cannot submit a timesheet that is {self.status.value}", self.status.value
            )

        when = when or datetime.utcnow()
        self.status = TimesheetStatus.SUBMITTED
        self.submitted_at = when
        self.rejection_reason = None
        self.mark_as_updated(when)

        self.add_event(TimesheetSubmitted(
            timesheet_id=self.id,
            user_id=self.user_id,
            week_id=str(self.week_id),
            actor_id=actor_id,
            total_hours=self.total_hours,
        ))

    def approve(self, approver_id: str, when: Optional[datetime] = None) -> None:
        """Reviewer locks the week."""
        if self.status != TimesheetStatus.SUBMITTED:
            raise StateError(
                f"Only submitted timesheets can be approved (current status: {self.status.value})",
                self.status.value,
            )

        when = when or datetime.utcnow()
        self.status = TimesheetStatus.APPROVED
        self.approved_at = when
        self.approved_by = approver_id
        self.mark_as_updated(when)

        self.add_event(TimesheetApproved(
            timesheet_id=self.id,
            user_id=self.user_id,
            week_id=str(self.week_id),
            actor_id=approver_id,
        ))

    def reject(self, reviewer_id: str, reason: Optional[str], when: Optional[datetime] = None) -> None:
        """Reviewer sends the week back to its owner."""
        if reason is None or not reason.strip():
            raise ValidationError("Rejection reason is required", "reason")

        if self.status != TimesheetStatus.SUBMITTED:
            raise StateError(
                f"Only submitted timesheets can be rejected (current status: {self.status.value})",
                self.status.value,
            )

        when = when or datetime.utcnow()
        self.status = TimesheetStatus.REJECTED
        self.rejection_reason = reason.strip()
        self.reviewed_by = reviewer_id
        self.mark_as_updated(when)

        self.add_event(TimesheetRejected(
            timesheet_id=self.id,
            user_id=self.user_id,
            week_id=str(self.week_id),
            actor_id=reviewer_id,
            reason=self.rejection_reason,
        ))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "week_id": str(self.week_id),
            "week_start": self.week_start.isoformat(),
            "week_end": self.week_end.isoformat(),
            "total_hours": self.total_hours,
            "entry_count": self.entry_count,
            "status": self.status.value,
            "rejection_reason": self.rejection_reason,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
            "approved_at": self.approved_at.isoformat() if self.approved_at else None,
            "approved_by": self.approved_by,
            "reviewed_by": self.reviewed_by,
        }

    @classmethod
    def create_draft(cls, user_id: str, week_id: WeekId) -> "Timesheet":
        return cls(user_id=user_id, week_id=week_id, status=TimesheetStatus.DRAFT)

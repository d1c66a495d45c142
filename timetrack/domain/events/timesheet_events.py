"""
Domain events raised by the timesheet approval workflow.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass

from .base import DomainEvent


@dataclass(kw_only=True)
class TimesheetEvent(DomainEvent):
    """Common payload of every approval workflow event."""

    timesheet_id: int
    user_id: str
    week_id: str
    actor_id: str

    notification_type = "timesheet_event"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "timesheet_id": self.timesheet_id,
            "user_id": self.user_id,
            "week_id": self.week_id,
            "actor_id": self.actor_id,
        }

    def to_notification(self) -> Dict[str, Any]:
        """Payload handed to the notification collaborator."""
        return {
            "type": self.notification_type,
            "timesheetId": self.timesheet_id,
            "user": self.user_id,
            "actor": self.actor_id,
            "weekId": self.week_id,
        }


@dataclass(kw_only=True)
class TimesheetSubmitted(TimesheetEvent):
    """Event fired when an owner submits a week for approval."""

    total_hours: float = 0.0

    notification_type = "timesheet_submitted"

    def _get_event_data(self) -> Dict[str, Any]:
        data = super()._get_event_data()
        data["total_hours"] = self.total_hours
        return data

    def to_notification(self) -> Dict[str, Any]:
        payload = super().to_notification()
        payload["totalHours"] = self.total_hours
        return payload


@dataclass(kw_only=True)
class TimesheetApproved(TimesheetEvent):
    """Event fired when a reviewer approves a submitted week."""

    notification_type = "timesheet_approved"


@dataclass(kw_only=True)
class TimesheetRejected(TimesheetEvent):
    """Event fired when a reviewer rejects a submitted week."""

    reason: Optional[str] = None

    notification_type = "timesheet_rejected"

    def _get_event_data(self) -> Dict[str, Any]:
        data = super()._get_event_data()
        data["reason"] = self.reason
        return data

    def to_notification(self) -> Dict[str, Any]:
        payload = super().to_notification()
        payload["reason"] = self.reason
        return payload

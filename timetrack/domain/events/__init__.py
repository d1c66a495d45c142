"""
Domain events for the timesheet service.
"""

from .base import (
    DomainEvent,
    EventHandler,
    EventDispatcher,
    get_event_dispatcher,
    publish_event,
)
from .timesheet_events import (
    TimesheetEvent,
    TimesheetSubmitted,
    TimesheetApproved,
    TimesheetRejected,
)

__all__ = [
    "DomainEvent",
    "EventHandler",
    "EventDispatcher",
    "get_event_dispatcher",
    "publish_event",
    "TimesheetEvent",
    "TimesheetSubmitted",
    "TimesheetApproved",
    "TimesheetRejected",
]

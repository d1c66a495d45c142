"""
Event handlers for timesheet notifications.
Converts approval workflow events into notification payloads.
"""

import asyncio
import logging

from timetrack.domain.collaborators import Notifier
from timetrack.domain.events.base import EventHandler, DomainEvent
from timetrack.domain.events.timesheet_events import TimesheetEvent


logger = logging.getLogger(__name__)


class EventLoggingHandler(EventHandler):
    """Global handler recording every event in the log."""

    def can_handle(self, event: DomainEvent) -> bool:
        return True

    async def handle(self, event: DomainEvent) -> None:
        logger.info(f"Event received: {event.event_type} (ID: {event.event_id})")


class TimesheetNotificationHandler(EventHandler):
    """Tells the owner (and reviewers, downstream) about status changes."""

    def __init__(self, notifier: Notifier):
        self.notifier = notifier

    def can_handle(self, event: DomainEvent) -> bool:
        return isinstance(event, TimesheetEvent)

    async def handle(self, event: DomainEvent) -> None:
        if not self.can_handle(event):
            return

        payload = event.to_notification()
        # Notifier adapters are blocking
        await asyncio.to_thread(self.notifier.notify, payload)
        logger.info(f"Sent {payload['type']} notification for timesheet {payload['timesheetId']}")

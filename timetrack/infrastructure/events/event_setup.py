"""
Event system setup and configuration.
Registers all event handlers with the event dispatcher.
"""

import logging
from typing import Optional

from timetrack.domain.collaborators import Notifier
from timetrack.domain.events.base import get_event_dispatcher
from timetrack.infrastructure.notifications import build_notifier
from .notification_handlers import EventLoggingHandler, TimesheetNotificationHandler

logger = logging.getLogger(__name__)

TIMESHEET_EVENT_TYPES = ("TimesheetSubmitted", "TimesheetApproved", "TimesheetRejected")


def setup_event_handlers(notifier: Optional[Notifier] = None) -> None:
    """Set up and register all event handlers."""

    dispatcher = get_event_dispatcher()
    dispatcher.clear_handlers()

    # Register global handler for logging
    dispatcher.register_global_handler(EventLoggingHandler())

    timesheet_handler = TimesheetNotificationHandler(notifier or build_notifier())
    for event_type in TIMESHEET_EVENT_TYPES:
        dispatcher.register_handler(event_type, timesheet_handler)

    logger.info("Event handlers registered successfully")

    # Log registered handlers
    registered = dispatcher.get_registered_handlers()
    for event_type, handlers in registered.items():
        logger.info(f"Event {event_type}: {', '.join(handlers)} handlers")


def initialize_event_system(notifier: Optional[Notifier] = None) -> None:
    """Initialize the complete event system."""
    try:
        setup_event_handlers(notifier)
        logger.info("Event system initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize event system: {str(e)}")
        raise

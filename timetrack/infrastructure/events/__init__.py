"""
Infrastructure event handlers.
Handles domain events and triggers appropriate notifications.
"""

from .notification_handlers import EventLoggingHandler, TimesheetNotificationHandler
from .event_setup import setup_event_handlers, initialize_event_system

__all__ = [
    "EventLoggingHandler",
    "TimesheetNotificationHandler",
    "setup_event_handlers",
    "initialize_event_system",
]

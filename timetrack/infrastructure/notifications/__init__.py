"""
Notification adapters.
"""

from timetrack.config import get_settings
from timetrack.domain.collaborators import Notifier
from .notifiers import HttpNotifier, LoggingNotifier


def build_notifier() -> Notifier:
    """Notifier configured for this process."""
    settings = get_settings()
    if settings.notification_service_url:
        return HttpNotifier(
            settings.notification_service_url,
            timeout=settings.collaborator_timeout_seconds,
        )
    return LoggingNotifier()


__all__ = [
    "HttpNotifier",
    "LoggingNotifier",
    "build_notifier",
]

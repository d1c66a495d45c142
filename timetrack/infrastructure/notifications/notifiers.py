"""
Notification delivery adapters.
"""

import logging
from typing import Any, Dict, Optional

import requests

from timetrack.domain.collaborators import Notifier


logger = logging.getLogger(__name__)


class HttpNotifier(Notifier):
    """Posts notification payloads to the notification service."""

    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.url = f"{base_url.rstrip('/')}/notifications"
        self.timeout = timeout
        self.http = session or requests.Session()

    def notify(self, event: Dict[str, Any]) -> None:
        response = self.http.post(
            self.url,
            json=event,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        logger.info(f"Notification {event.get('type')} delivered for user {event.get('user')}")


class LoggingNotifier(Notifier):
    """Writes notifications to the log; used when no service is configured."""

    def notify(self, event: Dict[str, Any]) -> None:
        logger.info(f"Notification {event.get('type')}: {event}")

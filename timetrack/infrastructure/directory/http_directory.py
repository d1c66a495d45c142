"""
HTTP client for the task and user directory service.
"""

import logging
from typing import Any, Dict, Optional

import requests

from timetrack.domain.collaborators import TaskDirectory, TaskRef, UserDirectory
from timetrack.domain.models.base import DomainException
from timetrack.domain.models.user import UserRole


logger = logging.getLogger(__name__)


class DirectoryUnavailableError(DomainException):
    """Raised when the directory service cannot be reached or answers garbage."""

    def __init__(self, message: str = "Directory service unavailable"):
        super().__init__(message, "SERVICE_UNAVAILABLE")


class HttpDirectory(TaskDirectory, UserDirectory):
    """
    Directory backed by a REST service.

    Expected endpoints:
        GET /tasks/{id}  -> {"id", "projectId", "title", "assignees": [userId, ...]}
        GET /users/{id}  -> {"id", "role"}
    A 404 means the resource does not exist.
    """

    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = session or requests.Session()

    def _get(self, path: str) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}{path}"
        try:
            response = self.http.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Directory request to {url} failed: {str(e)}")
            raise DirectoryUnavailableError()

        if response.status_code == 404:
            return None
        if not response.ok:
            logger.error(f"Directory request to {url} returned HTTP {response.status_code}")
            raise DirectoryUnavailableError()

        try:
            return response.json()
        except ValueError:
            logger.error(f"Directory response from {url} is not JSON")
            raise DirectoryUnavailableError()

    def get_task(self, task_id: str) -> Optional[TaskRef]:
        data = self._get(f"/tasks/{task_id}")
        if data is None:
            return None
        return TaskRef(
            task_id=str(data.get("id", task_id)),
            project_id=str(data.get("projectId") or data.get("project")),
            title=data.get("title"),
        )

    def is_assigned(self, user_id: str, task_id: str) -> bool:
        data = self._get(f"/tasks/{task_id}")
        if data is None:
            return False
        return user_id in [str(assignee) for assignee in data.get("assignees", [])]

    def get_user_role(self, user_id: str) -> Optional[UserRole]:
        data = self._get(f"/users/{user_id}")
        if data is None or not data.get("role"):
            return None
        try:
            return UserRole(data["role"])
        except ValueError:
            logger.warning(f"User {user_id} has unknown role {data['role']!r}")
            return None

"""
Unit tests for directory, notification and token adapters.
"""

import json
import pytest
import requests
from unittest.mock import Mock

from timetrack.domain.models.base import ValidationError
from timetrack.domain.models.user import UserRole
from timetrack.infrastructure.auth.jwt_handler import JWTHandler
from timetrack.infrastructure.directory.http_directory import HttpDirectory, DirectoryUnavailableError
from timetrack.infrastructure.directory.memory_directory import InMemoryDirectory
from timetrack.infrastructure.notifications.notifiers import HttpNotifier


def response(status_code=200, payload=None):
    mock = Mock()
    mock.status_code = status_code
    mock.ok = status_code < 400
    mock.json.return_value = payload
    return mock


class TestInMemoryDirectory:
    """Test cases for the in-memory directory."""

    def test_from_file(self, tmp_path):
        """Seed files provide roles, tasks and assignees."""
        seed = tmp_path / "directory.json"
        seed.write_text(json.dumps({
            "users": {"u1": "team_member", "pm": "project_manager"},
            "tasks": [{"id": "t1", "projectId": "p1", "title": "Design", "assignees": ["u1"]}],
        }))

        directory = InMemoryDirectory.from_file(seed)

        assert directory.get_user_role("pm") == UserRole.PROJECT_MANAGER
        assert directory.get_task("t1").project_id == "p1"
        assert directory.is_assigned("u1", "t1")
        assert not directory.is_assigned("pm", "t1")
        assert directory.get_user_role("nobody") is None


class TestHttpDirectory:
    """Test cases for the HTTP directory client."""

    def setup_method(self):
        """Set up test fixtures."""
        self.http = Mock()
        self.directory = HttpDirectory("http://directory.local/", timeout=2, session=self.http)

    def test_get_task(self):
        """Task lookups map the service payload."""
        self.http.get.return_value = response(payload={"id": "t1", "projectId": "p1", "assignees": ["u1"]})

        task = self.directory.get_task("t1")

        assert task.project_id == "p1"
        self.http.get.assert_called_once_with("http://directory.local/tasks/t1", timeout=2)

    def test_missing_task(self):
        """A 404 means the task does not exist."""
        self.http.get.return_value = response(404)
        assert self.directory.get_task("t1") is None
        assert self.directory.is_assigned("u1", "t1") is False

    def test_is_assigned(self):
        """Assignment comes from the task's assignee list."""
        self.http.get.return_value = response(payload={"id": "t1", "projectId": "p1", "assignees": [42]})
        assert self.directory.is_assigned("42", "t1")
        assert not self.directory.is_assigned("43", "t1")

    def test_user_role(self):
        """Unknown role strings resolve to no role."""
        self.http.get.return_value = response(payload={"id": "u1", "role": "team_leader"})
        assert self.directory.get_user_role("u1") == UserRole.TEAM_LEADER

        self.http.get.return_value = response(payload={"id": "u1", "role": "wizard"})
        assert self.directory.get_user_role("u1") is None

    def test_service_errors(self):
        """Transport and server failures raise DirectoryUnavailableError."""
        self.http.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(DirectoryUnavailableError):
            self.directory.get_task("t1")

        self.http.get.side_effect = None
        self.http.get.return_value = response(500)
        with pytest.raises(DirectoryUnavailableError) as exc_info:
            self.directory.get_user_role("u1")
        assert exc_info.value.code == "SERVICE_UNAVAILABLE"


class TestHttpNotifier:
    """Test cases for the HTTP notifier."""

    def test_posts_payload(self):
        """Payloads are posted as JSON to /notifications."""
        http = Mock()
        notifier = HttpNotifier("http://notify.local", timeout=3, session=http)
        payload = {"type": "timesheet_approved", "timesheetId": 1, "user": "u1"}

        notifier.notify(payload)

        http.post.assert_called_once_with(
            "http://notify.local/notifications",
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=3,
        )
        http.post.return_value.raise_for_status.assert_called_once()


class TestJWTHandler:
    """Test cases for JWT handling."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = JWTHandler(secret="test-secret", algorithm="HS256")

    def test_round_trip(self):
        """Issued tokens resolve to their subject."""
        token = self.handler.create_token("u1")
        assert self.handler.get_user_id(token) == "u1"
        assert self.handler.get_user_id(f"Bearer {token}") == "u1"

    def test_rejects_foreign_signature(self):
        """Tokens signed with another secret are invalid."""
        token = JWTHandler(secret="other-secret", algorithm="HS256").create_token("u1")
        with pytest.raises(ValidationError):
            self.handler.verify_token(token)

    def test_rejects_expired(self):
        """Expired tokens are invalid."""
        token = self.handler.create_token("u1", expires_minutes=-1)
        with pytest.raises(ValidationError):
            self.handler.verify_token(token)

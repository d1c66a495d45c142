"""
Caller identity for the timesheet domain.
Users themselves live in the identity service; only their role matters here.
"""

from dataclasses import dataclass
from enum import Enum

from timetrack.domain.models.base import ValidationError


class UserRole(str, Enum):
    """Organisation roles known to the workforce directory."""
    SUPER_ADMIN = "super_admin"
    PROJECT_MANAGER = "project_manager"
    TEAM_LEADER = "team_leader"
    TEAM_MEMBER = "team_member"
    CLIENT = "client"

    @classmethod
    def parse(cls, value: str) -> "UserRole":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown role: {value}", "role")


@dataclass(frozen=True)
class Actor:
    """Authenticated caller of a use case."""

    user_id: str
    role: UserRole

    def owns(self, user_id: str) -> bool:
        return self.user_id == user_id

"""
Role based permissions for timesheet review.
Every role check in the service goes through this table.
"""

from enum import Enum
from typing import Dict, FrozenSet

from timetrack.domain.models.base import PermissionDeniedError
from timetrack.domain.models.user import Actor, UserRole


class TimesheetAction(str, Enum):
    """Privileged actions on other users' time data."""
    VIEW_OTHERS = "view_others"
    VIEW_PENDING = "view_pending"
    APPROVE = "approve"
    REJECT = "reject"


_REVIEWERS = frozenset({UserRole.SUPER_ADMIN, UserRole.PROJECT_MANAGER})
_OBSERVERS = _REVIEWERS | {UserRole.TEAM_LEADER}

PERMISSIONS: Dict[TimesheetAction, FrozenSet[UserRole]] = {
    TimesheetAction.VIEW_OTHERS: _OBSERVERS,
    TimesheetAction.VIEW_PENDING: _OBSERVERS,
    TimesheetAction.APPROVE: _REVIEWERS,
    TimesheetAction.REJECT: _REVIEWERS,
}

_DENIAL_MESSAGES = {
    TimesheetAction.VIEW_OTHERS: "Not authorized to view other users' time data",
    TimesheetAction.VIEW_PENDING: "Not authorized to view pending timesheets",
    TimesheetAction.APPROVE: "Not authorized to approve timesheets",
    TimesheetAction.REJECT: "Not authorized to reject timesheets",
}


def is_allowed(actor: Actor, action: TimesheetAction) -> bool:
    return actor.role in PERMISSIONS[action]


def authorize(actor: Actor, action: TimesheetAction) -> None:
    """Raise PermissionDeniedError unless the actor's role grants the action."""
    if not is_allowed(actor, action):
        raise PermissionDeniedError(_DENIAL_MESSAGES[action])


def authorize_owner_or(actor: Actor, owner_id: str, action: TimesheetAction) -> None:
    """Owners always pass; anybody else needs the role permission."""
    if actor.owns(owner_id):
        return
    authorize(actor, action)


def require_owner(actor: Actor, owner_id: str, message: str) -> None:
    if not actor.owns(owner_id):
        raise PermissionDeniedError(message)

"""
Test doubles and fixed identities shared across the suite.
"""

from datetime import datetime, timedelta

from timetrack.domain.models.user import Actor, UserRole


# Friday of ISO week 2026-W05 (Mon 2026-01-26 .. Sun 2026-02-01)
NOW = datetime(2026, 1, 30, 18, 0, 0)

WORKER = Actor(user_id="u-worker", role=UserRole.TEAM_MEMBER)
OTHER_WORKER = Actor(user_id="u-other", role=UserRole.TEAM_MEMBER)
MANAGER = Actor(user_id="u-manager", role=UserRole.PROJECT_MANAGER)
ADMIN = Actor(user_id="u-admin", role=UserRole.SUPER_ADMIN)
LEADER = Actor(user_id="u-leader", role=UserRole.TEAM_LEADER)


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingNotifier:
    """Notifier keeping every payload it was handed."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail

    def notify(self, event):
        if self.fail:
            raise RuntimeError("notification service down")
        self.sent.append(event)

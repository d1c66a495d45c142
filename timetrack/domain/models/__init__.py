"""
Domain models for the time tracking service.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    ConflictError,
    PermissionDeniedError,
    EntityNotFoundError,
    StateError,
)

# Value Objects
from .value_objects import (
    ValueObject,
    TimeRange,
    WeekId,
    get_week_id,
    format_duration,
    DAYS_IN_WEEK,
    WEEKDAY_LABELS,
)

# Domain entities
from .user import UserRole, Actor
from .time_log import TimeLog, TimeLogSource
from .timer_session import ActiveTimerSession
from .timesheet import Timesheet, TimesheetStatus

__all__ = [
    # Base
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "ConflictError",
    "PermissionDeniedError",
    "EntityNotFoundError",
    "StateError",

    # Value Objects
    "ValueObject",
    "TimeRange",
    "WeekId",
    "get_week_id",
    "format_duration",
    "DAYS_IN_WEEK",
    "WEEKDAY_LABELS",

    # Entities
    "UserRole",
    "Actor",
    "TimeLog",
    "TimeLogSource",
    "ActiveTimerSession",
    "Timesheet",
    "TimesheetStatus",
]

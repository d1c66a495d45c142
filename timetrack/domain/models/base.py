"""
Base entity and error taxonomy for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime
from typing import Optional, Any, Dict, List
from abc import ABC

from timetrack.domain.events.base import DomainEvent


class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    def __init__(
        self,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self.id = id
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or self.created_at
        self._events: List[DomainEvent] = []

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self, when: Optional[datetime] = None) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = when or datetime.utcnow()

    def add_event(self, event: DomainEvent) -> None:
        """Add a domain event."""
        self._events.append(event)

    def pull_events(self) -> List[DomainEvent]:
        """Get and clear all domain events."""
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if key.startswith('_'):
                continue
            if isinstance(value, datetime):
                data[key] = value.isoformat()
            elif hasattr(value, "value") and hasattr(value, "name"):
                data[key] = value.value
            else:
                data[key] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Raised for malformed input: bad time ranges, missing reasons, short timers."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class ConflictError(DomainException):
    """Raised when a uniqueness rule would be broken, e.g. a second running timer."""

    def __init__(self, message: str):
        super().__init__(message, "CONFLICT_ERROR")


class PermissionDeniedError(DomainException):
    """Raised when the caller's role or ownership does not allow the operation."""

    def __init__(self, message: str = "You don't have permission to perform this action"):
        super().__init__(message, "PERMISSION_ERROR")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any = None, message: Optional[str] = None):
        if message is None:
            if entity_id is None:
                message = f"{entity_type} not found"
            else:
                message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, "NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class StateError(DomainException):
    """Raised when an operation is illegal in the entity's current status."""

    def __init__(self, message: str, current_status: Optional[str] = None):
        super().__init__(message, "STATE_ERROR")
        self.current_status = current_status

"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Annotated, Optional
from datetime import datetime, timezone
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base DTO with common configuration. JSON keys are camelCase."""

    model_config = ConfigDict(
        # Accept and emit camelCase
        alias_generator=to_camel,
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
    )


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC; aware inputs are converted first."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    model_config = ConfigDict(extra="forbid")


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

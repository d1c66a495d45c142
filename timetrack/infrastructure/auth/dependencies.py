"""
Authentication dependencies for FastAPI.
Turns a bearer token into the Actor the domain services expect.
"""

import logging
from typing import Optional, Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from timetrack.domain.collaborators import UserDirectory
from timetrack.domain.models.base import ValidationError
from timetrack.domain.models.user import Actor
from timetrack.infrastructure.auth.jwt_handler import JWTHandler
from timetrack.infrastructure.directory import get_directory


logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer(auto_error=False)

# Global instances
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


def get_user_directory() -> UserDirectory:
    """Dependency to get the user directory."""
    return get_directory()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> str:
    """
    FastAPI dependency to get current authenticated user ID.

    Raises:
        HTTPException: If authentication fails
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authentication required")

    try:
        return jwt_handler.get_user_id(credentials.credentials)
    except ValidationError as e:
        raise _unauthorized(e.message)


async def get_current_actor(
    user_id: Annotated[str, Depends(get_current_user_id)],
    directory: Annotated[UserDirectory, Depends(get_user_directory)]
) -> Actor:
    """
    FastAPI dependency resolving the caller's role.

    Raises:
        HTTPException: If the user is unknown to the directory
    """
    role = directory.get_user_role(user_id)
    if role is None:
        logger.warning(f"Authenticated user {user_id} has no role in the directory")
        raise _unauthorized("Unknown user")
    return Actor(user_id=user_id, role=role)

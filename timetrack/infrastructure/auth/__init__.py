"""
Authentication infrastructure module.
Handles JWT validation and caller resolution.
"""

from .jwt_handler import JWTHandler
from .dependencies import (
    get_current_user_id,
    get_current_actor,
    get_jwt_handler,
    get_user_directory,
)

__all__ = [
    "JWTHandler",
    "get_current_user_id",
    "get_current_actor",
    "get_jwt_handler",
    "get_user_directory",
]

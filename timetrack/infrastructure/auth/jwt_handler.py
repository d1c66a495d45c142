"""
JWT token handler.
Validates bearer tokens issued by the identity service and extracts the user id.
"""

from typing import Dict, Any, Optional
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

from timetrack.config import get_settings
from timetrack.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, secret: Optional[str] = None, algorithm: Optional[str] = None):
        settings = get_settings()
        self.jwt_secret = secret or settings.jwt_secret_key
        self.jwt_algorithm = algorithm or settings.jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            ValidationError: If token is invalid or expired
        """
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}", "token")

        if not payload.get('sub'):
            raise ValidationError("Token missing user ID (sub claim)", "token")

        return payload

    def get_user_id(self, token: str) -> str:
        """
        Extract user ID from JWT token.

        Raises:
            ValidationError: If token is invalid
        """
        payload = self.verify_token(token)
        return str(payload['sub'])

    def create_token(self, user_id: str, expires_minutes: int = 60, **claims: Any) -> str:
        """
        Issue a signed token for a user; used by tests and local tooling.
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=expires_minutes)).timestamp()),
            **claims,
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

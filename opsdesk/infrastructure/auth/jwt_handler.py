"""
JWT token handler for Supabase authentication.
Validates access tokens and extracts the acting user's id.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt as jose_jwt

from opsdesk.config import Settings, get_settings
from opsdesk.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.jwt_secret = self.settings.supabase_jwt_secret
        self.jwt_algorithm = "HS256"

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a Supabase JWT token.

        Args:
            token: JWT token string, with or without the 'Bearer ' prefix

        Returns:
            Dict containing token payload

        Raises:
            ValidationError: If token is invalid or expired
        """
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}", "authorization")

        if not payload.get('sub'):
            raise ValidationError("Token missing user ID (sub claim)", "authorization")

        if 'exp' not in payload:
            raise ValidationError("Token missing expiration (exp claim)", "authorization")

        return payload

    def get_user_id(self, token: str) -> str:
        """
        Extract user ID from JWT token.

        Raises:
            ValidationError: If token is invalid
        """
        payload = self.verify_token(token)
        return payload['sub']

    def generate_test_token(self, user_id: str, email: str = "test@example.com", expires_minutes: int = 60) -> str:
        """
        Generate a token shaped like Supabase's, for development and tests.
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=expires_minutes)

        payload = {
            "sub": user_id,
            "email": email,
            "role": "authenticated",
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
            "aud": "authenticated",
            "iss": "supabase"
        }

        return jose_jwt.encode(
            payload,
            self.jwt_secret,
            algorithm=self.jwt_algorithm
        )

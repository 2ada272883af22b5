"""
Unit tests for token verification and session lookup.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from jose import jwt as jose_jwt
from supabase import AuthError

from opsdesk.domain.models import ValidationError
from opsdesk.infrastructure.auth import JWTHandler, SupabaseSessionProvider


class TestJWTHandler:
    """Test cases for JWTHandler."""

    def setup_method(self):
        self.handler = JWTHandler(settings=MagicMock(supabase_jwt_secret="test-secret"))

    def test_round_trip(self):
        token = self.handler.generate_test_token("user-1")

        assert self.handler.get_user_id(token) == "user-1"
        assert self.handler.get_user_id(f"Bearer {token}") == "user-1"

    def test_expired_token_rejected(self):
        token = self.handler.generate_test_token("user-1", expires_minutes=-5)

        with pytest.raises(ValidationError):
            self.handler.verify_token(token)

    def test_wrong_secret_rejected(self):
        other = JWTHandler(settings=MagicMock(supabase_jwt_secret="other-secret"))

        with pytest.raises(ValidationError):
            self.handler.verify_token(other.generate_test_token("user-1"))

    def test_missing_sub_rejected(self):
        token = jose_jwt.encode({"exp": 9999999999}, "test-secret", algorithm="HS256")

        with pytest.raises(ValidationError, match="sub"):
            self.handler.verify_token(token)


class TestSupabaseSessionProvider:
    """Test cases for SupabaseSessionProvider."""

    @pytest.mark.asyncio
    async def test_returns_session_user(self):
        client = MagicMock()
        client.auth.get_session = AsyncMock(return_value=MagicMock(user=MagicMock(id="user-7")))

        assert await SupabaseSessionProvider(client).get_user_id() == "user-7"

    @pytest.mark.asyncio
    async def test_no_session(self):
        client = MagicMock()
        client.auth.get_session = AsyncMock(return_value=None)

        assert await SupabaseSessionProvider(client).get_user_id() is None

    @pytest.mark.asyncio
    async def test_auth_error_means_anonymous(self):
        client = MagicMock()
        client.auth.get_session = AsyncMock(side_effect=AuthError("refresh failed", None))

        assert await SupabaseSessionProvider(client).get_user_id() is None

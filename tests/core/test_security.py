"""
Unit tests for password hashing, tokens and the admin auth dependency.
"""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from foundation_api.core.auth import ADMIN_ROLE, get_current_admin_user
from foundation_api.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestPasswords:
    def test_hash_verifies(self):
        password_hash = hash_password("correct horse battery staple")

        assert password_hash != "correct horse battery staple"
        assert verify_password("correct horse battery staple", password_hash)
        assert not verify_password("wrong password", password_hash)


class TestTokens:
    def test_access_token_round_trip(self):
        token = create_access_token("user-1", {"email": "admin@foundation.test", "role": ADMIN_ROLE})

        payload = decode_token(token)

        assert payload["sub"] == "user-1"
        assert payload["type"] == "access"
        assert payload["role"] == ADMIN_ROLE

    def test_expired_token_rejected(self):
        token = create_access_token("user-1", expires_delta=timedelta(seconds=-1))
        assert decode_token(token) is None

    def test_tampered_token_rejected(self):
        token = create_access_token("user-1")
        assert decode_token(token[:-2] + "xx") is None


class TestGetCurrentAdminUser:
    """Tests for the admin dependency."""

    @pytest.mark.asyncio
    async def test_admin_token_accepted(self):
        token = create_access_token(
            "user-1", {"email": "admin@foundation.test", "role": ADMIN_ROLE, "name": "Admin"}
        )

        admin = await get_current_admin_user(_credentials(token))

        assert admin.id == "user-1"
        assert admin.email == "admin@foundation.test"
        assert admin.name == "Admin"

    @pytest.mark.asyncio
    async def test_staff_role_forbidden(self):
        token = create_access_token("user-2", {"email": "staff@foundation.test", "role": "staff"})

        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin_user(_credentials(token))

        assert exc_info.value.status_code == 403
        assert exc_info.value.detail["error"] == "ADMIN_ACCESS_REQUIRED"

    @pytest.mark.asyncio
    async def test_refresh_token_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin_user(_credentials(create_refresh_token("user-1")))

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail["error"] == "INVALID_TOKEN_TYPE"

    @pytest.mark.asyncio
    async def test_dev_token_rejected_outside_development(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_admin_user(_credentials("dev-token"))

        assert exc_info.value.status_code == 401

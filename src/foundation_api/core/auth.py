"""
Admin Authentication

FastAPI dependencies guarding the admin endpoints (list, stats, status
updates). Tokens are the JWTs issued by POST /auth/login.

SECURITY NOTE:
- The fixed development tokens are accepted ONLY when PYTHON_ENV=development
- Any other environment validates every request against the JWT secret
"""

import logging
import os
from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from foundation_api.core.config import settings
from foundation_api.core.security import decode_token

logger = logging.getLogger(__name__)

ADMIN_ROLE = "super_admin"

security = HTTPBearer(
    auto_error=True,
    description="JWT Bearer token for admin endpoints",
)


@dataclass
class AdminUser:
    """
    An authenticated admin, populated from JWT claims.

    Attributes:
        id: User id (the token subject)
        email: User's email address
        role: Must be 'super_admin' for admin endpoints
        name: Display name (optional)
    """

    id: str
    email: str
    role: str
    name: str | None = None

    def __str__(self) -> str:
        return f"AdminUser(id={self.id}, email={self.email}, role={self.role})"


def _is_dev_mode_safe() -> bool:
    """True only when settings and the raw environment both say development."""
    env_var = os.getenv("PYTHON_ENV", "").lower()
    is_safe = (
        settings.is_development
        and not settings.is_production
        and env_var not in ("production", "staging")
    )
    if is_safe:
        logger.warning(
            "SECURITY: Development auth mode is ENABLED. This MUST NOT be used in production!"
        )
    return is_safe


_DEVELOPMENT_MODE = _is_dev_mode_safe()

_DEV_TOKENS = ("dev-token", "test-token")

_DEV_ADMIN = AdminUser(
    id="00000000-0000-0000-0000-000000000001",
    email="admin@foundation.dev",
    role=ADMIN_ROLE,
    name="Development Admin",
)


def _unauthorized(error: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"error": error, "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


async def _validate_jwt_token(token: str) -> AdminUser:
    """
    Validate a JWT and extract the admin claims.

    Raises:
        HTTPException 401: If the token is invalid, expired, a refresh
            token, or missing its subject
    """
    if _DEVELOPMENT_MODE and token in _DEV_TOKENS:
        logger.debug("Development mode: Using test token")
        return _DEV_ADMIN

    payload = decode_token(token)
    if payload is None:
        logger.warning("Invalid or expired JWT token")
        raise _unauthorized("INVALID_TOKEN", "Invalid or expired authentication token.")

    if payload.get("type", "access") != "access":
        logger.warning(f"Invalid token type: {payload.get('type')}")
        raise _unauthorized("INVALID_TOKEN_TYPE", "This endpoint requires an access token.")

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("Token is missing its 'sub' claim")
        raise _unauthorized("INVALID_TOKEN_CLAIMS", "Token contains invalid or missing claims.")

    return AdminUser(
        id=str(user_id),
        email=payload.get("email", ""),
        role=payload.get("role", ""),
        name=payload.get("name"),
    )


async def get_current_admin_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AdminUser:
    """
    FastAPI dependency that returns the authenticated admin.

    Usage:
        @router.get("/all")
        async def list_all(admin: AdminUser = Depends(get_current_admin_user)):
            ...

    Raises:
        HTTPException 401: If the token is missing, invalid or expired
        HTTPException 403: If the user is not an admin
    """
    user = await _validate_jwt_token(credentials.credentials)

    if user.role != ADMIN_ROLE:
        logger.warning(
            f"Access denied: User {user.id} ({user.email}) has role '{user.role}', "
            f"but '{ADMIN_ROLE}' is required"
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "error": "ADMIN_ACCESS_REQUIRED",
                "message": "Admin access is required for this endpoint.",
            },
        )

    logger.debug(f"Authenticated admin: {user.id} ({user.email})")
    return user


__all__ = [
    "ADMIN_ROLE",
    "AdminUser",
    "get_current_admin_user",
]

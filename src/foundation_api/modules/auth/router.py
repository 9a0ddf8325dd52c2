"""
Authentication Router

Endpoints:
- POST /auth/login - Exchange admin credentials for JWTs
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from foundation_api.core.database import get_db
from foundation_api.core.security import create_access_token, create_refresh_token, verify_password
from foundation_api.modules.auth.schemas import LoginRequest, LoginResponse, UserResponse
from foundation_api.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = {
    "error": "INVALID_CREDENTIALS",
    "message": "Invalid email or password.",
}


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin Login",
    responses={
        401: {"description": "Invalid email or password"},
        403: {"description": "Account deactivated"},
    },
)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """
    Authenticate a user and return JWT tokens.

    Raises:
        HTTPException 401: Invalid credentials
        HTTPException 403: Account inactive
    """
    user = await UserRepository.get_by_email(db, credentials.email)

    if not user:
        logger.warning(f"Login attempt for non-existent email: {credentials.email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Invalid password for user: {credentials.email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if not user.is_active:
        logger.warning(f"Login attempt for inactive account: {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail={
                "error": "ACCOUNT_INACTIVE",
                "message": "Your account has been deactivated.",
            },
        )

    access_token = create_access_token(
        subject=str(user.id),
        additional_claims={"email": user.email, "role": user.role, "name": user.name},
    )
    refresh_token = create_refresh_token(subject=str(user.id))

    logger.info(f"User logged in: {user.email} (role: {user.role})")

    return LoginResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        user=UserResponse.model_validate(user),
    )

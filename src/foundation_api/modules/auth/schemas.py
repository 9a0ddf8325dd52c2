"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from foundation_api.modules.submissions.validators import EmailAddress


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailAddress
    password: str


class UserResponse(BaseModel):
    """User details returned with a successful login."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    role: str
    is_active: bool
    created_at: datetime


class LoginResponse(BaseModel):
    """Login response schema."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserResponse

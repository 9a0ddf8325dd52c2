"""Authentication module."""

from foundation_api.modules.auth.router import router
from foundation_api.modules.auth.schemas import LoginRequest, LoginResponse

__all__ = ["router", "LoginRequest", "LoginResponse"]

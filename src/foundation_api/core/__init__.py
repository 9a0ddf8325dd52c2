"""
Core module - Configuration, database, security, and email.
"""

from foundation_api.core.config import get_settings, settings
from foundation_api.core.database import Base, close_db, get_db, init_db
from foundation_api.core.email import close_email, init_email, send_email
from foundation_api.core.security import (
    create_access_token,
    create_refresh_token,
    decode_token,
    hash_password,
    verify_password,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Email
    "init_email",
    "close_email",
    "send_email",
    # Security
    "hash_password",
    "verify_password",
    "create_access_token",
    "create_refresh_token",
    "decode_token",
]

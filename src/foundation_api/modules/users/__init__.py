"""
Users module - Admin accounts for the back-office endpoints.
"""

from foundation_api.modules.users.models import User, UserRole
from foundation_api.modules.users.repository import UserRepository

__all__ = ["User", "UserRole", "UserRepository"]

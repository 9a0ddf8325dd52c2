"""
Volunteers Module

Volunteer registrations (one per email) with review and approval.
"""

from .router import router

__all__ = ["router"]

"""
Collaborations Module

Partnership requests with classification, meetings and partnership tracking.
"""

from .router import router

__all__ = ["router"]

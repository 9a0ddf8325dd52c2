"""
Newsletter Module

Newsletter subscriptions with token-based unsubscribe.
"""

from .router import router

__all__ = ["router"]

"""
News Submissions Module

Community news updates with review and publication tracking.
"""

from .router import router

__all__ = ["router"]

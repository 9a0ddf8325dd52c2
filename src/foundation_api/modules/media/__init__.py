"""
Media Module

Community photo and video links with moderation and featuring.
"""

from .router import router

__all__ = ["router"]

"""
Interns Module

Internship applications (one per email) with interview and placement tracking.
"""

from .router import router

__all__ = ["router"]

"""
Contact Us Module

Support tickets with a subject-derived priority and admin triage fields.
"""

from .router import router

__all__ = ["router"]

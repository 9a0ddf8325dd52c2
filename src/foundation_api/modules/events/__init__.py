"""
Events Module

Event registrations (one per email and event) with accessibility details,
attendance tracking and per-event statistics.
"""

from .router import router

__all__ = ["router"]

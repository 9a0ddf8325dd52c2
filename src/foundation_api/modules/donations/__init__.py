"""
Donations Module

Donation intentions with manual follow-up and payment tracking.
"""

from .router import router

__all__ = ["router"]

"""
Contact Module

Short website contact form (name, email, mobile, message).
"""

from .router import router

__all__ = ["router"]

"""Schedules domain - vendor scheduling records"""

from .router import router

__all__ = ["router"]

"""
Service layer helpers that orchestrate configuration and domain logic.
"""

from .scheduler import SchedulingService

__all__ = ["SchedulingService"]

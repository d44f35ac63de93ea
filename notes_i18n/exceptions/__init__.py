"""
Domain exceptions for lecture-notes-i18n
"""

from .base import DomainException
from .study_action import InvalidActionTransitionError, NoTextAvailableError

__all__ = [
    "DomainException",
    "InvalidActionTransitionError",
    "NoTextAvailableError",
]

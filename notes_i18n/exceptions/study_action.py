"""
Errors surfaced by the study-action workflow
"""

from typing import Optional

from .base import DomainException


class NoTextAvailableError(DomainException):
    """No text in any language can feed the requested AI action"""

    def __init__(self, target_language: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"No text available for language: {target_language}",
            code="NO_TEXT_AVAILABLE",
            details={"target_language": target_language}
        )


class InvalidActionTransitionError(DomainException):
    """A study action was driven out of order"""

    def __init__(self, current_state: str, attempted: str):
        super().__init__(
            message=f"Cannot {attempted} while action is {current_state}",
            code="INVALID_ACTION_TRANSITION",
            details={"state": current_state, "attempted": attempted}
        )

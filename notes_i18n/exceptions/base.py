"""
Base domain exception
"""

from typing import Optional


class DomainException(Exception):
    """Base class for errors raised by lecture-notes-i18n workflows"""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR",
                 details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

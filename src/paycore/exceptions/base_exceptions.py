"""
Base exception classes for the PayRouter system.
"""

from enum import Enum
from typing import Optional


class ExceptionCode(Enum):
    """Enumeration of all possible exception codes."""

    # Business rule errors (BIZ_XXXX)
    PAYMENT_PROCESSING_ERROR = "BIZ_2006"
    PAYMENT_METHOD_NOT_SUPPORTED = "BIZ_2011"

    # System errors (SYS_XXXX)
    CONFIGURATION_ERROR = "SYS_4001"


class BaseException(Exception):
    """Base exception for the PayRouter system."""

    def __init__(
        self,
        message: str,
        code: ExceptionCode,
        details: Optional[dict] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code.value
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "original_exception_type": (
                type(self.original_exception).__name__
                if self.original_exception
                else None
            ),
        }


class BusinessException(BaseException):
    """Base exception for business rule violations."""

    pass


class SystemException(BaseException):
    """Base exception for system-level errors."""

    pass

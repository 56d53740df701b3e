"""
Exception module for the PayRouter system.
Contains custom exceptions for different error types.
"""

from paycore.exceptions.base_exceptions import BaseException as BasePayRouterException
from paycore.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    SystemException,
)
from paycore.exceptions.payment_exceptions import (
    PaymentConfigurationError,
    PaymentExecutionError,
    UnsupportedSelectorError,
)

__all__ = [
    "BasePayRouterException",
    "BusinessException",
    "SystemException",
    "ExceptionCode",
    "UnsupportedSelectorError",
    "PaymentExecutionError",
    "PaymentConfigurationError",
]

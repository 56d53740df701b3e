"""
Payment dispatch related exceptions.
"""

from typing import Iterable, Optional

from paycore.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    SystemException,
)


class UnsupportedSelectorError(BusinessException):
    """Raised when no registered handler supports the requested payment method."""

    def __init__(self, selector: Optional[str]):
        self.selector = selector
        super().__init__(
            message=f"Payment method not supported: {selector}",
            code=ExceptionCode.PAYMENT_METHOD_NOT_SUPPORTED,
            details={"payment_method": selector},
        )


class PaymentExecutionError(BusinessException):
    """Raised when a payment handler fails to perform its unit of work."""

    def __init__(
        self,
        payment_method: str,
        message: str = "Payment execution failed",
        original_exception: Exception = None,
    ):
        self.payment_method = payment_method
        super().__init__(
            message=f"{message} ({payment_method})",
            code=ExceptionCode.PAYMENT_PROCESSING_ERROR,
            details={"payment_method": payment_method},
            original_exception=original_exception,
        )


class PaymentConfigurationError(SystemException):
    """Raised at startup when configuration names a payment method with no handler."""

    def __init__(
        self,
        unknown_methods: Iterable[str],
        available: Iterable[str],
        env_var: str = "PAYMENT_METHODS_ENABLED",
    ):
        unknown = sorted(unknown_methods)
        super().__init__(
            message=f"{env_var} names unregistered payment methods: {', '.join(unknown)}",
            code=ExceptionCode.CONFIGURATION_ERROR,
            details={
                "unknown": unknown,
                "available": list(available),
                "env_var": env_var,
            },
        )

"""
Payment dispatcher: maps a payment method selector to its handler.
"""

from typing import Iterable, List, Optional, Tuple

from loguru import logger

from paycore.exceptions import PaymentExecutionError, UnsupportedSelectorError
from paycore.observability import (
    UNSUPPORTED_PAYMENT_METHOD_LABEL,
    record_payment_dispatch,
    record_payment_execution,
)
from paycore.payments.handlers import PaymentHandler


class PaymentDispatcher:
    """
    Read-only registry of payment handlers.

    Handlers are scanned in registration order and the first one whose
    support() accepts the selector wins. The handler sequence is frozen at
    construction, so a dispatcher can be shared between concurrent requests.
    """

    def __init__(self, handlers: Iterable[PaymentHandler]):
        self._handlers: Tuple[PaymentHandler, ...] = tuple(handlers)

    @property
    def handlers(self) -> Tuple[PaymentHandler, ...]:
        return self._handlers

    def resolve(self, selector: Optional[str]) -> PaymentHandler:
        """
        Find the handler for a payment method.

        Args:
            selector: Payment method name, matched case-insensitively

        Returns:
            The first registered handler that supports the selector

        Raises:
            UnsupportedSelectorError: If no registered handler supports it
        """
        for handler in self._handlers:
            if handler.support(selector):
                record_payment_dispatch(handler.payment_method, "resolved")
                logger.debug(f"Payment method '{selector}' resolved to {handler.name}")
                return handler

        record_payment_dispatch(UNSUPPORTED_PAYMENT_METHOD_LABEL, "unsupported")
        logger.warning(
            f"Unsupported payment method: {selector} "
            f"(available: {self.list_payment_methods()})"
        )
        raise UnsupportedSelectorError(selector)

    def pay(self, selector: Optional[str]) -> str:
        """Resolve the handler for a payment method and execute it."""
        handler = self.resolve(selector)

        try:
            result = handler.execute()
        except PaymentExecutionError:
            record_payment_execution(handler.payment_method, "failed")
            raise
        except Exception as e:
            record_payment_execution(handler.payment_method, "failed")
            logger.error(f"Payment handler {handler.name} failed: {e}")
            raise PaymentExecutionError(
                handler.payment_method, original_exception=e
            ) from e

        record_payment_execution(handler.payment_method, "success")
        logger.info(f"Payment executed with {handler.payment_method}")
        return result

    def list_payment_methods(self) -> List[str]:
        """List the payment methods served, in registration order."""
        return [handler.payment_method for handler in self._handlers]

    def __len__(self) -> int:
        return len(self._handlers)

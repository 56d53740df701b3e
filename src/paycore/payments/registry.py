"""
Payment handler registration. Builds the dispatcher once at startup.
"""

from typing import Iterable, Optional, Tuple, Type

from loguru import logger

from paycore.config import config
from paycore.exceptions import PaymentConfigurationError
from paycore.payments.dispatcher import PaymentDispatcher
from paycore.payments.handlers import (
    AlipayPaymentHandler,
    BalancePaymentHandler,
    PaymentHandler,
    WechatPaymentHandler,
)

# Registration order doubles as the tie-break order in PaymentDispatcher.resolve
BUILT_IN_HANDLERS: Tuple[Type[PaymentHandler], ...] = (
    BalancePaymentHandler,
    AlipayPaymentHandler,
    WechatPaymentHandler,
)


def build_payment_dispatcher(
    enabled: Optional[Iterable[str]] = None,
    handler_classes: Iterable[Type[PaymentHandler]] = BUILT_IN_HANDLERS,
) -> PaymentDispatcher:
    """
    Instantiate the payment handlers and hand them to a new dispatcher.

    Args:
        enabled: Payment methods to register; None or empty registers all.
            A single string names one payment method.
        handler_classes: Handler classes, in registration order

    Returns:
        Ready-to-use PaymentDispatcher

    Raises:
        PaymentConfigurationError: If enabled names a method with no handler
    """
    if isinstance(enabled, str):
        enabled = [enabled]

    handlers = [handler_class() for handler_class in handler_classes]
    available = [handler.payment_method for handler in handlers]

    wanted = {method.strip().lower() for method in (enabled or [])}
    if wanted:
        unknown = wanted.difference(available)
        if unknown:
            raise PaymentConfigurationError(unknown, available)
        handlers = [h for h in handlers if h.payment_method in wanted]

    for handler in handlers:
        logger.info(f"Payment handler registered: {handler.payment_method} -> {handler.name}")

    return PaymentDispatcher(handlers)


def check_default_payment_method(
    dispatcher: PaymentDispatcher, default_method: str
) -> None:
    """
    Fail at startup if the default payment method has no registered handler.

    Raises:
        PaymentConfigurationError: If no handler supports default_method
    """
    registered = dispatcher.list_payment_methods()
    if default_method.lower() not in registered:
        raise PaymentConfigurationError(
            [default_method], registered, env_var="DEFAULT_PAYMENT_METHOD"
        )


# Global dispatcher instance
payment_dispatcher = build_payment_dispatcher(config.payments.enabled_methods)
check_default_payment_method(payment_dispatcher, config.payments.default_method)

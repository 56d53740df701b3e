"""
Payment services module for payment method selection and dispatch.
"""

from paycore.payments.dispatcher import PaymentDispatcher
from paycore.payments.handlers import (
    AlipayPaymentHandler,
    BalancePaymentHandler,
    PaymentHandler,
    WechatPaymentHandler,
)
from paycore.payments.registry import (
    BUILT_IN_HANDLERS,
    build_payment_dispatcher,
    check_default_payment_method,
    payment_dispatcher,
)

__all__ = [
    "PaymentHandler",
    "BalancePaymentHandler",
    "AlipayPaymentHandler",
    "WechatPaymentHandler",
    "PaymentDispatcher",
    "BUILT_IN_HANDLERS",
    "build_payment_dispatcher",
    "check_default_payment_method",
    "payment_dispatcher",
]

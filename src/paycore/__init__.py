"""
Core package for the PayRouter service.
Contains payment dispatch, configuration, logging and observability.
"""

import paycore.logging  # noqa: F401  Ensures logging is configured
from paycore.config import config
from paycore.payments import (
    PaymentDispatcher,
    PaymentHandler,
    build_payment_dispatcher,
    payment_dispatcher,
)

__all__ = [
    "config",
    "PaymentDispatcher",
    "PaymentHandler",
    "build_payment_dispatcher",
    "payment_dispatcher",
]

"""
Logging helpers for the PayRouter core package.
"""

from paycore.config import config
from paycore.logging.setup import (
    configure_logging,
    exchange_id_context,
    get_exchange_id,
)

configure_logging(config.log_level)

__all__ = [
    "configure_logging",
    "exchange_id_context",
    "get_exchange_id",
]

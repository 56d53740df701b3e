"""
Observability module for the PayRouter service.
Provides metrics capabilities.
"""

from paycore.observability.metrics import (
    UNSUPPORTED_PAYMENT_METHOD_LABEL,
    get_metrics_endpoint,
    metrics_registry,
    record_http_request,
    record_payment_dispatch,
    record_payment_execution,
)

__all__ = [
    "UNSUPPORTED_PAYMENT_METHOD_LABEL",
    "metrics_registry",
    "record_payment_dispatch",
    "record_payment_execution",
    "record_http_request",
    "get_metrics_endpoint",
]

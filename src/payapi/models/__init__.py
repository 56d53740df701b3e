"""
API models module - organized by Single Responsibility Principle.
"""

from payapi.models.responses import (
    ErrorResponse,
    HealthCheckResponse,
    PaymentMethodInfo,
    PaymentMethodListResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "PaymentMethodInfo",
    "PaymentMethodListResponse",
]

"""
Response models module - organized by responsibility.
"""

from payapi.models.responses.error_responses import ErrorResponse
from payapi.models.responses.payment_responses import (
    PaymentMethodInfo,
    PaymentMethodListResponse,
)
from payapi.models.responses.system_responses import HealthCheckResponse

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "PaymentMethodInfo",
    "PaymentMethodListResponse",
]

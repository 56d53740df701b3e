"""
Simplified error handling utilities.
"""

from typing import List

from fastapi import status
from fastapi.responses import JSONResponse

from payapi.models.responses import ErrorResponse
from paycore.exceptions import PaymentExecutionError, UnsupportedSelectorError


def handle_unsupported_payment_method_error(
    error: UnsupportedSelectorError, supported: List[str]
) -> JSONResponse:
    """Translate an unsupported payment method into a 400 response."""
    error_response = ErrorResponse(
        error="UnsupportedPaymentMethod",
        message=error.message,
        details={"payment_method": error.selector, "supported": supported},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_response.model_dump(mode="json"),
    )


def handle_payment_execution_error(error: PaymentExecutionError) -> JSONResponse:
    """Translate a failed payment handler into a 502 response."""
    error_response = ErrorResponse(
        error="PaymentExecutionFailed",
        message=error.message,
        details=error.details,
    )
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=error_response.model_dump(mode="json"),
    )

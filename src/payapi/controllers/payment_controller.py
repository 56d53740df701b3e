"""
Payment controller handling HTTP requests/responses only.
Following Single Responsibility Principle.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from loguru import logger

from payapi.models.responses import (
    ErrorResponse,
    PaymentMethodInfo,
    PaymentMethodListResponse,
)
from payapi.utils.error_utils import (
    handle_payment_execution_error,
    handle_unsupported_payment_method_error,
)
from paycore.config import config
from paycore.exceptions import PaymentExecutionError, UnsupportedSelectorError
from paycore.payments import PaymentDispatcher, payment_dispatcher

router = APIRouter(
    prefix="/pay",
    tags=["payments"],
)


def get_payment_dispatcher() -> PaymentDispatcher:
    """Provide the dispatcher built at startup."""
    return payment_dispatcher


@router.get(
    "/pay",
    response_class=PlainTextResponse,
    summary="Pay with a payment method",
    description="Resolve the handler for payType and return its result. An absent payType falls back to the configured default payment method.",
    responses={
        200: {"description": "Payment handled", "content": {"text/plain": {}}},
        400: {"description": "Unsupported payment method", "model": ErrorResponse},
        502: {"description": "Payment handler failed", "model": ErrorResponse},
    },
)
def pay(
    pay_type: Optional[str] = Query(
        None, alias="payType", description="Payment method (case-insensitive)"
    ),
    dispatcher: PaymentDispatcher = Depends(get_payment_dispatcher),
):
    """Pay with the requested payment method."""
    if not pay_type:
        pay_type = config.payments.default_method
        logger.debug(f"No payment method specified, using default: {pay_type}")

    try:
        return PlainTextResponse(dispatcher.pay(pay_type))
    except UnsupportedSelectorError as e:
        return handle_unsupported_payment_method_error(
            e, dispatcher.list_payment_methods()
        )
    except PaymentExecutionError as e:
        return handle_payment_execution_error(e)


@router.get(
    "/methods",
    response_model=PaymentMethodListResponse,
    summary="List payment methods",
    description="Get the registered payment methods in resolution order",
)
def list_payment_methods(
    dispatcher: PaymentDispatcher = Depends(get_payment_dispatcher),
):
    """List registered payment methods."""
    payment_methods = [
        PaymentMethodInfo(
            payment_method=handler.payment_method,
            handler=handler.name,
            description=handler.description,
        )
        for handler in dispatcher.handlers
    ]

    return PaymentMethodListResponse(
        payment_methods=payment_methods,
        default=config.payments.default_method,
        count=len(payment_methods),
    )

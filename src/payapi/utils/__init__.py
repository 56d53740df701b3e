from payapi.utils.error_utils import (
    handle_payment_execution_error,
    handle_unsupported_payment_method_error,
)

__all__ = [
    "handle_payment_execution_error",
    "handle_unsupported_payment_method_error",
]

"""
Middleware package for FastAPI.
"""

from payapi.middleware.observability import (
    ObservabilityMiddleware,
    add_metrics_endpoint,
    add_observability_middleware,
)

__all__ = [
    "ObservabilityMiddleware",
    "add_observability_middleware",
    "add_metrics_endpoint",
]

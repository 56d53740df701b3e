"""
FastAPI application main module.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

import paycore.logging  # noqa: F401  Ensure logging is configured
from payapi.config.settings import settings
from payapi.controllers.health_controller import router as health_router
from payapi.controllers.payment_controller import router as payment_router
from payapi.middleware import add_metrics_endpoint, add_observability_middleware
from payapi.models.responses import ErrorResponse
from paycore.payments import payment_dispatcher


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    logger.info("Starting PayRouter API...")
    logger.info(
        f"Payment methods available: {payment_dispatcher.list_payment_methods()}"
    )

    yield

    logger.info("PayRouter API shutdown complete")


def create_app() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    add_observability_middleware(app)
    add_metrics_endpoint(app)
    logger.info("Observability middleware and metrics endpoint enabled")

    if settings.is_production():
        app.add_middleware(
            TrustedHostMiddleware, allowed_hosts=settings.get_allowed_hosts()
        )
        logger.info(
            f"Production security middleware enabled: trusted hosts {settings.get_allowed_hosts()}"
        )

    app.include_router(payment_router)
    app.include_router(health_router)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception in {request.url.path}: {exc}")
        error_response = ErrorResponse(
            error="InternalServerError", message="An unexpected error occurred"
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(mode="json"),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "payapi.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="info",
    )

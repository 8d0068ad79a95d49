"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (customers, credits, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Optional schema creation on startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from credit_app.core.config import settings
from credit_app.infrastructure.credit.tables import create_schema
from credit_app.interfaces.credit.dependencies import get_engine
from credit_app.interfaces.credit.router import credit_router, customer_router
from credit_app.interfaces.health import router as health_router
from credit_app.shared.errors.handlers import register_error_handlers
from credit_app.shared.logging import configure_logging
from credit_app.shared.security.headers import SecurityHeadersMiddleware
from credit_app.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create missing tables when configured to."""
    if settings.create_tables_on_startup:
        create_schema(get_engine())
        logger.info("Database schema ensured")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(customer_router, prefix="/api/v1")
    app.include_router(credit_router, prefix="/api/v1")

    return app


app = create_app()

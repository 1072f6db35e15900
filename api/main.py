"""
Orders API - Main FastAPI Application.

REST layer exposing CRUD over orders stored in Redis.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging
import time

from api import dependencies
from api.routes import health, orders
from core.domain.exceptions import (
    EncodingError,
    OrderAlreadyExistsError,
    OrderNotFoundError,
    OrderRepositoryError,
)
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


configure_logging(get_app_settings().api.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Orders API",
    description="CRUD over orders persisted in a Redis key-value store.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(OrderNotFoundError)
async def order_not_found_handler(request: Request, exc: OrderNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"Order not found: {exc.key}"},
    )


@app.exception_handler(OrderAlreadyExistsError)
async def order_exists_handler(request: Request, exc: OrderAlreadyExistsError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": f"Order already exists: {exc.key}"},
    )


@app.exception_handler(EncodingError)
async def encoding_error_handler(request: Request, exc: EncodingError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions (e.g. a malformed page cursor).

    Args:
        request: FastAPI request
        exc: ValueError exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(OrderRepositoryError)
async def repository_error_handler(request: Request, exc: OrderRepositoryError) -> JSONResponse:
    """Store and decoding failures: logged, reported as a generic failure."""
    logger.error(f"Repository failure on {request.url.path}: {exc}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "path": request.url.path,
        },
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    settings = get_app_settings()
    logger.info(f"🚀 Orders API starting up (store: {settings.redis.store})...")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    await dependencies.close_dependencies()
    logger.info("👋 Orders API shutting down...")


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Orders API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


def run() -> None:
    """Start the HTTP listener."""
    import uvicorn

    settings = get_app_settings().api
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

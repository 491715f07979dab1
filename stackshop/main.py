"""StackShop catalog API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from stackshop.api import categories_router, health_router, products_router
from stackshop.api.middleware import setup_middleware
from stackshop.catalog import get_product_service
from stackshop.infrastructure.config import settings
from stackshop.infrastructure.logging_config import configure_logging

configure_logging(settings.log_level)
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Loads the catalog eagerly so a broken dataset fails startup instead
    of the first request.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    logger.info(
        "Starting StackShop API",
        version=settings.api_version,
        debug=settings.debug,
    )

    service = get_product_service(settings.catalog_data_path)
    logger.info(
        "Catalog ready",
        product_count=service.product_count,
        category_count=len(service.list_categories()),
    )

    yield

    logger.info("Shutting down StackShop API")


app = FastAPI(
    title="StackShop API",
    description="Searchable, filterable product catalog",
    version=settings.api_version,
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(categories_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": message,
            "error_code": error_code,
            "details": details,
            "request_id": request_id,
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle query parameter validation errors with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    logger.info(
        "Request validation failed",
        path=request.url.path,
        errors=len(exc.errors()),
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid request parameters",
            "error_code": "VALIDATION_ERROR",
            "details": jsonable_encoder(exc.errors()),
            "request_id": request_id,
        },
    )

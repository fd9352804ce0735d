"""
Wedding Extraction Service - FastAPI Application Entry Point.

Sanitizes the structured data a planning assistant extracts from chat
replies before anything is saved or shown to the couple.
"""
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.health import SERVICE_VERSION, router as health_router
from app.api.sanitize import router as sanitize_router
from app.core.config import get_settings
from app.core.logging import get_safe_logger, setup_logging
from app.schemas.response import ErrorDetail, ErrorResponse, ResponseMetadata


# Initialize logging first
setup_logging()
logger = get_safe_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    The service holds no resources; only startup and shutdown are logged.
    """
    settings = get_settings()
    logger.info(
        "Starting Wedding Extraction Service",
        max_chars=settings.max_extracted_json_chars
    )

    yield

    logger.info("Shutting down Wedding Extraction Service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Wedding Extraction Service",
        description="Validation and canonicalization of model-extracted wedding planning data",
        version=SERVICE_VERSION,
        docs_url="/docs" if settings.service_env == "dev" else None,
        redoc_url="/redoc" if settings.service_env == "dev" else None,
        openapi_url="/openapi.json" if settings.service_env == "dev" else None,
        lifespan=lifespan
    )

    # Register routes
    app.include_router(health_router)
    app.include_router(sanitize_router)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


def _error_response(
    request: Request,
    status_code: int,
    error: ErrorDetail
) -> JSONResponse:
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))

    logger.error(
        "Request failed",
        error_code=error.code,
        request_id=request_id,
        status_code=status_code,
        method=request.method,
        path=request.url.path
    )

    error_response = ErrorResponse(
        error=error,
        metadata=ResponseMetadata(requestId=request_id)
    )
    return JSONResponse(
        status_code=status_code,
        content=error_response.model_dump(by_alias=True)
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.
    Validation details are not returned; they may quote the body.
    """
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        ErrorDetail(code="BAD_REQUEST", message="Invalid request format", retryable=False)
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Map HTTP exceptions (404, 405, ...) onto the error envelope."""
    if exc.status_code == 404:
        code = "NOT_FOUND"
    elif exc.status_code == 405:
        code = "METHOD_NOT_ALLOWED"
    elif exc.status_code < 500:
        code = "BAD_REQUEST"
    else:
        code = "INTERNAL_ERROR"

    return _error_response(
        request,
        exc.status_code,
        ErrorDetail(
            code=code,
            message=exc.detail if isinstance(exc.detail, str) else "Request failed",
            retryable=exc.status_code >= 500
        )
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    Never logs exception details; they may contain user text.
    """
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorDetail(code="INTERNAL_ERROR", message="Internal server error", retryable=True)
    )


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.service_env == "dev"
    )

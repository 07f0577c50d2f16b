"""Error responses. Every error body carries the request's correlation id."""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.storehub.core.logging import get_logger

logger = get_logger(__name__)


def error_response(
    status_code: int,
    detail: Any,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"detail": detail, "request_id": correlation_id.get()}),
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers for HTTP errors, validation errors and crashes."""

    # Also catches fastapi.HTTPException, which subclasses the Starlette one.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.errors())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unhandled_exception",
            exc_info=exc,
            method=request.method,
            path=request.url.path,
        )
        # Rendered outside the correlation id middleware, so the header is set here.
        request_id = correlation_id.get()
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error",
            {"X-Request-ID": request_id} if request_id else None,
        )

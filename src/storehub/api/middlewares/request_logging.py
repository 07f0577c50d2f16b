"""Per-request log context and access log."""

import time

from asgi_correlation_id import correlation_id
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.storehub.core.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

_SILENT_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Binds request_id, method and path to every log line of the request.

    Logs one `request_completed` line per request except health probes.
    Context is cleared before and after so nothing leaks between requests.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        clear_request_context()
        bind_request_context(
            correlation_id.get(),
            method=request.method,
            path=request.url.path,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
            if request.url.path not in _SILENT_PATHS:
                logger.info(
                    "request_completed",
                    status_code=response.status_code,
                    duration_ms=round((time.perf_counter() - started) * 1000, 1),
                )
            return response
        finally:
            clear_request_context()

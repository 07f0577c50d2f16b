"""structlog setup and request-scoped log context.

Context bound here (request id, caller, brand/branch) is merged into every
log line emitted while handling the current request.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "asyncio")


def _renderer(debug: bool) -> structlog.typing.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(debug: bool = False) -> None:
    """Route stdlib logging to stdout and configure structlog on top of it.

    Args:
        debug: Colored console output at DEBUG level. Otherwise JSON at INFO.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None, **extra: str) -> None:
    """Attach the correlation id (and e.g. method/path) to the request's logs."""
    if request_id:
        bind_contextvars(request_id=request_id)
    if extra:
        bind_contextvars(**extra)


def bind_user_context(user_id: UUID, email: str | None = None) -> None:
    """Attach the authenticated caller.

    The email is only bound when settings.log_user_emails is on (GDPR).
    """
    from src.storehub.core.config import get_settings

    bind_contextvars(user_id=str(user_id))
    if email and get_settings().log_user_emails:
        bind_contextvars(user_email=email)


def bind_scope_context(brand_id: UUID | None = None, branch_id: UUID | None = None) -> None:
    """Attach the brand/branch the request operates on."""
    if brand_id is not None:
        bind_contextvars(brand_id=str(brand_id))
    if branch_id is not None:
        bind_contextvars(branch_id=str(branch_id))


def clear_request_context() -> None:
    clear_contextvars()

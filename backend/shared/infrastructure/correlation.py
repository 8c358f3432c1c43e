"""
Request correlation and access logging.

Each request gets an ID, taken from the caller's ``X-Request-ID`` header when
it is well formed and generated otherwise. The ID is stored in a context
variable (picked up by ``CorrelationIdFilter`` on every log record), echoed
on the response, and the request is logged once it completes.
"""

import logging
import re
import time
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shared.config.logging import get_logger

logger = get_logger(__name__)

# Context variable for request ID (copied into the threadpool with the context)
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Caller-supplied IDs must be short and free of control characters
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

# Paths not worth an access log line
QUIET_PATHS = frozenset({"/api/health"})


def get_request_id() -> str:
    """Get the current request ID ("" outside a request)."""
    return request_id_var.get()


def resolve_request_id(header_value: str | None) -> str:
    """Use the caller's ID when it is well formed, otherwise a new UUID."""
    if header_value and _REQUEST_ID_PATTERN.match(header_value):
        return header_value
    return str(uuid.uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Assign a correlation ID to every request and log its outcome.

    The ID is available as ``request.state.request_id`` and is returned in
    the ``X-Request-ID`` response header.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        request_id = resolve_request_id(request.headers.get(self.HEADER_NAME))
        token = request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[self.HEADER_NAME] = request_id

            if request.url.path not in QUIET_PATHS:
                logger.info(
                    f"{request.method} {request.url.path}",
                    status_code=response.status_code,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )
            return response
        finally:
            request_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """
    Logging filter that stamps ``request_id`` on every record.

    Usage:
        handler = logging.StreamHandler()
        handler.addFilter(CorrelationIdFilter())
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True

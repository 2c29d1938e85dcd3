"""
Custom middleware for the SpamGuard AI Engine.

Provides request tracing and the permissive CORS headers the browser
client relies on.
"""

import logging
import time
from contextvars import ContextVar
from typing import Dict, Optional
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

# Request ID of the call being served; read by the log filter below
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return request_id_var.get()


class RequestIDLogFilter(logging.Filter):
    """
    Stamps ``record.request_id`` on every log record.

    Attached to the root handlers in ``src.main`` so that the log format can
    print ``%(request_id)s``. Records emitted outside a request get ``-``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an ID and logs its start, outcome and duration.

    The client may pass its own ``X-Request-ID`` (the browser UI does not,
    but a proxy in front of the service might); otherwise a UUID4 is used.
    The ID is echoed back in the response headers.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # Reuse the caller's ID so logs line up across services
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        logger.info("Request started: %s %s", request.method, request.url.path)

        try:
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "Request completed: %s %s -> %s in %.2fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
            return response

        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed: %s %s (%s) after %.2fms",
                request.method,
                request.url.path,
                e,
                duration_ms,
            )
            raise

        finally:
            # Reset only after the last log line so every line carries the ID
            request_id_var.reset(token)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers OPTIONS pre-flight requests and stamps CORS headers on every response.

    Pre-flight gets ``204`` with an empty body regardless of path; the client
    sends ``authorization``/``apikey``/``x-client-info`` headers, which the
    browser only allows after a successful pre-flight.
    """

    def __init__(self, app, headers: Dict[str, str]):
        super().__init__(app)
        self.headers = headers

    async def dispatch(self, request: Request, call_next) -> Response:
        # Pre-flight never reaches the routers
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=self.headers)

        response = await call_next(request)
        # Error responses need the headers too, or the browser hides the message
        response.headers.update(self.headers)
        return response

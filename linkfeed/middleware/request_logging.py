from __future__ import annotations

import logging
import time
from typing import Iterable, Mapping

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie", "x-api-key"})


def redact_headers(headers: Mapping[str, str], sensitive: Iterable[str] = SENSITIVE_HEADERS) -> dict:
    hidden = {name.lower() for name in sensitive}
    return {
        name: (REDACTED if name.lower() in hidden else value)
        for name, value in headers.items()
    }


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request and its outcome.

    Credentials in request headers are replaced by ``[REDACTED]`` before they
    reach the log.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        logger.info(f"{request.method} {request.url.path}")
        logger.info(f"Headers: {redact_headers(request.headers)}")

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"{request.method} {request.url.path} failed")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

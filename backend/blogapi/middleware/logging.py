"""
Blog API Backend — Request Logging Middleware
==============================================

What:  One access-log line per request.
How:   Times the request, then logs method, path, status, duration, request id
       and client address. The level follows the status class:
       5xx → ERROR, 4xx → WARNING, everything else → INFO.

Request bodies are never logged (they carry passwords).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from blogapi.middleware.request_id import request_id_var

logger = logging.getLogger("blogapi.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log; `/health` probes are not logged."""

    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
        )
        return response

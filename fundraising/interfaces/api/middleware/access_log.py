# fundraising/interfaces/api/middleware/access_log.py
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from fundraising.infrastructure.config import get_settings
from fundraising.infrastructure.log import level_for_status, log


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One log line per request. 4xx lines are warnings, 5xx lines errors."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        # FUNDRAISING_ACCESS_LOG=false silences it (used in tests)
        if not get_settings().access_log:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log(
            f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms",
            level_for_status(response.status_code),
        )
        return response

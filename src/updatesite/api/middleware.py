# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Per-request correlation ids and access logging."""

from __future__ import annotations

import logging
import re
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("updatesite.api.middleware")

# Inbound ids are echoed into headers and logs, so only short opaque tokens are kept.
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _request_id(request: Request) -> str:
    inbound = request.headers.get("X-Request-ID", "")
    if _REQUEST_ID_RE.match(inbound):
        return inbound
    return uuid.uuid4().hex


class RequestMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ``X-Request-ID`` and log its outcome.

    The id is also available to handlers as ``request.state.request_id``.
    Server errors are logged at WARNING, everything else at INFO.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.state.request_id = rid = _request_id(request)
        started = time.perf_counter()

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = rid
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "[%s] %s %s -> %d (%.1fms)",
            rid,
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

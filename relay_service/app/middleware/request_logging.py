"""Access logging middleware.

Writes one structured record per completed request, carrying the method,
path, status code and duration, in the spirit of an HTTP access log. The
request id is taken from the ``X-Request-ID`` header or generated, stored
on ``request.state`` for the GraphQL context, and echoed on the response.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING, Any

from starlette.middleware.base import BaseHTTPMiddleware

from relay_service.infra.logging.context import set_log_context

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware logging each HTTP request once, after it completes.

    Attributes:
        exempt_paths: Paths excluded from logging
        log_level: Level for successful responses; 4xx log at WARNING and
            5xx at ERROR

    Example:
        app.add_middleware(RequestLoggingMiddleware, exempt_paths=["/health"])
    """

    def __init__(
        self,
        app: ASGIApp,
        exempt_paths: list[str] | None = None,
        log_level: int = logging.INFO,
    ) -> None:
        super().__init__(app)
        self.exempt_paths = exempt_paths or []
        self.log_level = log_level

    def _is_exempt(self, path: str) -> bool:
        return any(path.startswith(exempt) for exempt in self.exempt_paths)

    def _get_client_ip(self, request: Request) -> str:
        """Extract the client IP, preferring proxy headers.

        X-Forwarded-For may list several hops; the first one is the client.
        """
        for header in ("x-forwarded-for", "x-real-ip"):
            ip = request.headers.get(header)
            if ip:
                return ip.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Log the request once its response is ready.

        Args:
            request: The incoming request
            call_next: The next middleware or route handler

        Returns:
            Response from the handler
        """
        if self._is_exempt(request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        client_ip = self._get_client_ip(request)
        set_log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=client_ip,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                extra={
                    "event": "request_error",
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "duration_ms": round(duration * 1000, 2),
                    "client_ip": client_ip,
                    "exception_type": type(e).__name__,
                },
                exc_info=True,
            )
            raise

        duration = time.perf_counter() - start_time
        response.headers[REQUEST_ID_HEADER] = request_id

        response_log: dict[str, Any] = {
            "event": "response",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
            "client_ip": client_ip,
            "user_agent": request.headers.get("user-agent", ""),
        }
        if "content-length" in response.headers:
            response_log["response_size"] = int(response.headers["content-length"])

        if response.status_code >= 500:
            response_log_level = logging.ERROR
        elif response.status_code >= 400:
            response_log_level = logging.WARNING
        else:
            response_log_level = self.log_level

        logger.log(response_log_level, "HTTP Response", extra=response_log)
        return response


__all__ = ["REQUEST_ID_HEADER", "RequestLoggingMiddleware"]

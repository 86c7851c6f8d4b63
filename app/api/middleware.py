"""HTTP middleware for dispatch failures, security headers and access logging."""

from __future__ import annotations

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.config import AppSettings

from .responses import api_build_error_response, api_build_internal_error_payload

logger = structlog.get_logger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self'; base-uri 'self'; font-src 'self' https: data:; form-action 'self'; "
        "frame-ancestors 'self'; img-src 'self' data:; object-src 'none'; script-src 'self'; "
        "script-src-attr 'none'; style-src 'self' https: 'unsafe-inline'; upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
}


class DispatchFailureMiddleware(BaseHTTPMiddleware):
    """Convert any handler exception into the normalized 500 response.

    The full traceback is always logged server-side; the client message is
    redacted in production-equivalent environments.
    """

    def __init__(self, app: ASGIApp, settings: AppSettings):
        """Initialize middleware.

        Args:
            app: Wrapped ASGI application.
            settings: Settings snapshot deciding error-detail redaction.
        """

        super().__init__(app)
        self._settings = settings

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Run the downstream handler and convert any exception into a 500 response.

        Args:
            request: Incoming request.
            call_next: Downstream application callable.

        Returns:
            Response: Handler response, or the normalized internal-error response.
        """

        try:
            return await call_next(request)
        except Exception as error:  # pylint: disable=broad-exception-caught
            logger.exception(
                "request_handler_failed",
                method=request.method,
                path=request.url.path,
                error_type=type(error).__name__,
            )
            return api_build_error_response(api_build_internal_error_payload(error, self._settings))


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add baseline security headers without overriding handler-set values."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Run the downstream handler and add missing security headers.

        Args:
            request: Incoming request.
            call_next: Downstream application callable.

        Returns:
            Response: Downstream response with security headers set.
        """

        response = await call_next(request)
        for header_name, header_value in SECURITY_HEADERS.items():
            response.headers.setdefault(header_name, header_value)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one access record per request."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Run the downstream handler and log method, path, status and duration.

        Args:
            request: Incoming request.
            call_next: Downstream application callable.

        Returns:
            Response: Downstream response, unchanged.
        """

        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 3),
            client=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
        return response

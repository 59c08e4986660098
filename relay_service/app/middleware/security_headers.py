"""Security headers middleware for protecting against common web vulnerabilities.

Adds the HTTP security headers browsers rely on to every HTTP response:

- MIME-type sniffing (X-Content-Type-Options)
- Clickjacking (X-Frame-Options, frame-ancestors)
- Downgrade attacks (Strict-Transport-Security)
- Referrer and cross-domain policy leakage

GraphiQL loads its bundles from unpkg and runs inline scripts, so the
default Content-Security-Policy allows both. Pass ``csp_directives`` to
tighten it when GraphiQL is disabled.

Example Usage:
    from relay_service.app.middleware import SecurityHeadersMiddleware

    app.add_middleware(SecurityHeadersMiddleware)

    app.add_middleware(
        SecurityHeadersMiddleware,
        enable_hsts=False,
        server_header=None,  # Remove Server header
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.datastructures import MutableHeaders

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

# 180 days
DEFAULT_HSTS_MAX_AGE = 15552000


class SecurityHeadersMiddleware:
    """Pure ASGI middleware to add security-related HTTP headers to responses.

    References:
        https://owasp.org/www-project-secure-headers/

    Example:
        app = FastAPI()
        app.add_middleware(SecurityHeadersMiddleware)
    """

    def __init__(
        self,
        app: ASGIApp,
        enable_hsts: bool = True,
        hsts_max_age: int = DEFAULT_HSTS_MAX_AGE,
        hsts_include_subdomains: bool = True,
        enable_csp: bool = True,
        csp_directives: dict[str, str] | None = None,
        frame_options: str = "SAMEORIGIN",
        referrer_policy: str = "no-referrer",
        server_header: str | None | bool = False,
    ) -> None:
        """Initialize security headers middleware.

        Args:
            app: The ASGI application.
            enable_hsts: Whether to send Strict-Transport-Security.
            hsts_max_age: Max age for HSTS in seconds.
            hsts_include_subdomains: Include subdomains in HSTS.
            enable_csp: Whether to send Content-Security-Policy.
            csp_directives: CSP directives (defaults allow GraphiQL).
            frame_options: X-Frame-Options value (DENY, SAMEORIGIN).
            referrer_policy: Referrer-Policy value.
            server_header: None removes the Server header, False keeps it,
                a string replaces it.
        """
        self.app = app
        self.enable_hsts = enable_hsts
        self.hsts_max_age = hsts_max_age
        self.hsts_include_subdomains = hsts_include_subdomains
        self.enable_csp = enable_csp
        self.csp_directives = csp_directives or self._default_csp_directives()
        self.frame_options = frame_options
        self.referrer_policy = referrer_policy
        self.server_header = server_header

        self._headers = self._build_security_headers()

        logger.debug(
            "Security headers middleware initialized",
            extra={
                "hsts_enabled": self.enable_hsts,
                "csp_enabled": self.enable_csp,
                "frame_options": self.frame_options,
            },
        )

    @staticmethod
    def _default_csp_directives() -> dict[str, str]:
        unpkg_cdn = "https://unpkg.com"
        return {
            "default-src": "'self'",
            "script-src": f"'self' 'unsafe-inline' {unpkg_cdn}",
            "style-src": f"'self' 'unsafe-inline' {unpkg_cdn}",
            "img-src": "'self' data: https:",
            "font-src": f"'self' data: {unpkg_cdn}",
            "connect-src": "'self'",
            "frame-ancestors": "'self'",
            "base-uri": "'self'",
            "form-action": "'self'",
            "object-src": "'none'",
        }

    def _build_hsts_header(self) -> str:
        parts = [f"max-age={self.hsts_max_age}"]
        if self.hsts_include_subdomains:
            parts.append("includeSubDomains")
        return "; ".join(parts)

    def _build_csp_header(self) -> str:
        """Build Content-Security-Policy header value from directives.

        Directives without a value (e.g. upgrade-insecure-requests) are
        written bare.
        """
        parts = []
        for directive, value in self.csp_directives.items():
            parts.append(f"{directive} {value}" if value else directive)
        return "; ".join(parts)

    def _build_security_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "X-Content-Type-Options": "nosniff",
            "X-DNS-Prefetch-Control": "off",
            "X-Download-Options": "noopen",
            "X-Frame-Options": self.frame_options,
            "X-Permitted-Cross-Domain-Policies": "none",
            "Referrer-Policy": self.referrer_policy,
            # Legacy XSS auditor; disabled since it introduces its own leaks
            "X-XSS-Protection": "0",
        }
        if self.enable_hsts:
            headers["Strict-Transport-Security"] = self._build_hsts_header()
        if self.enable_csp:
            headers["Content-Security-Policy"] = self._build_csp_header()
        return headers

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Process ASGI request and inject security headers into response."""
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_security_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)

                for key, value in self._headers.items():
                    headers[key] = value

                if "x-powered-by" in headers:
                    del headers["x-powered-by"]

                if self.server_header is None:
                    if "server" in headers:
                        del headers["server"]
                elif isinstance(self.server_header, str):
                    headers["server"] = self.server_header

            await send(message)

        await self.app(scope, receive, send_with_security_headers)


__all__ = ["SecurityHeadersMiddleware"]

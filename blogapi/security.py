from __future__ import annotations

from flask import current_app, g
from werkzeug.wrappers.response import Response


def apply_security_headers(response: Response) -> Response:
    # HSTS (only meaningful over HTTPS)
    hsts_seconds = current_app.config.get("SECURITY_HSTS_SECONDS", 31536000)
    response.headers.setdefault("Strict-Transport-Security", f"max-age={hsts_seconds}; includeSubDomains")

    # Basic security headers
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    response.headers.setdefault("X-Frame-Options", "DENY")

    # API responses are per-caller; never let shared caches keep them
    response.headers.setdefault("Cache-Control", "no-store")

    csp = current_app.config.get("SECURITY_CSP")
    if csp:
        response.headers.setdefault("Content-Security-Policy", csp)

    req_id = getattr(g, "request_id", None)
    if req_id:
        response.headers.setdefault("X-Request-ID", req_id)

    return response

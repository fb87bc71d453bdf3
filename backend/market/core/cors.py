"""Cross-origin policy for the storefront and back-office clients."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from market.core.logger import REQUEST_ID_HEADER


def allowed_origins(raw: str | None) -> list[str] | str:
    """Parse ``CORS_ORIGINS`` into a list, or ``"*"`` when unrestricted."""
    origins = [origin.strip() for origin in (raw or "").split(",") if origin.strip()]
    if not origins or "*" in origins:
        return "*"
    return origins


def init_app(app: Flask) -> None:
    """Apply the CORS policy to every ``/api`` route.

    Session tokens travel in the ``Authorization`` header, never in cookies,
    so credentialed requests are only enabled for an explicit origin list.
    """
    origins = allowed_origins(app.config.get("CORS_ORIGINS"))
    api_prefix = app.config.get("API_BASE_PREFIX", "/api").rstrip("/")

    CORS(
        app,
        resources={rf"{api_prefix}/*": {"origins": origins}},
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
        supports_credentials=origins != "*",
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )

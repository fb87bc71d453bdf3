"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .admins import bp as admins_bp  # noqa: E402
from .breeds import bp as breeds_bp  # noqa: E402
from .customers import bp as customers_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .listings import bp as listings_bp  # noqa: E402
from .proposals import bp as proposals_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1/health
    (admins_bp, "/admins"),
    (customers_bp, "/customers"),
    (breeds_bp, "/breeds"),
    (listings_bp, "/listings"),
    (proposals_bp, "/proposals"),
]

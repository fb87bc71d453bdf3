"""HTTP API: versioned blueprints mounted under ``API_BASE_PREFIX``."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def join_prefix(*segments: str) -> str:
    """Join URL segments into a single absolute prefix (``"/api/v1/admins"``)."""
    parts = [segment.strip("/") for segment in segments if segment.strip("/")]
    return "/" + "/".join(parts)


def mount(app: Flask, version_prefix: str, entries: Iterable[tuple[Blueprint, str]]) -> None:
    """Register each ``(blueprint, relative_prefix)`` beneath ``version_prefix``."""
    for blueprint, relative in entries:
        app.register_blueprint(blueprint, url_prefix=join_prefix(version_prefix, relative))


def init_app(app: Flask) -> None:
    """Mount every API version on ``app``."""
    from market.api.v1 import API_VERSION, REGISTRY

    mount(app, join_prefix(app.config.get("API_BASE_PREFIX", "/api"), API_VERSION), REGISTRY)


__all__ = ["init_app", "join_prefix", "mount"]

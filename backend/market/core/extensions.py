"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import sqlite3
from datetime import timedelta

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData, event
from sqlalchemy.engine import Engine

# Global naming convention for all constraints.
# Unique-violation detection relies on these names (see services._shared.errors).
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)
jwt = JWTManager()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on foreign-key enforcement for SQLite connections (off by default)."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


class MissingSigningKeyError(RuntimeError):
    """Raised at startup when no session-token signing key is configured."""


def ensure_signing_key(app: Flask) -> str:
    """Return the configured signing key or abort application startup.

    :param app: Application whose ``JWT_SECRET_KEY`` is inspected.
    :type app: flask.Flask
    :returns: The signing key.
    :rtype: str
    :raises MissingSigningKeyError: When the key is unset or blank.
    """
    key = app.config.get("JWT_SECRET_KEY")
    if not isinstance(key, str) or not key.strip():
        raise MissingSigningKeyError(
            "JWT_SECRET_KEY is not configured; refusing to start without a signing key."
        )
    return key


def init_app(app: Flask) -> None:
    """Initialize SQLAlchemy and JWT extensions.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances. This call imports the
        :mod:`market.models` package so SQLAlchemy metadata is complete before
        ``create_all`` runs.
    """
    ensure_signing_key(app)

    ttl = int(app.config.get("SESSION_TOKEN_TTL_SECONDS", 3600))
    app.config.setdefault("JWT_ACCESS_TOKEN_EXPIRES", timedelta(seconds=ttl))
    app.config.setdefault("JWT_TOKEN_LOCATION", ["headers"])

    db.init_app(app)

    # Ensure models are imported so the metadata knows every table
    from market import models as _models  # noqa: F401

    jwt.init_app(app)

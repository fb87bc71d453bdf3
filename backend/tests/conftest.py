"""Shared fixtures: one app per run, one rolled-back transaction per test.

Services open their own units of work on ``db.session``; the ``session``
fixture replaces it with a scoped session joined to a single connection, so
whatever a test (or the code under test) commits is discarded at teardown.
"""

from __future__ import annotations

import os

import pytest
from market.core.config import TestingConfig
from market.core.extensions import db as _db
from market.factory import create_app
from sqlalchemy.orm import scoped_session, sessionmaker

TEST_SIGNING_KEY = "test-signing-key-0123456789abcdef"
REQUEST_ID = "test-request-id"


class TestConfig(TestingConfig):
    """Testing configuration with a fixed signing key and in-memory SQLite."""

    JWT_SECRET_KEY = TEST_SIGNING_KEY
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"


@pytest.fixture(scope="session")
def app():
    """Create the Flask application once for the whole run."""
    os.environ.pop("DATABASE_URL", None)
    return create_app(TestConfig)


@pytest.fixture(scope="session")
def db(app):
    """Create the schema inside a long-lived application context."""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture()
def session(db, connection):
    """Scoped session joined to an outer transaction plus a SAVEPOINT.

    With the SAVEPOINT open, SQLAlchemy's default join mode gives the session
    its own nested transaction: ``commit()`` releases it and ``rollback()``
    undoes only uncommitted work. The outer transaction is rolled back once
    the test ends.
    """
    outer = connection.begin()
    connection.begin_nested()

    scoped = scoped_session(sessionmaker(bind=connection, autoflush=False))
    original = db.session
    original.remove()
    db.session = scoped
    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original
        outer.rollback()


@pytest.fixture(autouse=True)
def _transactional(session):
    """Run every test inside the transactional session (factories included)."""
    yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_token(app, session):
    """Issue a valid administrator session token for protected endpoints."""
    from market.api.deps import get_session_tokens

    from tests.factories.accounts import AdminFactory

    admin = AdminFactory()
    session.commit()
    with app.test_request_context():
        return get_session_tokens().issue("admin", admin.id, admin.name, admin.phone)


@pytest.fixture()
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}", "X-Request-ID": REQUEST_ID}

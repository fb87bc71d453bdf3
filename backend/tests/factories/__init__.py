"""Factory Boy base class persisting through the application's session.

The ``session`` fixture swaps ``db.session`` for a SAVEPOINT-bound scoped
session; resolving it lazily makes factories write into the same
transaction as the services under test.
"""

from __future__ import annotations

import factory
from market.core.extensions import db


def current_session():
    return db.session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    """Flush (never commit) so tests decide when data becomes visible."""

    class Meta:
        abstract = True
        sqlalchemy_session_factory = current_session
        sqlalchemy_session_persistence = "flush"

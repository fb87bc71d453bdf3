"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

from contextlib import suppress

from flask import current_app
from sqlalchemy import event, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import Session, SessionTransaction, scoped_session

from market.core.extensions import db
from market.repositories import (
    AdminRepository,
    BreedRepository,
    CustomerRepository,
    ListingRepository,
    ProposalRepository,
)
from market.uow.base import UnitOfWork

ISOLATION_LEVELS = ("READ COMMITTED", "REPEATABLE READ", "SERIALIZABLE", "READ UNCOMMITTED")


class SQLAlchemyRepositoryContainer:
    """Provide repository instances that share a SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.admins = AdminRepository(session=self.session)
        self.customers = CustomerRepository(session=self.session)
        self.breeds = BreedRepository(session=self.session)
        self.listings = ListingRepository(session=self.session)
        self.proposals = ProposalRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    SQLAlchemy-backed UoW using the Flask-scoped session.

    The same session is shared across all repositories for a consistent
    transaction: commit on clean exit, rollback when the block raises.
    """

    def __init__(self) -> None:
        super().__init__(session=db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # The session begins lazily on first use.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only Unit of Work backed by the Flask-scoped SQLAlchemy session.

    This UoW:
    - Optionally sets the transaction isolation level (PostgreSQL/MySQL only).
    - Applies ``SET TRANSACTION READ ONLY`` where the dialect supports it.
    - Installs portable write-guards and always rolls back on exit.
    - Disallows ``commit()``.

    Parameters
    ----------
    isolation_level:
        Optional isolation level hint, e.g. ``"READ COMMITTED"``.
    enforce_db_readonly:
        If ``True`` (default), applies ``SET TRANSACTION READ ONLY`` when supported.

    Notes
    -----
    On SQLite only the write-guards apply. Results must be converted to
    DTOs inside the ``with`` block: the closing rollback expires ORM state.
    """

    _WRITE_PREFIXES = (
        "insert",
        "update",
        "delete",
        "merge",
        "alter",
        "drop",
        "truncate",
        "create",
        "replace",
        "grant",
        "revoke",
    )
    _DIRECTIVE_DIALECTS = ("postgresql", "mysql", "mariadb")

    def __init__(
        self,
        *,
        isolation_level: str | None = "READ COMMITTED",
        enforce_db_readonly: bool = True,
    ) -> None:
        super().__init__(session=db.session)
        self.isolation_level = isolation_level
        self.enforce_db_readonly = enforce_db_readonly

        self._conn: Connection | None = None
        self._txn_ctx: SessionTransaction | None = None
        self._listeners_installed = False

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        """Enter a read scope, owning a fresh transaction when possible.

        When the session already runs a transaction (autobegin, an outer
        request scope or the test fixture) the scope attaches to it instead;
        the guards still block writes but no ``SET TRANSACTION`` is issued.
        """
        self._txn_ctx = None
        self._conn = None

        try:
            txn_ctx = self.session.begin()
            txn_ctx.__enter__()
            self._txn_ctx = txn_ctx
        except InvalidRequestError:
            pass

        self._conn = self.session.connection()
        dialect = self._conn.dialect.name

        self._install_listeners()

        if self._txn_ctx is not None and dialect in self._DIRECTIVE_DIALECTS:
            try:
                if self.isolation_level:
                    iso = self.isolation_level.upper().strip()
                    if iso not in ISOLATION_LEVELS:
                        current_app.logger.warning(
                            "Unknown isolation_level '%s'; attempting as-is.", iso
                        )
                    self.session.execute(text(f"SET TRANSACTION ISOLATION LEVEL {iso}"))
                if self.enforce_db_readonly:
                    self.session.execute(text("SET TRANSACTION READ ONLY"))
            except SQLAlchemyError as exc:
                current_app.logger.warning(
                    "SET TRANSACTION directives failed (%s). Falling back to guards-only.", exc
                )

        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """Always remove guards. Roll back only if we own the transaction."""
        try:
            if self._txn_ctx is not None:
                with suppress(SQLAlchemyError):
                    self.session.rollback()
                # Hand the session's transaction context back so the next
                # ``begin()`` on this session starts fresh.
                try:
                    self._txn_ctx.__exit__(exc_type, exc, tb)
                finally:
                    self._txn_ctx = None
        finally:
            self._remove_listeners()
            self._conn = None

    def commit(self) -> None:
        """
        Disallow commit in read-only Unit of Work.

        :raises RuntimeError: always, to prevent accidental writes.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()

    # ----------------------------- Guards & Listeners --------------------------

    def _install_listeners(self) -> None:
        """Install ORM and cursor-level listeners that reject any write."""
        if self._listeners_installed:
            return

        def _before_flush(session, flush_context, instances):
            if session.new or session.dirty or session.deleted:
                raise RuntimeError(
                    "Read-only UnitOfWork: ORM flush blocked (new/dirty/deleted objects present)."
                )

        event.listen(self._concrete_session(), "before_flush", _before_flush)

        def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            first_token = statement.lstrip().split(None, 1)[0].lower() if statement else ""
            if first_token.startswith(self._WRITE_PREFIXES):
                raise RuntimeError(
                    f"Read-only UnitOfWork: SQL statement blocked: {first_token.upper()}"
                )

        target = self._conn if self._conn is not None else self.session.get_bind()
        event.listen(target, "before_cursor_execute", _before_cursor_execute)

        self._ro__before_flush = _before_flush
        self._ro__before_cursor_execute = _before_cursor_execute
        self._listeners_installed = True

    def _remove_listeners(self) -> None:
        if not self._listeners_installed:
            return

        with suppress(InvalidRequestError):
            event.remove(self._concrete_session(), "before_flush", self._ro__before_flush)

        with suppress(InvalidRequestError):
            target = self._conn if self._conn is not None else self.session.get_bind()
            event.remove(target, "before_cursor_execute", self._ro__before_cursor_execute)

        self._listeners_installed = False

    def _concrete_session(self) -> Session:
        # Listeners on a scoped_session would attach to every session it makes.
        if isinstance(self.session, scoped_session):
            return self.session()
        return self.session

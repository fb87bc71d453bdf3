# market/services/_shared/base.py
from __future__ import annotations

from market.core import errors as api_errors
from market.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    InvalidSessionError,
    NotFoundError,
    PolicyViolationError,
    ServiceError,
    ValidationFailedError,
)
from market.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


def translate_exceptions(exc: Exception) -> Exception:
    """
    Map service-level errors to API-level (HTTP) errors.

    :param exc: Exception raised within the service.
    :type exc: Exception
    :returns: Translated exception ready to be re-raised.
    :rtype: Exception
    """
    if isinstance(exc, NotFoundError):
        return api_errors.NotFound(str(exc))

    if isinstance(exc, ConflictError):
        details = {"field": exc.field} if exc.field else None
        return api_errors.Conflict(str(exc), details=details)

    if isinstance(exc, InvalidSessionError):
        return api_errors.Unauthorized(str(exc))

    if isinstance(exc, AuthenticationError):
        return api_errors.BadRequest(str(exc), code="invalid_credentials")

    if isinstance(exc, PolicyViolationError):
        return api_errors.BadRequest(
            str(exc), code="policy_violation", details={"violations": exc.violations}
        )

    if isinstance(exc, ValidationFailedError):
        return api_errors.BadRequest(str(exc), code="validation_error")

    # Any other ServiceError subclass → 400 Bad Request
    if isinstance(exc, ServiceError):
        return api_errors.BadRequest(str(exc))

    # Fallback: return untouched (will bubble up to Flask handler)
    return exc


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Provide helpers to run read-only and read-write units of work.
    * Centralize error translation.
    * Keep services thin, orchestration-only, no web/ORM leakage.

    Notes
    -----
    - Services must never touch the global session; always use a Unit of Work.
    - ORM rows are converted to DTOs before the unit of work closes.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW instance.
        :rtype: SQLAlchemyUnitOfWork
        """
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param isolation: Transaction isolation level (e.g. "READ COMMITTED").
        :type isolation: str | None
        :param enforce_db_readonly: Apply `SET TRANSACTION READ ONLY` when supported.
        :type enforce_db_readonly: bool
        :returns: Read-only UoW instance.
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    def translate_exceptions(self, exc: Exception) -> Exception:
        return translate_exceptions(exc)

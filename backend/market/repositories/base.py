"""Generic repository base for SQLAlchemy 2.x.

This module centralizes persistence-only concerns shared by all repositories:
- Safe sorting with a whitelist mapping (prevents SQL injection).
- Deterministic ordering (adds a primary-key tiebreaker).
- Eager-loading hooks to prevent N+1 issues.
- Safe update helpers with per-repository updatable-field whitelists.
- No business logic, no commit/rollback; services own transactions.

Design decisions
----------------
* Repositories never implement use cases or domain policies and never call
  commit/rollback; services define the Unit of Work.
* Inserts flush immediately so database constraints (unique, foreign key)
  fire inside the caller's transaction and can be translated there.
* Updates MUST NOT allow mass-assignment: each repo exposes an explicit
  ``_updatable_fields`` whitelist.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, and_, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from market.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Parse public sort tokens into ``(field, is_desc)`` tuples.

    :param raw: Public tokens like ``["-created_at", "name"]``.
    :type raw: Iterable[str]
    :returns: List of ``(field_name, is_desc)`` tokens.
    :rtype: list[tuple[str, bool]]
    """
    parsed: list[tuple[str, bool]] = []
    for token in raw:
        is_desc = token.startswith("-")
        field = (token[1:] if is_desc else token).strip()
        if field:
            parsed.append((field, is_desc))
    return parsed


def _apply_sorting(
    stmt: Select[Any],
    sortable_fields: Mapping[str, InstrumentedAttribute[Any]],
    tokens: Iterable[str],
    *,
    pk_attr: InstrumentedAttribute[Any] | None,
) -> Select[Any]:
    """Apply safe ``ORDER BY`` clauses based on a whitelist mapping.

    Unknown sort tokens are ignored silently. The primary key is always
    appended as a final ascending tiebreaker.
    """
    orders: list[Any] = []
    for field, is_desc in parse_sort_tokens(tokens):
        col = sortable_fields.get(field)
        if isinstance(col, InstrumentedAttribute):
            orders.append(col.desc() if is_desc else col.asc())

    if orders:
        stmt = stmt.order_by(*orders)

    if pk_attr is not None:
        stmt = stmt.order_by(pk_attr.asc())

    return stmt


class BaseRepository(Generic[E]):
    """Generic, persistence-only repository for a single aggregate.

    Subclasses MUST define ``model`` and MAY override ``_sortable_fields``,
    ``_filterable_fields``, ``_updatable_fields`` and ``_default_eagerload``.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Initialise the repository with an optional SQLAlchemy session.

        When no explicit session is provided the repository falls back to the
        Flask-scoped session exposed by ``market.core.extensions``.

        :param session: Session shared across the Unit of Work scope.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session, or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    # ------------------------------ Extensibility ----------------------------

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        """Attach eager-loading options to generic get/list operations."""
        return stmt

    def _pk_attr(self) -> InstrumentedAttribute[Any] | None:
        return getattr(self.model, "id", None)

    def _sortable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of public sort keys to model attributes."""
        return {}

    def _filterable_fields(self) -> Mapping[str, InstrumentedAttribute[Any]]:
        """Whitelist mapping of equality-filterable public keys."""
        return {}

    def _updatable_fields(self) -> set[str]:
        """Whitelist of public keys that can be assigned on update."""
        return set()

    # ------------------------------ Internals --------------------------------

    def _apply_equality_filters(
        self,
        stmt: Select[Any],
        filters: Mapping[str, Any] | None,
    ) -> Select[Any]:
        """Apply whitelisted equality filters; unknown keys are ignored."""
        if not filters:
            return stmt
        allowed = self._filterable_fields()
        clauses: list[Any] = []
        for k, v in filters.items():
            col = allowed.get(k)
            if isinstance(col, InstrumentedAttribute):
                clauses.append(col == v)
        return stmt.where(and_(*clauses)) if clauses else stmt

    def _sanitize_update_fields(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """Return only whitelisted update keys.

        :raises ValueError: If unknown keys are present or nothing is updatable.
        """
        allowed = self._updatable_fields()
        if not allowed and fields:
            raise ValueError("No updatable fields configured for this repository.")
        unknown = [k for k in fields if k not in allowed]
        if unknown:
            raise ValueError(f"Unknown or non-updatable fields: {unknown}")
        return dict(fields)

    # --------------------------------- CRUD ----------------------------------

    def add(self, instance: E) -> E:
        """Stage a new entity and flush to materialize the PK.

        Constraint violations surface here as
        :class:`sqlalchemy.exc.IntegrityError`; callers translate them.

        :param instance: New entity instance.
        :type instance: E
        :returns: The same instance after ``flush()``.
        :rtype: E
        """
        self.session.add(instance)
        self.flush()
        return instance

    def get(self, entity_id: Any) -> E | None:
        """Retrieve a single entity by primary key.

        :param entity_id: Primary-key value.
        :type entity_id: Any
        :returns: Entity or ``None``.
        :rtype: E | None
        :raises RuntimeError: If no PK attribute can be detected.
        """
        pk_attr = self._pk_attr()
        if pk_attr is None:
            raise RuntimeError("BaseRepository.get requires a detectable PK attribute.")
        stmt = self._default_eagerload(select(self.model).where(pk_attr == entity_id))
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def delete(self, instance: E) -> None:
        """Delete an entity and flush."""
        self.session.delete(instance)
        self.flush()

    def flush(self) -> None:
        self.session.flush()

    def update(self, instance: E, **fields: Any) -> E:
        """Assign whitelisted keys to ``instance`` and flush.

        The assignment uses ``setattr`` so ``@validates`` hooks on the mapped
        class still run.

        :raises ValueError: On unknown or non-updatable keys.
        """
        for k, v in self._sanitize_update_fields(fields).items():
            setattr(instance, k, v)
        self.flush()
        return instance

    def list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[str] | None = None,
        limit: int | None = None,
    ) -> list[E]:
        """List entities with optional filtering and sorting.

        :param filters: Equality filters (public keys).
        :type filters: Mapping[str, Any] | None
        :param sort: Public sort tokens (e.g., ``["-created_at"]``).
        :type sort: Iterable[str] | None
        :param limit: Optional limit.
        :type limit: int | None
        :returns: List of entities.
        :rtype: list[E]
        """
        stmt: Select[Any] = select(self.model)
        stmt = self._apply_equality_filters(stmt, filters)
        stmt = self._default_eagerload(stmt)
        stmt = _apply_sorting(stmt, self._sortable_fields(), sort or [], pk_attr=self._pk_attr())
        if limit is not None:
            stmt = stmt.limit(int(limit))
        return list(self.session.execute(stmt).unique().scalars().all())

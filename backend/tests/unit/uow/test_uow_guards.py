"""Unit tests for the read-only and read-write units of work."""

import pytest
from market.models import Breed
from market.uow import SQLAlchemyReadOnlyUnitOfWork as ROuow
from market.uow import SQLAlchemyUnitOfWork as RWuow
from sqlalchemy import func, select


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_blocks_orm_flush_writes(self, session):
        """Flushing new objects inside the RO UoW raises."""
        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            uow.session.add(Breed(name="blocked"))
            uow.session.flush()
        session.rollback()

    def test_disallows_commit(self, session):
        with ROuow() as uow, pytest.raises(RuntimeError, match="does not allow commit"):
            uow.commit()

    def test_allows_reads(self, session):
        with RWuow() as uow:
            uow.breeds.add(Breed(name="nelore"))

        with ROuow() as uow:
            count = uow.session.execute(select(func.count()).select_from(Breed)).scalar_one()
            assert count >= 1


class TestSQLAlchemyUnitOfWork:
    def test_commits_on_success(self, session):
        with RWuow() as uow:
            uow.breeds.add(Breed(name="angus"))

        assert session.execute(select(Breed).where(Breed.name == "angus")).scalar_one()

    def test_rolls_back_on_error(self, session):
        with pytest.raises(ValueError), RWuow() as uow:
            uow.breeds.add(Breed(name="discarded"))
            raise ValueError("boom")

        assert session.execute(select(Breed).where(Breed.name == "discarded")).first() is None


class TestSequentialUnitsOfWork:
    """Several units of work opened one after another on the same session."""

    def test_two_read_only_blocks_in_a_row(self, session):
        with RWuow() as uow:
            uow.breeds.add(Breed(name="gir"))

        for _ in range(2):
            with ROuow() as uow:
                names = uow.session.execute(select(Breed.name)).scalars().all()
                assert "gir" in names

    def test_read_write_after_read_only(self, session):
        with ROuow() as uow:
            uow.session.execute(select(func.count()).select_from(Breed)).scalar_one()

        with RWuow() as uow:
            uow.breeds.add(Breed(name="brahman"))

        assert session.execute(select(Breed).where(Breed.name == "brahman")).scalar_one()

    def test_read_only_after_rejected_flush(self, session):
        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            uow.session.add(Breed(name="blocked"))
            uow.session.flush()
        session.rollback()

        with ROuow() as uow:
            assert uow.session.execute(select(Breed).where(Breed.name == "blocked")).first() is None

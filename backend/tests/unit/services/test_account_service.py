"""Unit tests for AccountService across both account kinds."""

from __future__ import annotations

import threading
from datetime import UTC, datetime

import pytest
from market.core.extensions import db
from market.infra.security.bcrypt_hasher import BcryptPasswordHasher
from market.models import Admin, Customer
from market.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PolicyViolationError,
    ValidationFailedError,
)
from market.services._shared.policies.credentials import (
    PASSWORD_TOO_SHORT,
    PASSWORD_WEAK_COMPOSITION,
    PHONE_BAD_LENGTH,
)
from market.services._shared.ports import StubTokenProvider
from market.services.accounts import ADMIN, CUSTOMER, AccountService
from market.services.accounts.dto import LoginIn, PasswordResetIn, RegistrationIn
from market.services.sessions import SessionTokenService
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import scoped_session, sessionmaker

from tests.factories.accounts import DEFAULT_PASSWORD, AdminFactory, CustomerFactory

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def tokens() -> SessionTokenService:
    return SessionTokenService(StubTokenProvider(now=NOW))


@pytest.fixture()
def service(tokens) -> AccountService:
    return AccountService(hasher=BcryptPasswordHasher(rounds=4), tokens=tokens)


def _ana(**overrides) -> RegistrationIn:
    data = {
        "name": "Ana",
        "identity": "12345678901",
        "phone": "(11) 98765-4321",
        "password": "Abc12345!",
    }
    data.update(overrides)
    return RegistrationIn(**data)


class TestRegister:
    def test_customer_registration_canonicalizes_phone(self, service, session):
        out = service.register(CUSTOMER, _ana())

        assert out.kind == "customer"
        assert out.national_id == "12345678901"
        assert out.phone == "+5511987654321"

        stored = session.execute(select(Customer)).scalar_one()
        assert stored.password_hash != "Abc12345!"
        assert stored.password_hash.startswith("$2b$")

    def test_duplicate_identity_conflicts(self, service):
        service.register(CUSTOMER, _ana())
        with pytest.raises(ConflictError) as excinfo:
            service.register(CUSTOMER, _ana(name="Other", phone="1133334444"))
        assert str(excinfo.value) == "National id already registered."
        assert excinfo.value.field == "national_id"

    def test_admin_email_is_normalized_and_unique(self, service, session):
        service.register(ADMIN, _ana(identity="Ana@Example.com"))
        assert session.execute(select(Admin.email)).scalar_one() == "ana@example.com"

        with pytest.raises(ConflictError, match="Email already registered."):
            service.register(ADMIN, _ana(identity="ana@example.com"))

    @pytest.mark.parametrize(
        "field, value",
        [("name", "  "), ("identity", "  "), ("phone", "  "), ("password", ""), ("password", None)],
    )
    def test_missing_field(self, service, field, value):
        with pytest.raises(ValidationFailedError, match="Please provide name, email"):
            service.register(ADMIN, _ana(**{"identity": "ana@example.com", field: value}))

    def test_whitespace_password_goes_to_the_policy(self, service):
        with pytest.raises(PolicyViolationError) as excinfo:
            service.register(CUSTOMER, _ana(password="   "))
        assert excinfo.value.violations == [PASSWORD_TOO_SHORT, PASSWORD_WEAK_COMPOSITION]

    def test_weak_password_reports_every_rule(self, service):
        with pytest.raises(PolicyViolationError) as excinfo:
            service.register(CUSTOMER, _ana(password="abc"))
        assert excinfo.value.violations == [PASSWORD_TOO_SHORT, PASSWORD_WEAK_COMPOSITION]

    def test_bad_phone(self, service, session):
        with pytest.raises(PolicyViolationError) as excinfo:
            service.register(CUSTOMER, _ana(phone="123"))
        assert excinfo.value.violations == [PHONE_BAD_LENGTH]
        assert session.execute(select(Customer)).first() is None

    def test_invalid_email_is_rejected(self, service):
        with pytest.raises(ValidationFailedError):
            service.register(ADMIN, _ana(identity="not-an-email"))


class TestLogin:
    def test_customer_login_returns_profile_without_token(self, service):
        service.register(CUSTOMER, _ana())
        result = service.login(CUSTOMER, LoginIn("12345678901", "Abc12345!"))

        assert result.account.name == "Ana"
        assert result.account.phone == "+5511987654321"
        assert result.token is None

    def test_admin_login_issues_token(self, service, tokens, session):
        admin = AdminFactory(email="ana@example.com")
        session.commit()

        result = service.login(ADMIN, LoginIn("ana@example.com", DEFAULT_PASSWORD))

        claims = tokens.verify(result.token)
        assert claims.subject_id == admin.id
        assert claims.kind == "admin"
        assert claims.phone == admin.phone

    def test_admin_login_without_token_service_fails_loudly(self, session):
        AdminFactory(email="ana@example.com")
        session.commit()
        service = AccountService(hasher=BcryptPasswordHasher(rounds=4))

        with pytest.raises(RuntimeError):
            service.login(ADMIN, LoginIn("ana@example.com", DEFAULT_PASSWORD))

    def test_every_failure_has_the_same_message(self, service):
        """Wrong password, unknown identity and blanks are indistinguishable."""
        service.register(CUSTOMER, _ana())

        messages = set()
        for dto in (
            LoginIn("12345678901", "wrong"),
            LoginIn("00000000000", "Abc12345!"),
            LoginIn("", "Abc12345!"),
            LoginIn("12345678901", None),
        ):
            with pytest.raises(AuthenticationError) as excinfo:
                service.login(CUSTOMER, dto)
            messages.add(str(excinfo.value))

        assert messages == {"Incorrect national id or password."}


class TestResetPassword:
    def test_new_password_replaces_old(self, service, session):
        CustomerFactory(national_id="12345678901")
        session.commit()

        service.reset_password(CUSTOMER, PasswordResetIn("12345678901", "Newpass1!"))

        assert service.login(CUSTOMER, LoginIn("12345678901", "Newpass1!")).account
        with pytest.raises(AuthenticationError):
            service.login(CUSTOMER, LoginIn("12345678901", DEFAULT_PASSWORD))

    def test_unknown_identity(self, service):
        with pytest.raises(NotFoundError):
            service.reset_password(CUSTOMER, PasswordResetIn("00000000000", "Newpass1!"))

    @pytest.mark.parametrize("password", [None, ""])
    def test_missing_password(self, service, password):
        with pytest.raises(ValidationFailedError, match="Please provide the new password."):
            service.reset_password(CUSTOMER, PasswordResetIn("12345678901", password))

    def test_whitespace_password_reports_policy_violations(self, service):
        with pytest.raises(PolicyViolationError) as excinfo:
            service.reset_password(CUSTOMER, PasswordResetIn("12345678901", "  "))
        assert excinfo.value.violations == [PASSWORD_TOO_SHORT, PASSWORD_WEAK_COMPOSITION]

    def test_weak_password(self, service):
        with pytest.raises(PolicyViolationError):
            service.reset_password(CUSTOMER, PasswordResetIn("12345678901", "short"))


class TestQueries:
    def test_identity_exists(self, service, session):
        CustomerFactory(national_id="12345678901")
        session.commit()

        assert service.identity_exists(CUSTOMER, "12345678901") is True
        assert service.identity_exists(CUSTOMER, "00000000000") is False

    def test_identity_exists_requires_value(self, service):
        with pytest.raises(ValidationFailedError, match="national id"):
            service.identity_exists(CUSTOMER, None)

    def test_get_and_list(self, service, session):
        zoe = CustomerFactory(name="Zoe")
        CustomerFactory(name="Bia")
        session.commit()

        assert service.get(CUSTOMER, zoe.id).name == "Zoe"
        assert [c.name for c in service.list_accounts(CUSTOMER)] == ["Bia", "Zoe"]

    def test_get_unknown(self, service):
        with pytest.raises(NotFoundError):
            service.get(ADMIN, "missing")


class TestConcurrentRegistration:
    """Simultaneous registrations of one identity against a shared database file."""

    WORKERS = 6

    def test_exactly_one_registration_wins(self, app, monkeypatch, tmp_path):
        engine = create_engine(
            f"sqlite:///{tmp_path / 'accounts.db'}", connect_args={"timeout": 30}
        )
        db.metadata.create_all(engine)
        # One session per thread, all on the file database.
        shared = scoped_session(
            sessionmaker(bind=engine, autoflush=False), scopefunc=threading.get_ident
        )
        monkeypatch.setattr(db, "session", shared)

        service = AccountService(hasher=BcryptPasswordHasher(rounds=4))
        barrier = threading.Barrier(self.WORKERS)
        outcomes: list[str] = []

        def register(n: int) -> None:
            with app.app_context():
                barrier.wait()
                try:
                    service.register(CUSTOMER, _ana(name=f"Racer {n}"))
                    outcomes.append("ok")
                except ConflictError:
                    outcomes.append("conflict")
                except Exception as exc:
                    outcomes.append(f"unexpected: {exc!r}")
                finally:
                    shared.remove()

        threads = [threading.Thread(target=register, args=(n,)) for n in range(self.WORKERS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=60)

        try:
            with engine.connect() as conn:
                stored = conn.execute(select(func.count()).select_from(Customer)).scalar_one()
        finally:
            engine.dispose()

        assert sorted(outcomes) == ["conflict"] * (self.WORKERS - 1) + ["ok"]
        assert stored == 1

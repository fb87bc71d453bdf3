"""Unit tests for SessionTokenService using the stub token provider."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from market.services._shared.errors import InvalidSessionError
from market.services._shared.ports import StubTokenProvider
from market.services.sessions import SessionTokenService

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


@pytest.fixture()
def provider() -> StubTokenProvider:
    return StubTokenProvider(now=NOW)


@pytest.fixture()
def service(provider) -> SessionTokenService:
    return SessionTokenService(provider)


class TestSessionTokenService:
    def test_issue_then_verify_returns_claims(self, service):
        token = service.issue("admin", "abc-123", "Ana", "+5511987654321")
        claims = service.verify(token)

        assert claims.subject_id == "abc-123"
        assert claims.kind == "admin"
        assert claims.name == "Ana"
        assert claims.phone == "+5511987654321"
        assert claims.issued_at == NOW
        assert claims.expires_at == NOW + timedelta(hours=1)

    def test_expired_token_is_rejected(self, service, provider):
        """A token is accepted just before expiry and rejected at expiry."""
        token = service.issue("admin", "abc-123", "Ana", "+5511987654321")

        provider.now = NOW + timedelta(minutes=59)
        assert service.verify(token).subject_id == "abc-123"

        provider.now = NOW + timedelta(hours=1)
        with pytest.raises(InvalidSessionError):
            service.verify(token)

    def test_token_signed_with_other_secret_is_rejected(self, service):
        forged = StubTokenProvider(secret="other", now=NOW).create_access_token(
            identity="abc-123",
            additional_claims={"kind": "admin", "name": "Ana", "phone": "+5511987654321"},
        )
        with pytest.raises(InvalidSessionError):
            service.verify(forged)

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token(self, service, token):
        with pytest.raises(InvalidSessionError, match="Missing session token"):
            service.verify(token)

    def test_garbage_token(self, service):
        with pytest.raises(InvalidSessionError):
            service.verify("garbage")

    def test_token_without_session_claims_is_rejected(self, service, provider):
        token = provider.create_access_token(identity="abc-123")
        with pytest.raises(InvalidSessionError):
            service.verify(token)

    def test_custom_ttl(self, provider):
        service = SessionTokenService(provider, ttl=timedelta(minutes=5))
        claims = service.verify(service.issue("admin", "x", "Ana", "+5511987654321"))
        assert claims.expires_at - claims.issued_at == timedelta(minutes=5)

    @pytest.mark.parametrize("ttl", [timedelta(0), timedelta(seconds=-1)])
    def test_non_positive_ttl_is_rejected(self, provider, ttl):
        with pytest.raises(ValueError):
            SessionTokenService(provider, ttl=ttl)

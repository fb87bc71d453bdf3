"""API tests for administrator registration, login and session checks."""

from __future__ import annotations

from datetime import datetime, timedelta

from freezegun import freeze_time

from tests.factories.accounts import DEFAULT_PASSWORD, AdminFactory

BASE = "/api/v1/admins"


def _payload(**overrides):
    data = {
        "name": "Ana",
        "email": "ana@example.com",
        "phone": "(11) 98765-4321",
        "password": "Abc12345!",
    }
    data.update(overrides)
    return data


class TestAdminRegistration:
    def test_register_returns_public_profile(self, client):
        response = client.post(BASE, json=_payload())

        assert response.status_code == 201
        body = response.get_json()["data"]
        assert body["email"] == "ana@example.com"
        assert body["phone"] == "+5511987654321"
        assert "password" not in body
        assert "password_hash" not in body

    def test_duplicate_email(self, client):
        client.post(BASE, json=_payload())
        response = client.post(BASE, json=_payload(phone="1133334444"))

        assert response.status_code == 409
        problem = response.get_json()
        assert problem["detail"] == "Email already registered."
        assert problem["details"] == {"field": "email"}

    def test_missing_fields(self, client):
        response = client.post(BASE, json={"name": "Ana"})

        assert response.status_code == 400
        assert response.get_json()["detail"] == "Please provide name, email, phone and password."

    def test_weak_password_lists_violations(self, client):
        response = client.post(BASE, json=_payload(password="abc"))

        assert response.status_code == 400
        problem = response.get_json()
        assert problem["code"] == "policy_violation"
        assert len(problem["details"]["violations"]) == 2

    def test_list_hides_password_hashes(self, client, session):
        AdminFactory(name="Bia")
        session.commit()

        response = client.get(BASE)

        assert response.status_code == 200
        [admin] = response.get_json()["data"]
        assert admin["name"] == "Bia"
        assert "password_hash" not in admin


class TestAdminLogin:
    def test_login_returns_token_usable_on_me(self, client, session):
        admin = AdminFactory(email="ana@example.com", name="Ana")
        session.commit()

        response = client.post(
            f"{BASE}/login", json={"email": "ana@example.com", "password": DEFAULT_PASSWORD}
        )
        assert response.status_code == 200
        token = response.get_json()["data"]["token"]

        me = client.get(f"{BASE}/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        claims = me.get_json()["data"]
        assert claims["id"] == admin.id
        assert claims["kind"] == "admin"
        assert claims["name"] == "Ana"

    def test_wrong_password_and_unknown_email_look_the_same(self, client, session):
        AdminFactory(email="ana@example.com")
        session.commit()
        headers = {"X-Request-ID": "req-login"}

        wrong = client.post(
            f"{BASE}/login", json={"email": "ana@example.com", "password": "nope"}, headers=headers
        )
        unknown = client.post(
            f"{BASE}/login",
            json={"email": "nobody@example.com", "password": DEFAULT_PASSWORD},
            headers=headers,
        )

        assert wrong.status_code == unknown.status_code == 400
        assert wrong.data == unknown.data
        assert wrong.get_json()["detail"] == "Incorrect email or password."

    def test_failure_bodies_differ_only_in_request_id(self, client, session):
        AdminFactory(email="ana@example.com")
        session.commit()

        wrong = client.post(
            f"{BASE}/login", json={"email": "ana@example.com", "password": "nope"}
        ).get_json()
        unknown = client.post(
            f"{BASE}/login", json={"email": "nobody@example.com", "password": DEFAULT_PASSWORD}
        ).get_json()

        assert wrong.pop("request_id") != unknown.pop("request_id")
        assert wrong == unknown

    def test_non_string_password_is_a_login_failure(self, client, session):
        AdminFactory(email="ana@example.com")
        session.commit()

        response = client.post(f"{BASE}/login", json={"email": "ana@example.com", "password": 123})

        assert response.status_code == 400
        body = response.get_json()
        assert body["code"] == "invalid_credentials"
        assert body["detail"] == "Incorrect email or password."
        assert "details" not in body
        assert "token" not in body


class TestSessionGuard:
    def test_missing_token(self, client):
        response = client.get(f"{BASE}/me")
        assert response.status_code == 401
        assert response.get_json()["code"] == "unauthorized"

    def test_garbage_token(self, client):
        response = client.get(f"{BASE}/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_expired_token(self, client, session):
        AdminFactory(email="ana@example.com")
        session.commit()
        issued = datetime(2024, 1, 1, 12, 0)

        with freeze_time(issued):
            token = client.post(
                f"{BASE}/login", json={"email": "ana@example.com", "password": DEFAULT_PASSWORD}
            ).get_json()["data"]["token"]

        headers = {"Authorization": f"Bearer {token}"}
        with freeze_time(issued + timedelta(minutes=59)):
            assert client.get(f"{BASE}/me", headers=headers).status_code == 200
        with freeze_time(issued + timedelta(minutes=61)):
            assert client.get(f"{BASE}/me", headers=headers).status_code == 401

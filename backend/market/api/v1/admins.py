"""Administrator endpoints: registration, login and session introspection."""

from __future__ import annotations

from dataclasses import asdict

from flask import Blueprint
from marshmallow import ValidationError

from market.api.deps import (
    account_service,
    current_claims,
    json_body,
    json_response,
    require_auth,
    timing,
)
from market.schemas import (
    AdminLoginResponseSchema,
    AdminLoginSchema,
    AdminRegisterSchema,
    AdminSchema,
    SessionClaimsSchema,
)
from market.services._shared.errors import AuthenticationError
from market.services.accounts import ADMIN
from market.services.accounts.dto import LoginIn, RegistrationIn

bp = Blueprint("admins", __name__)

register_schema = AdminRegisterSchema()
login_schema = AdminLoginSchema()
admin_schema = AdminSchema()
login_response_schema = AdminLoginResponseSchema()
claims_schema = SessionClaimsSchema()


@bp.get("")
@timing
def list_admins():
    """List administrators (public profiles only)."""

    admins = account_service().list_accounts(ADMIN)
    return json_response({"data": admin_schema.dump(admins, many=True)})


@bp.post("")
@timing
def register():
    """Register an administrator."""

    data = register_schema.load(json_body())
    admin = account_service().register(
        ADMIN,
        RegistrationIn(
            name=data["name"],
            identity=data["email"],
            phone=data["phone"],
            password=data["password"],
        ),
    )
    return json_response({"data": admin_schema.dump(admin)}, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate an administrator and issue a session token."""

    try:
        data = login_schema.load(json_body())
    except ValidationError as exc:
        # Malformed credentials fail like any other login.
        raise AuthenticationError(ADMIN.login_failure_message) from exc
    result = account_service().login(
        ADMIN, LoginIn(identity=data["email"], password=data["password"])
    )
    body = login_response_schema.dump({**asdict(result.account), "token": result.token})
    return json_response({"data": body})


@bp.get("/me")
@require_auth
@timing
def me():
    """Return the claims of the presented session token."""

    return json_response({"data": claims_schema.dump(current_claims())})

"""Customer endpoints: registration, login, lookup and password reset."""

from __future__ import annotations

from flask import Blueprint
from marshmallow import ValidationError

from market.api.deps import account_service, json_body, json_response, timing
from market.schemas import (
    CustomerLoginSchema,
    CustomerRegisterSchema,
    CustomerSchema,
    NationalIdLookupSchema,
    PasswordResetSchema,
)
from market.services._shared.errors import AuthenticationError
from market.services.accounts import CUSTOMER
from market.services.accounts.dto import LoginIn, PasswordResetIn, RegistrationIn

bp = Blueprint("customers", __name__)

register_schema = CustomerRegisterSchema()
login_schema = CustomerLoginSchema()
reset_schema = PasswordResetSchema()
lookup_schema = NationalIdLookupSchema()
customer_schema = CustomerSchema()


@bp.get("")
@timing
def list_customers():
    customers = account_service().list_accounts(CUSTOMER)
    return json_response({"data": customer_schema.dump(customers, many=True)})


@bp.get("/<string:customer_id>")
@timing
def get_customer(customer_id: str):
    customer = account_service().get(CUSTOMER, customer_id)
    return json_response({"data": customer_schema.dump(customer)})


@bp.post("")
@timing
def register():
    """Register a customer."""

    data = register_schema.load(json_body())
    customer = account_service().register(
        CUSTOMER,
        RegistrationIn(
            name=data["name"],
            identity=data["national_id"],
            phone=data["phone"],
            password=data["password"],
        ),
    )
    return json_response({"data": customer_schema.dump(customer)}, status=201)


@bp.post("/login")
@timing
def login():
    """Authenticate a customer; no session token is issued."""

    try:
        data = login_schema.load(json_body())
    except ValidationError as exc:
        # Malformed credentials fail like any other login.
        raise AuthenticationError(CUSTOMER.login_failure_message) from exc
    result = account_service().login(
        CUSTOMER, LoginIn(identity=data["national_id"], password=data["password"])
    )
    return json_response({"data": customer_schema.dump(result.account)})


@bp.post("/check-national-id")
@timing
def check_national_id():
    """Tell whether a national id is registered (404 when it is not)."""

    data = lookup_schema.load(json_body())
    exists = account_service().identity_exists(CUSTOMER, data["national_id"])
    return json_response({"data": {"exists": exists}}, status=200 if exists else 404)


@bp.put("/reset-password/<string:national_id>")
@timing
def reset_password(national_id: str):
    """Overwrite a customer's password.

    Unauthenticated: customers do not receive session tokens.
    """

    data = reset_schema.load(json_body())
    customer = account_service().reset_password(
        CUSTOMER, PasswordResetIn(identity=national_id, password=data["password"])
    )
    return json_response({"data": customer_schema.dump(customer)})

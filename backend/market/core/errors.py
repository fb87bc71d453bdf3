"""RFC 7807 (``application/problem+json``) error responses for the API.

Every failure, whether raised by a service, by marshmallow, by the database
driver or by Werkzeug routing, is rendered with the same envelope and
carries the request correlation id.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from market.core.logger import ensure_request_id
from market.services._shared.errors import ServiceError

log = logging.getLogger(__name__)

PROBLEM_MIMETYPE = "application/problem+json"


def status_code_name(status: int) -> str:
    """Return the snake_case reason phrase of ``status`` (``404`` -> ``not_found``)."""
    try:
        return HTTPStatus(status).phrase.lower().replace(" ", "_").replace("-", "_")
    except ValueError:
        return "error"


def problem_body(
    status: int, code: str, detail: str, details: dict[str, Any] | None = None
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "type": "about:blank",
        "title": HTTPStatus(status).phrase,
        "status": status,
        "detail": detail,
        "instance": request.path if request else None,
        "code": code,
    }
    if details:
        body["details"] = details
    body["request_id"] = ensure_request_id()
    return body


def problem_response(
    status: int,
    code: str,
    detail: str,
    details: dict[str, Any] | None = None,
    *,
    cause: BaseException | None = None,
) -> tuple[Response, int]:
    """Log and render one problem; 5xx responses are logged with the traceback."""
    body = problem_body(status, code, detail, details)
    if status >= 500:
        log.error(
            "request.failed code=%s status=%s request_id=%s",
            code,
            status,
            body["request_id"],
            exc_info=cause,
        )
    else:
        log.warning(
            "request.rejected code=%s status=%s detail=%s request_id=%s",
            code,
            status,
            detail,
            body["request_id"],
        )
    response = jsonify(body)
    response.mimetype = PROBLEM_MIMETYPE
    return response, status


class APIError(Exception):
    """
    Error with a known HTTP rendering.

    Parameters
    ----------
    message : str
        Client-safe description (``detail`` in the problem body).
    status_code : int
        HTTP status. Defaults to ``400``.
    code : str
        Stable machine-readable code.
    details : dict[str, Any] | None
        Optional structured payload, e.g. every violated credential rule.
    """

    status_code: int = HTTPStatus.BAD_REQUEST
    code: str = "bad_request"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = int(status_code)
        if code is not None:
            self.code = code
        self.details = details or {}


class BadRequest(APIError):
    """Missing input, broken policies, failed logins, bad references."""

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "bad_request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class NotFound(APIError):
    status_code = HTTPStatus.NOT_FOUND
    code = "not_found"

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class Conflict(APIError):
    """Identity already registered, or a row still referenced elsewhere."""

    status_code = HTTPStatus.CONFLICT
    code = "conflict"

    def __init__(self, message: str = "Conflict", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details=details)


class Unauthorized(APIError):
    """Session token missing, expired or forged."""

    status_code = HTTPStatus.UNAUTHORIZED
    code = "unauthorized"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


def init_app(app: Flask) -> None:
    """Register the problem+json handlers on ``app``."""

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        return problem_response(err.status_code, err.code, err.message, err.details or None)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        from market.services._shared.base import translate_exceptions

        return handle_api_error(translate_exceptions(err))

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        return problem_response(
            HTTPStatus.BAD_REQUEST,
            "validation_error",
            "Validation failed",
            {"errors": err.messages},
        )

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        detail = (err.description or HTTPStatus(status).phrase).strip()
        if status == HTTPStatus.NOT_FOUND:
            detail = f"Route '{request.path}' not found"
        return problem_response(status, status_code_name(status), detail)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        # Services translate the constraints they expect; anything else is a 409
        # without the driver message.
        return problem_response(
            HTTPStatus.CONFLICT, "conflict", "Resource conflict", cause=err
        )

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: OperationalError):
        return problem_response(
            HTTPStatus.SERVICE_UNAVAILABLE,
            "service_unavailable",
            "Service temporarily unavailable",
            cause=err,
        )

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        return problem_response(
            HTTPStatus.INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "Unexpected error",
            cause=err,
        )

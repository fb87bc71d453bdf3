"""
Credential policies shared by every account kind.

Pure functions only: no I/O, no logging, no framework imports. Each validator
returns an ordered list of human-readable violations (empty list == valid) so
callers can report every broken rule at once.
"""

from __future__ import annotations

import re

MIN_PASSWORD_LENGTH = 8
PHONE_DIGIT_LENGTHS = (10, 11)  # area code + landline / mobile number
DEFAULT_COUNTRY_CODE = "+55"

PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
PASSWORD_WEAK_COMPOSITION = (
    "Password must contain lowercase letters, uppercase letters, numbers and symbols."
)
PHONE_BAD_LENGTH = "Phone must have 10 or 11 digits (area code + number)."
PHONE_NOT_NUMERIC = "Phone must contain only numbers."

_NON_DIGITS = re.compile(r"\D")
_ONLY_DIGITS = re.compile(r"^\d+$")


def _char_class(char: str) -> str:
    if "a" <= char <= "z":
        return "lower"
    if "A" <= char <= "Z":
        return "upper"
    if "0" <= char <= "9":
        return "digit"
    return "symbol"


def validate_password(password: str) -> list[str]:
    """
    Check a candidate password against the credential policy.

    Rules are evaluated independently: the length rule first, then the
    composition rule (at least one lowercase letter, uppercase letter, digit
    and symbol; reported as a single message).

    :param password: Raw password candidate.
    :type password: str
    :returns: Ordered violation messages; empty when the password passes.
    :rtype: list[str]
    """
    violations: list[str] = []

    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(PASSWORD_TOO_SHORT)

    counts = {"lower": 0, "upper": 0, "digit": 0, "symbol": 0}
    for char in password:
        counts[_char_class(char)] += 1

    if any(count == 0 for count in counts.values()):
        violations.append(PASSWORD_WEAK_COMPOSITION)

    return violations


def strip_non_digits(raw: str) -> str:
    """Remove every non-digit character from ``raw``."""
    return _NON_DIGITS.sub("", raw)


def validate_phone(raw: str) -> list[str]:
    """
    Validate a raw phone number in any formatting.

    Spaces, dashes, parentheses, a leading ``+`` or country code are stripped
    before checking; both rules are always evaluated.

    :param raw: Phone as typed by the user.
    :type raw: str
    :returns: Ordered violation messages; empty when the phone is valid.
    :rtype: list[str]
    """
    violations: list[str] = []
    digits = strip_non_digits(raw)

    if len(digits) not in PHONE_DIGIT_LENGTHS:
        violations.append(PHONE_BAD_LENGTH)

    # Unreachable after stripping; kept so a regression in stripping is caught.
    if not _ONLY_DIGITS.match(digits):
        violations.append(PHONE_NOT_NUMERIC)

    return violations


def canonicalize_phone(raw: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """
    Return the canonical international form ``<country_code><digits>``.

    Must be called exactly once per raw user input, right before persistence.

    :param raw: Phone as typed by the user (already validated).
    :type raw: str
    :param country_code: Calling code prefix, e.g. ``"+55"``.
    :type country_code: str
    :returns: Canonical phone, e.g. ``"+5511987654321"``.
    :rtype: str
    """
    return f"{country_code}{strip_non_digits(raw)}"

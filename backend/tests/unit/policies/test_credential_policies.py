"""Unit tests for the password and phone policies."""

from __future__ import annotations

import pytest
from market.services._shared.policies.credentials import (
    PASSWORD_TOO_SHORT,
    PASSWORD_WEAK_COMPOSITION,
    PHONE_BAD_LENGTH,
    canonicalize_phone,
    strip_non_digits,
    validate_password,
    validate_phone,
)


class TestValidatePassword:
    def test_strong_password_passes(self):
        assert validate_password("Abc12345!") == []

    @pytest.mark.parametrize("password", ["", "a", "Ab1!", "Ab1!xyz"])
    def test_short_password_reports_length_first(self, password):
        """Anything under eight characters yields the length message first."""
        violations = validate_password(password)
        assert violations[0] == PASSWORD_TOO_SHORT

    def test_short_but_complete_password_reports_only_length(self):
        assert validate_password("Ab1!") == [PASSWORD_TOO_SHORT]

    @pytest.mark.parametrize(
        "password",
        [
            "abcdefg1!",  # no uppercase
            "ABCDEFG1!",  # no lowercase
            "Abcdefgh!",  # no digit
            "Abcdefg12",  # no symbol
        ],
    )
    def test_missing_class_reports_single_composition_message(self, password):
        assert validate_password(password) == [PASSWORD_WEAK_COMPOSITION]

    def test_both_rules_reported_in_order(self):
        assert validate_password("abc") == [PASSWORD_TOO_SHORT, PASSWORD_WEAK_COMPOSITION]

    def test_non_ascii_letters_count_as_symbols(self):
        """Accented letters are neither ASCII lowercase nor uppercase."""
        assert validate_password("ÁÉÍÓÚ123") == [PASSWORD_WEAK_COMPOSITION]
        assert validate_password("Abc1234é") == []


class TestPhone:
    @pytest.mark.parametrize(
        "raw, digits",
        [
            ("(11) 98765-4321", "11987654321"),
            ("+55 11 3333-4444", "551133334444"),
            ("11 3333 4444", "1133334444"),
            ("", ""),
        ],
    )
    def test_strip_non_digits(self, raw, digits):
        assert strip_non_digits(raw) == digits

    def test_strip_is_idempotent(self):
        once = strip_non_digits("(11) 98765-4321")
        assert strip_non_digits(once) == once

    @pytest.mark.parametrize("raw", ["(11) 98765-4321", "11 3333-4444"])
    def test_valid_lengths(self, raw):
        assert validate_phone(raw) == []

    @pytest.mark.parametrize("raw", ["123", "123456789", "+55 11 98765-4321", "abc"])
    def test_bad_length(self, raw):
        assert PHONE_BAD_LENGTH in validate_phone(raw)

    def test_canonical_form(self):
        assert canonicalize_phone("(11) 98765-4321") == "+5511987654321"

    def test_canonical_form_with_other_country_code(self):
        assert canonicalize_phone("11 3333-4444", country_code="+351") == "+3511133334444"

    def test_canonicalize_does_not_mutate_input(self):
        raw = "(11) 98765-4321"
        canonicalize_phone(raw)
        assert raw == "(11) 98765-4321"

"""Unit tests for PatientValidator."""

from dataclasses import replace
from datetime import date, timedelta

import pytest

from application.validation import (
    PatientValidator,
    PatientValidationError,
    NAME_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    DOCUMENT_MAX_LENGTH,
)
from domain.enums import ValidationRule


TODAY = date(2024, 5, 20)


@pytest.fixture
def validator():
    """Validator pinned to a fixed current date."""
    return PatientValidator(today=lambda: TODAY)


def _rules(failures, field):
    return {f.rule for f in failures if f.field == field}


class TestValidPayload:
    """Test that well-formed payloads pass."""

    def test_valid_payload_has_no_failures(self, validator, jane_payload):
        assert validator.validate(jane_payload) == []

    def test_values_at_max_length_are_valid(self, validator, jane_payload):
        payload = replace(
            jane_payload,
            name="n" * NAME_MAX_LENGTH,
            document="d" * DOCUMENT_MAX_LENGTH,
        )
        assert validator.validate(payload) == []

    def test_yesterday_is_in_the_past(self, validator, jane_payload):
        payload = replace(jane_payload, date_of_birth=TODAY - timedelta(days=1))
        assert validator.validate(payload) == []

    def test_validate_or_raise_returns_payload(self, validator, jane_payload):
        assert validator.validate_or_raise(jane_payload) is jane_payload


class TestNameRules:
    """Test name rules."""

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_is_required(self, validator, jane_payload, name):
        failures = validator.validate(replace(jane_payload, name=name))
        assert _rules(failures, "name") == {ValidationRule.REQUIRED}

    def test_long_name_is_too_long(self, validator, jane_payload):
        failures = validator.validate(replace(jane_payload, name="x" * (NAME_MAX_LENGTH + 1)))
        assert _rules(failures, "name") == {ValidationRule.TOO_LONG}


class TestEmailRules:
    """Test email rules."""

    def test_empty_email_is_required_and_invalid(self, validator, jane_payload):
        failures = validator.validate(replace(jane_payload, email=""))
        assert _rules(failures, "email") == {ValidationRule.REQUIRED, ValidationRule.INVALID_FORMAT}

    @pytest.mark.parametrize("email", ["bob@clinic.local", "admin@localhost", "x@host.test"])
    def test_reserved_domains_are_syntactically_valid(self, validator, jane_payload, email):
        failures = validator.validate(replace(jane_payload, email=email))
        assert _rules(failures, "email") == set()

    @pytest.mark.parametrize("email", ["not-an-email", "jane@", "@example.com", "jane doe@example.com"])
    def test_malformed_email_is_invalid(self, validator, jane_payload, email):
        failures = validator.validate(replace(jane_payload, email=email))
        assert _rules(failures, "email") == {ValidationRule.INVALID_FORMAT}

    def test_long_email_is_too_long(self, validator, jane_payload):
        email = "a" * EMAIL_MAX_LENGTH + "@example.com"
        failures = validator.validate(replace(jane_payload, email=email))
        assert ValidationRule.TOO_LONG in _rules(failures, "email")


class TestDocumentRules:
    """Test document rules."""

    def test_empty_document_is_required(self, validator, jane_payload):
        failures = validator.validate(replace(jane_payload, document=""))
        assert _rules(failures, "document") == {ValidationRule.REQUIRED}

    def test_long_document_is_too_long(self, validator, jane_payload):
        payload = replace(jane_payload, document="9" * (DOCUMENT_MAX_LENGTH + 1))
        failures = validator.validate(payload)
        assert _rules(failures, "document") == {ValidationRule.TOO_LONG}


class TestDateOfBirthRules:
    """Test date of birth rules."""

    @pytest.mark.parametrize("offset", [0, 1, 365])
    def test_today_or_later_is_not_in_past(self, validator, jane_payload, offset):
        payload = replace(jane_payload, date_of_birth=TODAY + timedelta(days=offset))
        failures = validator.validate(payload)
        assert _rules(failures, "dateOfBirth") == {ValidationRule.NOT_IN_PAST}

    def test_default_clock_uses_current_date(self, jane_payload):
        payload = replace(jane_payload, date_of_birth=date.today())
        failures = PatientValidator().validate(payload)
        assert _rules(failures, "dateOfBirth") == {ValidationRule.NOT_IN_PAST}


class TestFailureCollection:
    """Test that every violated rule is reported."""

    def test_all_fields_reported_together(self, validator, jane_payload):
        payload = replace(
            jane_payload,
            name="",
            email="not-an-email",
            document="",
            date_of_birth=TODAY,
        )
        failures = validator.validate(payload)
        assert {f.field for f in failures} == {"name", "email", "document", "dateOfBirth"}

    def test_validate_or_raise_carries_failures(self, validator, jane_payload):
        with pytest.raises(PatientValidationError) as exc_info:
            validator.validate_or_raise(replace(jane_payload, name=""))
        assert [f.field for f in exc_info.value.failures] == ["name"]
        assert "name" in str(exc_info.value)

"""Tests for field validators."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from formkit.logic.validators import (
    ErrorKind,
    get_validator,
    register_validator,
    validate_email,
    validate_full_name,
    validate_phone,
)
from formkit.logic.validators.base import BaseValidator, ValidationResult
from formkit.logic.validators.email import EmailValidator
from formkit.logic.validators.phone import PhoneValidator
from formkit.logic.validators.name import NameRuleLenient, NameRuleStrict


class TestNameRuleLenient:
    def setup_method(self):
        self.v = NameRuleLenient()

    def test_valid_name(self):
        result = self.v.validate("John Smith")
        assert result.valid is True
        assert result.field == "fullname"
        assert result.kind is None

    def test_hyphen_and_apostrophe(self):
        assert self.v.validate("Mary-Jane O'Neil").valid is True

    def test_short_name_allowed(self):
        assert self.v.validate("Al").valid is True

    def test_trims_whitespace(self):
        assert self.v.validate("   John   ").valid is True

    def test_empty_name(self):
        result = self.v.validate("   ")
        assert result.valid is False
        assert result.kind == ErrorKind.EMPTY_FIELD

    def test_too_long(self):
        result = self.v.validate("a" * 31)
        assert result.valid is False
        assert result.kind == ErrorKind.FORMAT
        assert "30" in result.message

    def test_thirty_characters(self):
        assert self.v.validate("a" * 30).valid is True

    def test_length_reported_before_pattern(self):
        result = self.v.validate("1" * 31)
        assert result.message == "Maximum 30 characters allowed for name!"

    def test_name_with_numbers(self):
        result = self.v.validate("John123")
        assert result.valid is False
        assert result.message == "Invalid user name!"

    def test_non_string(self):
        assert self.v.validate(None).valid is False


class TestNameRuleStrict:
    def setup_method(self):
        self.v = NameRuleStrict()

    @pytest.mark.parametrize("name", ["Jane Doe", "Alice", "a" * 30, "  Bobby  "])
    def test_valid_names(self, name):
        assert self.v.validate(name).valid is True

    @pytest.mark.parametrize("name", ["Jane", "a" * 31, "O'Neil Smith", "Mary-Jane", "John123", ""])
    def test_invalid_names(self, name):
        result = self.v.validate(name)
        assert result.valid is False
        assert result.kind == ErrorKind.FORMAT

    def test_policies_disagree(self):
        """The two name rules are kept apart and accept different inputs."""
        lenient = NameRuleLenient()
        assert lenient.validate("Al").valid is True
        assert self.v.validate("Al").valid is False
        assert lenient.validate("Mary-Jane").valid is True
        assert self.v.validate("Mary-Jane").valid is False


class TestPhoneValidator:
    def setup_method(self):
        self.v = PhoneValidator()

    def test_valid_phone(self):
        result = self.v.validate("9876543210")
        assert result.valid is True
        assert result.field == "phone"

    def test_leading_one_allowed(self):
        """Only the display hint restricts the first digit to 7-9."""
        assert self.v.validate("1234567890").valid is True

    def test_leading_zero(self):
        result = self.v.validate("0123456789")
        assert result.valid is False
        assert result.message == "Invalid mobile number!"

    def test_short_phone(self):
        assert self.v.validate("987654321").valid is False

    def test_long_phone(self):
        assert self.v.validate("98765432101").valid is False

    def test_phone_with_formatting(self):
        assert self.v.validate("(987) 654-3210").valid is False

    def test_trims_whitespace(self):
        assert self.v.validate(" 9876543210 ").valid is True


class TestEmailValidator:
    def setup_method(self):
        self.v = EmailValidator()

    def test_valid_email(self):
        result = self.v.validate("user@gmail.com")
        assert result.valid is True
        assert result.field == "email"

    @pytest.mark.parametrize("domain", ["gmail.com", "yahoo.com", "outlook.com", "mail.com", "innoraft.com"])
    def test_allowed_domains(self, domain):
        assert self.v.validate(f"someone@{domain}").valid is True

    def test_domain_not_allowed(self):
        result = self.v.validate("user@hotmail.com")
        assert result.valid is False
        assert result.kind == ErrorKind.DOMAIN_NOT_ALLOWED
        assert result.message == "Domain name not allowed"

    def test_invalid_syntax(self):
        result = self.v.validate("not-an-email")
        assert result.valid is False
        assert result.kind == ErrorKind.FORMAT
        assert result.message == "Invalid email address!"

    def test_domain_is_case_sensitive(self):
        result = self.v.validate("user@Gmail.com")
        assert result.valid is False
        assert result.kind == ErrorKind.DOMAIN_NOT_ALLOWED

    def test_quoted_local_part(self):
        assert self.v.validate('"john doe"@gmail.com').valid is True

    def test_quoted_local_part_domain_checked(self):
        result = self.v.validate('"john doe"@hotmail.com')
        assert result.kind == ErrorKind.DOMAIN_NOT_ALLOWED

    def test_subdomain_not_allowed(self):
        assert self.v.validate("user@mail.gmail.com").valid is False

    def test_empty_email(self):
        assert self.v.validate("").valid is False

    def test_custom_domains(self):
        v = EmailValidator(allowed_domains={"example.org"})
        assert v.validate("user@example.org").valid is True
        assert v.validate("user@gmail.com").valid is False


class TestIdempotence:
    @pytest.mark.parametrize("validator,value", [
        (NameRuleLenient(), "John Smith"),
        (NameRuleStrict(), "Jo"),
        (PhoneValidator(), "0123456789"),
        (EmailValidator(), "user@hotmail.com"),
    ])
    def test_same_input_same_result(self, validator, value):
        assert validator.validate(value) == validator.validate(value)

    def test_results_are_immutable(self):
        result = PhoneValidator().validate("9876543210")
        with pytest.raises(AttributeError):
            result.valid = False


class TestModuleFunctions:
    def test_validate_full_name_policies(self):
        assert validate_full_name("Al").valid is True
        assert validate_full_name("Al", policy="strict").valid is False

    def test_validate_phone(self):
        assert validate_phone("9876543210").valid is True

    def test_validate_email(self):
        assert validate_email("user@yahoo.com").valid is True


class TestGetValidator:
    def test_get_email(self):
        assert isinstance(get_validator("email"), EmailValidator)

    def test_get_name_policies(self):
        assert isinstance(get_validator("fullname_lenient"), NameRuleLenient)
        assert isinstance(get_validator("fullname_strict"), NameRuleStrict)

    def test_get_unknown(self):
        assert get_validator("nonexistent") is None

    def test_register_validator(self):
        class AlwaysValid(BaseValidator):
            field = "anything"

            def validate(self, value) -> ValidationResult:
                return self.ok()

        register_validator("always_valid", AlwaysValid())
        assert get_validator("always_valid").validate("x").valid is True

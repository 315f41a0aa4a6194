"""
Field Validators

Validation rules for the employee settings forms. Both full name
policies are registered under their own names.
"""

from formkit.logic.validators.base import (
    BaseValidator,
    ErrorKind,
    ValidationResult,
)
from formkit.logic.validators.email import EmailValidator
from formkit.logic.validators.phone import PhoneValidator
from formkit.logic.validators.name import NameRuleLenient, NameRuleStrict
from formkit.logic.validators.submission import (
    NAME_POLICIES,
    SubmissionInput,
    SubmissionResult,
    validate_submission,
)

# Registry of built-in validators
_VALIDATORS = {
    "fullname_lenient": NameRuleLenient(),
    "fullname_strict": NameRuleStrict(),
    "phone": PhoneValidator(),
    "email": EmailValidator(),
}


def get_validator(name: str) -> BaseValidator:
    """Get a validator by name. Returns None if not found."""
    return _VALIDATORS.get(name)


def register_validator(name: str, validator: BaseValidator):
    """Register a custom validator."""
    _VALIDATORS[name] = validator


def validate_full_name(name, policy: str = "lenient") -> ValidationResult:
    return NAME_POLICIES[policy].validate(name)


def validate_phone(phone) -> ValidationResult:
    return _VALIDATORS["phone"].validate(phone)


def validate_email(email) -> ValidationResult:
    return _VALIDATORS["email"].validate(email)


__all__ = [
    "BaseValidator",
    "ErrorKind",
    "ValidationResult",
    "EmailValidator",
    "PhoneValidator",
    "NameRuleLenient",
    "NameRuleStrict",
    "SubmissionInput",
    "SubmissionResult",
    "get_validator",
    "register_validator",
    "validate_full_name",
    "validate_phone",
    "validate_email",
    "validate_submission",
]

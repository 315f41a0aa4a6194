"""Business logic: field validation rules."""

from formkit.logic.validators import (
    ErrorKind,
    ValidationResult,
    SubmissionInput,
    SubmissionResult,
    get_validator,
    validate_full_name,
    validate_phone,
    validate_email,
    validate_submission,
)

__all__ = [
    "ErrorKind",
    "ValidationResult",
    "SubmissionInput",
    "SubmissionResult",
    "get_validator",
    "validate_full_name",
    "validate_phone",
    "validate_email",
    "validate_submission",
]

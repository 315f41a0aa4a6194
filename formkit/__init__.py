"""
Employee Settings Forms

Validation, storage and account helpers behind the employee settings
forms and the one-time login link tool.
"""

from formkit.logic.validators import (
    SubmissionInput,
    ValidationResult,
    validate_submission,
)
from formkit.forms import FormService, get_form, list_forms
from formkit.accounts import OneTimeLoginService, greet

__all__ = [
    "SubmissionInput",
    "ValidationResult",
    "validate_submission",
    "FormService",
    "get_form",
    "list_forms",
    "OneTimeLoginService",
    "greet",
]

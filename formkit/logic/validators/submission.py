"""
Submission Validation

Runs the field validators over a whole form submission and aggregates
the results. If any required field is blank, only the empty-fields
error is reported.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from formkit.config.constants import EMPTY_FIELDS_MESSAGE
from formkit.logic.validators.base import ErrorKind, ValidationResult, normalize
from formkit.logic.validators.email import EmailValidator
from formkit.logic.validators.name import NameRuleLenient, NameRuleStrict
from formkit.logic.validators.phone import PhoneValidator

logger = logging.getLogger(__name__)

NAME_POLICIES = {
    "lenient": NameRuleLenient(),
    "strict": NameRuleStrict(),
}


@dataclass(frozen=True)
class SubmissionInput:
    """Raw values of one form submission."""

    fullname: str = ""
    phone: str = ""
    email: str = ""
    gender: Optional[str] = None

    def as_config(self) -> dict:
        """Values as they are stored under a configuration name."""
        return {
            "fullname": self.fullname,
            "phone": self.phone,
            "email": self.email,
            "gender": self.gender,
        }


@dataclass(frozen=True)
class SubmissionResult:
    valid: bool
    errors: Tuple[ValidationResult, ...] = ()


def validate_submission(
    data: SubmissionInput,
    name_policy: str = "lenient",
) -> SubmissionResult:
    """
    Validate a full submission.

    Args:
        data: The submitted values.
        name_policy: "lenient" or "strict", selecting the full name rule.

    Returns:
        SubmissionResult; errors are ordered fullname, phone, email.
    """
    required = (data.fullname, data.phone, data.email)
    if any(not normalize(value) for value in required):
        error = ValidationResult(None, False, EMPTY_FIELDS_MESSAGE, ErrorKind.EMPTY_FIELD)
        return SubmissionResult(valid=False, errors=(error,))

    name_rule = NAME_POLICIES[name_policy]
    results = (
        name_rule.validate(data.fullname),
        PhoneValidator().validate(data.phone),
        EmailValidator().validate(data.email),
    )
    errors = tuple(r for r in results if not r.valid)

    if errors:
        logger.info(f"Submission rejected: {[e.field for e in errors]}")
    return SubmissionResult(valid=not errors, errors=errors)

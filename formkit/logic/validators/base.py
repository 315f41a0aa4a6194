"""
Base Validator

Result types and the abstract base class for all field validators.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of validation failure."""

    EMPTY_FIELD = "empty_field"
    FORMAT = "format"
    DOMAIN_NOT_ALLOWED = "domain_not_allowed"


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating one field.

    `field` is None only for form-level errors (empty fields present).
    `kind` is None when the result is valid.
    """

    field: Optional[str]
    valid: bool
    message: str
    kind: Optional[ErrorKind] = None

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "valid": self.valid,
            "message": self.message,
            "kind": self.kind.value if self.kind else None,
        }


def normalize(value) -> str:
    """Trim a raw input value. Anything that is not a string counts as empty."""
    if not isinstance(value, str):
        return ""
    return value.strip()


class BaseValidator(ABC):
    """
    Abstract base class for field validators.

    All validators must implement validate(), which trims the raw value
    and returns a ValidationResult. Validators hold no state between calls.
    """

    field: str = ""

    @abstractmethod
    def validate(self, value) -> ValidationResult:
        """
        Validate a raw field value.

        Args:
            value: The submitted value (trimmed before checking)

        Returns:
            ValidationResult for this validator's field.
        """
        pass

    def ok(self, message: str = "") -> ValidationResult:
        return ValidationResult(self.field, True, message)

    def fail(self, message: str, kind: ErrorKind = ErrorKind.FORMAT) -> ValidationResult:
        return ValidationResult(self.field, False, message, kind)

"""Phone Validator"""

import re

from formkit.config.constants import PHONE_PATTERN
from formkit.logic.validators.base import BaseValidator, ValidationResult, normalize


class PhoneValidator(BaseValidator):
    """Validates ten-digit mobile numbers that do not start with 0."""

    field = "phone"
    PATTERN = re.compile(PHONE_PATTERN)

    def validate(self, value) -> ValidationResult:
        if not self.PATTERN.fullmatch(normalize(value)):
            return self.fail("Invalid mobile number!")
        return self.ok()

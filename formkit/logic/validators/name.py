"""Full Name Validators"""

import re

from formkit.config.constants import (
    NAME_MAX_LENGTH,
    NAME_LENIENT_PATTERN,
    NAME_STRICT_PATTERN,
)
from formkit.logic.validators.base import (
    BaseValidator,
    ErrorKind,
    ValidationResult,
    normalize,
)


class NameRuleLenient(BaseValidator):
    """
    Letters, spaces, hyphens and apostrophes, at most 30 characters.

    Used by the standard settings form.
    """

    field = "fullname"
    PATTERN = re.compile(NAME_LENIENT_PATTERN)

    def validate(self, value) -> ValidationResult:
        name = normalize(value)

        if not name:
            return self.fail("Name cannot be empty!", ErrorKind.EMPTY_FIELD)

        if len(name) > NAME_MAX_LENGTH:
            return self.fail(f"Maximum {NAME_MAX_LENGTH} characters allowed for name!")

        if not self.PATTERN.match(name):
            return self.fail("Invalid user name!")

        return self.ok()


class NameRuleStrict(BaseValidator):
    """
    Letters and spaces only, between 5 and 30 characters.

    Used by the live-validation form. Intentionally not merged with
    NameRuleLenient: the two forms accept different names.
    """

    field = "fullname"
    PATTERN = re.compile(NAME_STRICT_PATTERN)

    def validate(self, value) -> ValidationResult:
        if not self.PATTERN.match(normalize(value)):
            return self.fail("Invalid Name.")
        return self.ok()

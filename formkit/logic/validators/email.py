"""Email Validator"""

import logging
from typing import Iterable, Optional

from email_validator import EmailNotValidError, validate_email

from formkit.config.constants import ALLOWED_EMAIL_DOMAINS
from formkit.logic.validators.base import (
    BaseValidator,
    ErrorKind,
    ValidationResult,
    normalize,
)

logger = logging.getLogger(__name__)


class EmailValidator(BaseValidator):
    """
    Validates email addresses.

    Syntax is checked with email-validator (RFC rules, no DNS lookup).
    The domain is then taken verbatim from the submitted address, after
    the last `@`, and must be one of the allowed domains. The comparison
    is case-sensitive, so `user@Gmail.com` is rejected.
    """

    field = "email"

    def __init__(self, allowed_domains: Optional[Iterable[str]] = None):
        self.allowed_domains = frozenset(
            ALLOWED_EMAIL_DOMAINS if allowed_domains is None else allowed_domains
        )

    def validate(self, value) -> ValidationResult:
        email = normalize(value)

        try:
            validate_email(email, check_deliverability=False, allow_quoted_local=True)
        except EmailNotValidError as e:
            logger.debug(f"Rejected email syntax: {e}")
            return self.fail("Invalid email address!")

        domain = email.rsplit("@", 1)[-1]
        if domain not in self.allowed_domains:
            return self.fail("Domain name not allowed", ErrorKind.DOMAIN_NOT_ALLOWED)

        return self.ok()

"""
Shared constants used across the forms package.

Centralizes validation rules, configuration names and messages that the
forms and validators share.
"""

# Email domains accepted by the email validator (exact, case-sensitive)
ALLOWED_EMAIL_DOMAINS = frozenset({
    "gmail.com",
    "yahoo.com",
    "outlook.com",
    "mail.com",
    "innoraft.com",
})

# Name rules
NAME_MAX_LENGTH = 30
NAME_LENIENT_PATTERN = r"^[a-zA-Z-' ]*$"
NAME_STRICT_PATTERN = r"^[a-zA-Z ]{5,30}$"

# Phone rules
PHONE_PATTERN = r"^[1-9][0-9]{9}$"
# Shown to browsers on the live form only, never enforced server-side
PHONE_DISPLAY_PATTERN = "[7-9]{1}[0-9]{9}"

# Named configuration targets
CONFIG_SETTINGS = "custom_form.settings"
CONFIG_SETTINGS_AJAX = "custom_form.settings.ajax"

# Keys stored under each configuration target
CONFIG_KEYS = ("fullname", "phone", "email", "gender")

GENDER_OPTIONS = {"male": "Male", "female": "Female"}

# Messages
EMPTY_FIELDS_MESSAGE = "Empty fields present"
VALID_MESSAGE = "Valid"
USER_NOT_FOUND_MESSAGE = "User does not exist"
ANONYMOUS_NAME = "Anonymous"

"""Configuration: environment settings and shared constants."""

from formkit.config.settings import (
    PROJECT_ROOT,
    DB_PATH,
    BASE_URL,
    PASSWORD_RESET_TIMEOUT,
    BACKEND_PORT,
    BACKEND_HOST,
    LOG_LEVEL,
    VERBOSE,
)
from formkit.config.constants import (
    ALLOWED_EMAIL_DOMAINS,
    NAME_MAX_LENGTH,
    CONFIG_SETTINGS,
    CONFIG_SETTINGS_AJAX,
    CONFIG_KEYS,
)

__all__ = [
    # Settings
    "PROJECT_ROOT",
    "DB_PATH",
    "BASE_URL",
    "PASSWORD_RESET_TIMEOUT",
    "BACKEND_PORT",
    "BACKEND_HOST",
    "LOG_LEVEL",
    "VERBOSE",
    # Constants
    "ALLOWED_EMAIL_DOMAINS",
    "NAME_MAX_LENGTH",
    "CONFIG_SETTINGS",
    "CONFIG_SETTINGS_AJAX",
    "CONFIG_KEYS",
]

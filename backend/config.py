"""
Backend Configuration

API settings.
"""

import os

# API Settings
API_TITLE = "Employee Settings Forms"
API_DESCRIPTION = "Employee settings forms with field validation, one-time login links and greetings"
API_VERSION = "1.0.0"

# Backend
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10821"))

# Header carrying the id of the current user
USER_ID_HEADER = "X-User-Id"

# Verbose logging
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

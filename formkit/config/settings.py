"""
Global settings loaded from environment variables.

All settings have sensible defaults so the service works out of the box.
Override via .env file or environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()
DB_PATH = os.getenv("DB_PATH", str(PROJECT_ROOT / "data" / "formkit.db"))

# =============================================================================
# Site
# =============================================================================
BASE_URL = os.getenv("BASE_URL", "http://localhost:10821").rstrip("/")
PRIVATE_KEY = os.getenv("PRIVATE_KEY", "change-me")

# One-time login links expire after this many seconds
PASSWORD_RESET_TIMEOUT = int(os.getenv("PASSWORD_RESET_TIMEOUT", "86400"))

# bcrypt cost factor for stored passwords
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# =============================================================================
# Backend Service
# =============================================================================
BACKEND_PORT = int(os.getenv("BACKEND_PORT", "10821"))
BACKEND_HOST = os.getenv("BACKEND_HOST", "0.0.0.0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

"""Bcrypt password hashing."""

import bcrypt

from formkit.config import settings


def hash_password(password: str, rounds: int = None) -> str:
    """
    Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password.
        rounds: Cost factor; defaults to BCRYPT_ROUNDS.

    Returns:
        The bcrypt hash ($2b$<cost>$...), 60 characters.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

"""Greeting for the current user."""

from formkit.config.constants import ANONYMOUS_NAME


def greet(user=None) -> str:
    """Return `Hello <display name>`, or greet an anonymous visitor."""
    name = user.display_name if user is not None else ANONYMOUS_NAME
    return f"Hello {name}"

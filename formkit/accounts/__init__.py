"""User accounts: password hashing, one-time login links and greetings."""

from formkit.accounts.passwords import hash_password
from formkit.accounts.login_link import (
    InvalidLoginLinkError,
    LoginLinkResult,
    OneTimeLoginService,
)
from formkit.accounts.greeting import greet

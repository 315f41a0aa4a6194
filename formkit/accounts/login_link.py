"""
One-Time Login Links

Generates and verifies time-limited login URLs of the form
`{base_url}/user/reset/{uid}/{timestamp}/{hash}`.

The hash is an HMAC-SHA256 of the timestamp, the user's last login time,
id and email, keyed with the site private key plus the stored password
hash. Logging in or changing the password therefore invalidates every
link issued before.
"""

import base64
import hashlib
import hmac
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from formkit.config.constants import USER_NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)

INVALID_LINK_MESSAGE = (
    "You have tried to use a one-time login link that has either been used "
    "or is no longer valid."
)


class InvalidLoginLinkError(Exception):
    """Raised when a login link is unknown, expired, already used or tampered with."""


@dataclass(frozen=True)
class LoginLinkResult:
    message: str
    link: Optional[str] = None


def login_hash(user, timestamp: int, private_key: str) -> str:
    """Compute the link hash for a user at a given timestamp."""
    data = f"{timestamp}{user.login}{user.uid}{user.mail}"
    key = f"{private_key}{user.password_hash}"
    digest = hmac.new(key.encode("utf-8"), data.encode("utf-8"), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


class OneTimeLoginService:
    """
    Issues and checks one-time login links.

    Args:
        user_store: Store providing get(uid) and update_login(uid, ts).
        base_url: Site URL the links point to.
        private_key: Site secret mixed into every hash.
        timeout: Link lifetime in seconds.
        clock: Returns the current unix time.
    """

    def __init__(
        self,
        user_store,
        base_url: str = None,
        private_key: str = None,
        timeout: int = None,
        clock: Callable[[], float] = time.time,
    ):
        from formkit.config import settings

        self.user_store = user_store
        self.base_url = (base_url or settings.BASE_URL).rstrip("/")
        self.private_key = private_key if private_key is not None else settings.PRIVATE_KEY
        self.timeout = timeout if timeout is not None else settings.PASSWORD_RESET_TIMEOUT
        self.clock = clock

    def reset_url(self, user, timestamp: int = None) -> str:
        if timestamp is None:
            timestamp = int(self.clock())
        hashed = login_hash(user, timestamp, self.private_key)
        return f"{self.base_url}/user/reset/{user.uid}/{timestamp}/{hashed}"

    def generate_link(self, uid) -> LoginLinkResult:
        """Build a login link for a user id, or a not-found message."""
        user = self._load(uid)
        if user is None:
            logger.info(f"Login link requested for unknown user {uid!r}")
            return LoginLinkResult(message=USER_NOT_FOUND_MESSAGE)

        link = self.reset_url(user)
        logger.info(f"Generated one-time login link for user {user.uid}")
        return LoginLinkResult(message=f"Generated Link: {link}", link=link)

    def verify_link(self, uid: int, timestamp: int, hashed: str):
        """
        Check a login link and record the login.

        Returns:
            The user the link belongs to.

        Raises:
            InvalidLoginLinkError: if the link can not be used.
        """
        now = int(self.clock())
        user = self._load(uid)

        if user is None or not user.status:
            self._reject(uid, "unknown or blocked user")
        if timestamp > now:
            self._reject(uid, "timestamp in the future")
        if now - timestamp > self.timeout:
            self._reject(uid, "link expired")
        if user.login > timestamp:
            self._reject(uid, "link already used")
        expected = login_hash(user, timestamp, self.private_key)
        if not hmac.compare_digest(hashed.encode("utf-8"), expected.encode("ascii")):
            self._reject(uid, "hash mismatch")

        self.user_store.update_login(user.uid, now)
        logger.info(f"User {user.uid} logged in with a one-time link")
        return user

    def _load(self, uid):
        try:
            uid = int(uid)
        except (TypeError, ValueError):
            return None
        return self.user_store.get(uid)

    @staticmethod
    def _reject(uid, reason: str):
        logger.warning(f"Rejected login link for user {uid}: {reason}")
        raise InvalidLoginLinkError(INVALID_LINK_MESSAGE)

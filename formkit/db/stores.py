"""
Data store classes for named configuration and user accounts.

Each store wraps a shared sqlite3.Connection and provides typed
operations for its table.
"""

import json
import logging
import sqlite3
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from formkit.accounts.passwords import hash_password

logger = logging.getLogger(__name__)

# Largest value SQLite can bind as INTEGER
MAX_USER_ID = 2**63 - 1


class ConfigStore:
    """
    Named configuration objects, stored as JSON.

    Each name is an independent target: saving one never touches another.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, name: str) -> Dict[str, Any]:
        """Get the stored values for a configuration name ({} if unset)."""
        row = self.conn.execute(
            "SELECT data FROM config WHERE name = ?", (name,)
        ).fetchone()
        if row is None:
            return {}
        return json.loads(row["data"])

    def save(self, name: str, values: Dict[str, Any]):
        """Set the given keys on a configuration, keeping any others."""
        data = self.get(name)
        data.update(values)
        self.conn.execute(
            "INSERT INTO config (name, data) VALUES (?, ?) "
            "ON CONFLICT(name) DO UPDATE SET data = excluded.data, "
            "updated_at = datetime('now')",
            (name, json.dumps(data)),
        )
        self.conn.commit()


@dataclass(frozen=True)
class User:
    uid: int
    name: str
    mail: str
    password_hash: str
    status: bool
    created: int
    login: int

    @property
    def display_name(self) -> str:
        return self.name


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        uid=row["uid"],
        name=row["name"],
        mail=row["mail"],
        password_hash=row["pass"],
        status=bool(row["status"]),
        created=row["created"],
        login=row["login"],
    )


class UserStore:
    """Manages user accounts in SQLite."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create(self, name: str, mail: str, password: str) -> User:
        """Create a new user and return it."""
        cursor = self.conn.execute(
            "INSERT INTO users (name, mail, pass, created) VALUES (?, ?, ?, ?)",
            (name, mail, hash_password(password), int(time.time())),
        )
        self.conn.commit()
        logger.info(f"Created user {cursor.lastrowid} ({name})")
        return self.get(cursor.lastrowid)

    def get(self, uid: int) -> Optional[User]:
        """Get a user by id. Ids outside the SQLite integer range are never found."""
        if not 0 < uid <= MAX_USER_ID:
            return None
        row = self.conn.execute(
            "SELECT * FROM users WHERE uid = ?", (uid,)
        ).fetchone()
        if row is None:
            return None
        return _row_to_user(row)

    def update_login(self, uid: int, timestamp: int):
        """Record the time of the user's latest login."""
        self.conn.execute(
            "UPDATE users SET login = ? WHERE uid = ?", (timestamp, uid)
        )
        self.conn.commit()

    def set_password(self, uid: int, password: str):
        self.conn.execute(
            "UPDATE users SET pass = ? WHERE uid = ?", (hash_password(password), uid)
        )
        self.conn.commit()

    def set_status(self, uid: int, active: bool):
        """Activate or block a user."""
        self.conn.execute(
            "UPDATE users SET status = ? WHERE uid = ?", (int(active), uid)
        )
        self.conn.commit()
        logger.info(f"User {uid} {'activated' if active else 'blocked'}")

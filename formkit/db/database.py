"""
SQLite database connection management and schema initialization.

Provides a singleton connection to the forms database,
auto-creates tables on first use.
"""

import sqlite3
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_connection: sqlite3.Connection | None = None

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS config (
    name TEXT PRIMARY KEY,
    data TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS users (
    uid INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE,
    mail TEXT NOT NULL,
    pass TEXT NOT NULL,
    status INTEGER NOT NULL DEFAULT 1,
    created INTEGER NOT NULL,
    login INTEGER NOT NULL DEFAULT 0
);
"""


def get_db(db_path: str = None) -> sqlite3.Connection:
    """Get or create the singleton database connection."""
    global _connection
    if _connection is not None:
        return _connection

    if db_path is None:
        from formkit.config.settings import DB_PATH
        db_path = DB_PATH

    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    _connection = connect(db_path)
    logger.info(f"Database initialized: {db_path}")
    return _connection


def connect(db_path: str) -> sqlite3.Connection:
    """Open a new connection with the schema in place."""
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    init_db(conn)
    return conn


def init_db(conn: sqlite3.Connection):
    """Create tables if they don't exist."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()


def close_db():
    """Close the database connection."""
    global _connection
    if _connection is not None:
        _connection.close()
        _connection = None
        logger.info("Database connection closed")

"""Database layer for named configuration and user account storage."""

from formkit.db.database import get_db, close_db, connect
from formkit.db.stores import ConfigStore, UserStore, User

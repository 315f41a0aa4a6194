"""Test fixtures for the employee settings forms."""

import sys
import pytest
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from formkit.db.database import connect
from formkit.db.stores import ConfigStore, UserStore


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def conn():
    """A fresh in-memory database with the schema in place."""
    connection = connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def config_store(conn):
    return ConfigStore(conn)


@pytest.fixture
def user_store(conn):
    return UserStore(conn)


@pytest.fixture
def sample_user(user_store):
    return user_store.create("jane", "jane@innoraft.com", "secret-pass")


@pytest.fixture
def valid_submission():
    """Values that pass both settings forms."""
    return {
        "fullname": "Jane Doe",
        "phone": "9876543210",
        "email": "jane@gmail.com",
        "gender": "female",
    }


@pytest.fixture(autouse=True)
def fast_password_hashing(monkeypatch):
    """Lowest bcrypt cost so user fixtures stay quick."""
    from formkit.config import settings
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)

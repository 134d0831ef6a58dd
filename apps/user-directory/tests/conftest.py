"""Pytest configuration and fixtures."""

import os
import sys
from unittest.mock import create_autospec

import pytest

# Ensure 'apps/user-directory/src' is on sys.path for absolute 'user_directory.*' imports
_TESTS_DIR = os.path.dirname(__file__)
_SRC_PATH = os.path.abspath(os.path.join(_TESTS_DIR, "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from user_directory.models.user import User  # noqa: E402
from user_directory.services import reset_services_cache  # noqa: E402
from user_directory.services.user_directory import UserDirectoryService  # noqa: E402
from user_directory.services.user_store import InMemoryUserStore, UserStore  # noqa: E402

IVAN = User(id=1, username="Ivan", password="123")
PETR = User(id=2, username="Petr", password="456")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as fast unit tests")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests that need a real Cosmos DB"
    )


class SpyUserStore(UserStore):
    """Records deletions and serves canned answers, falling back to a real store."""

    def __init__(self, delegate: UserStore) -> None:
        self.delegate = delegate
        self.answers: dict[int, bool] = {}
        self.calls: list[int] = []

    def delete(self, user_id: int) -> bool:
        self.calls.append(user_id)
        if user_id in self.answers:
            return self.answers[user_id]
        return self.delegate.delete(user_id)


@pytest.fixture(autouse=True)
def _clear_services_cache():
    reset_services_cache()
    yield
    reset_services_cache()


@pytest.fixture
def user_store():
    """Autospec'd user store whose delete(IVAN.id) returns True."""
    store = create_autospec(UserStore, instance=True)
    store.delete.side_effect = lambda user_id: user_id == IVAN.id
    return store


@pytest.fixture
def user_directory(user_store) -> UserDirectoryService:
    return UserDirectoryService(user_store)


@pytest.fixture
def spy_store() -> SpyUserStore:
    delegate = InMemoryUserStore()
    delegate.save(IVAN)
    return SpyUserStore(delegate)

"""In-process user directory."""

from user_directory.models.user import User
from user_directory.services.user_directory import UserDirectoryService
from user_directory.services.user_store import InMemoryUserStore, UserStore

__all__ = [
    "InMemoryUserStore",
    "User",
    "UserDirectoryService",
    "UserStore",
]

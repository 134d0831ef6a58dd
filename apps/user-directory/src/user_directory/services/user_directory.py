"""In-memory user directory backed by an external user store for deletion."""

import logging

from user_directory.models.user import User
from user_directory.services.user_store import UserStore

logger = logging.getLogger(__name__)


class UserDirectoryService:
    """Transient, ordered collection of users.

    The directory lives only as long as the service instance. Deletion is
    forwarded to the user store and never prunes the in-memory collection;
    the two are not reconciled.

    Not thread-safe.
    """

    def __init__(self, user_store: UserStore) -> None:
        """Initialize the directory.

        Args:
            user_store: Collaborator that performs deletions
        """
        self.user_store = user_store
        self._users: list[User] = []

    def add_users(self, *users: User) -> bool:
        """Append users in the given order.

        Duplicates are accepted as-is.

        Returns:
            True if at least one user was added
        """
        size_before = len(self._users)
        self._users.extend(users)
        logger.debug("Added %d user(s), directory size is %d", len(users), len(self._users))
        return len(self._users) > size_before

    def list_users(self) -> list[User]:
        """Return a snapshot of all users in insertion order."""
        return list(self._users)

    def login(self, username: str | None, password: str | None) -> User | None:
        """Find the first user matching both username and password exactly.

        Args:
            username: Login name
            password: Plain-text password

        Returns:
            The matching user, or None if nobody matches

        Raises:
            ValueError: If username or password is None
        """
        if username is None or password is None:
            raise ValueError("username or password is null")

        for user in self._users:
            if user.username == username and user.password == password:
                return user

        logger.debug("No user matched login for %s", username)
        return None

    def get_users_by_id(self) -> dict[int, User]:
        """Index users by id.

        Users sharing an id resolve to the last one in insertion order.
        """
        users_by_id: dict[int, User] = {}
        for user in self._users:
            users_by_id[user.id] = user
        return users_by_id

    def delete_user(self, user_id: int) -> bool:
        """Delete a user through the user store.

        The in-memory directory is left untouched. Errors raised by the store
        propagate unchanged.
        """
        return self.user_store.delete(user_id)

"""Persistence collaborators for user deletion."""

import logging
from abc import ABC, abstractmethod

from azure.cosmos import CosmosClient
from azure.cosmos.exceptions import CosmosResourceExistsError, CosmosResourceNotFoundError
from azure.identity import DefaultAzureCredential

from user_directory.models.user import User

logger = logging.getLogger(__name__)


class UserStoreUnavailableError(RuntimeError):
    """Raised when the backing store cannot be reached."""


class UserStore(ABC):
    """Abstract interface for the store that owns durable user records."""

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Delete a user.

        Args:
            user_id: Identifier of the user to delete

        Returns:
            True if a record was deleted, False if nothing matched

        Raises:
            RuntimeError: If the backing store is unavailable
        """
        pass


class InMemoryUserStore(UserStore):
    """Process-local user store, mainly for local runs and tests."""

    def __init__(self, unavailable: bool = False) -> None:
        self._users: dict[int, User] = {}
        self.unavailable = unavailable

    def save(self, user: User) -> bool:
        if user.id in self._users:
            return False
        self._users[user.id] = user
        return True

    def get(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def delete(self, user_id: int) -> bool:
        if self.unavailable:
            raise UserStoreUnavailableError("user store is not available")
        if user_id in self._users:
            del self._users[user_id]
            return True
        return False


class CosmosUserStore(UserStore):
    """Cosmos DB implementation of UserStore."""

    def __init__(
        self,
        cosmos_endpoint: str,
        cosmos_key: str | None = None,
        database_name: str = "agenticdb",
        container_name: str = "users",
        use_managed_identity: bool = False,
    ) -> None:
        """Initialize Cosmos DB user store.

        Args:
            cosmos_endpoint: Cosmos DB endpoint URL
            cosmos_key: Cosmos DB key (if not using managed identity)
            database_name: Database name
            container_name: Container name for users
            use_managed_identity: Use managed identity for authentication
        """
        if use_managed_identity:
            credential = DefaultAzureCredential()
            self.client = CosmosClient(cosmos_endpoint, credential)
        else:
            if not cosmos_key:
                raise ValueError("cosmos_key is required when not using managed identity")
            self.client = CosmosClient(cosmos_endpoint, cosmos_key)

        self.container_name = container_name
        self.database = self.client.get_database_client(database_name)
        self.container = self.database.get_container_client(container_name)

    def save(self, user: User) -> bool:
        """Create a user record. Returns False if the id is already taken."""
        item_id = str(user.id)
        try:
            self.container.create_item(
                body={**user.model_dump(mode="json"), "id": item_id},
                enable_automatic_id_generation=False,
            )
            logger.info("Created user %s in container %s", item_id, self.container_name)
            return True
        except CosmosResourceExistsError:
            return False

    def get(self, user_id: int) -> User | None:
        item_id = str(user_id)
        try:
            user_doc = self.container.read_item(item=item_id, partition_key=item_id)
        except CosmosResourceNotFoundError:
            logger.debug("User %s not found in container %s", item_id, self.container_name)
            return None
        return User(
            id=user_doc["id"],
            username=user_doc["username"],
            password=user_doc["password"],
        )

    def delete(self, user_id: int) -> bool:
        item_id = str(user_id)
        try:
            self.container.delete_item(item=item_id, partition_key=item_id)
        except CosmosResourceNotFoundError:
            logger.warning("User %s not found for deletion in %s", item_id, self.container_name)
            return False
        except Exception as e:
            logger.error("Failed to delete user %s from %s: %s", item_id, self.container_name, e)
            raise
        logger.info("Deleted user %s from container %s", item_id, self.container_name)
        return True

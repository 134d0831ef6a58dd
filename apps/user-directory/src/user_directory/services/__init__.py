"""Service initialization and dependency injection."""

import logging

from user_directory.config.directory_config import DirectoryConfig, get_directory_config
from user_directory.services.user_directory import UserDirectoryService
from user_directory.services.user_store import (
    CosmosUserStore,
    InMemoryUserStore,
    UserStore,
    UserStoreUnavailableError,
)

logger = logging.getLogger(__name__)

# Service instances cache
_services_cache = {}


def get_user_store(config: DirectoryConfig | None = None) -> UserStore:
    """Get the configured user store instance.

    Args:
        config: Directory configuration. If None, will load from environment.

    Returns:
        UserStore instance for the configured backend
    """
    if "user_store" not in _services_cache:
        config = config or get_directory_config()
        backend = config.user_store_backend.lower().strip()

        if backend == "memory":
            _services_cache["user_store"] = InMemoryUserStore()
            logger.info("Initialized InMemoryUserStore")
        elif backend == "cosmos":
            if not config.azure_cosmosdb_endpoint:
                raise ValueError("AZURE_COSMOSDB_ENDPOINT is required")

            use_managed_identity = config.azure_cosmosdb_key is None

            _services_cache["user_store"] = CosmosUserStore(
                cosmos_endpoint=config.azure_cosmosdb_endpoint,
                cosmos_key=config.azure_cosmosdb_key,
                database_name=config.cosmos_db,
                container_name=config.cosmos_users_container,
                use_managed_identity=use_managed_identity,
            )
            logger.info("Initialized CosmosUserStore")
        else:
            raise ValueError(f"Unknown user store backend: {config.user_store_backend}")

    return _services_cache["user_store"]


def get_user_directory(config: DirectoryConfig | None = None) -> UserDirectoryService:
    """Create a new, empty user directory bound to the shared user store."""
    return UserDirectoryService(user_store=get_user_store(config))


def reset_services_cache() -> None:
    """Drop cached service instances so the next getter call rebuilds them."""
    _services_cache.clear()


__all__ = [
    "CosmosUserStore",
    "InMemoryUserStore",
    "UserDirectoryService",
    "UserStore",
    "UserStoreUnavailableError",
    "get_user_directory",
    "get_user_store",
    "reset_services_cache",
]

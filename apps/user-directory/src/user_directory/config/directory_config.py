"""Configuration management for the user directory."""

import logging
import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the user-directory project directory (apps/user-directory/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is in apps/user-directory/src/user_directory/config/directory_config.py
    # So we go up 4 levels to get to apps/user-directory/
    current_file = Path(__file__)
    project_dir = current_file.parent.parent.parent.parent
    default_env_file = project_dir / ".env"
    return str(default_env_file)


class DirectoryConfig(BaseSettings):
    """User directory settings from environment variables."""

    # Application
    app_name: str = "user-directory"
    environment: str = "development"
    log_level: str = "info"

    # Persistence collaborator: "memory" or "cosmos"
    user_store_backend: str = "memory"

    # Cosmos DB
    azure_cosmosdb_endpoint: str | None = None
    azure_cosmosdb_key: str | None = None
    cosmos_db: str = "agenticdb"
    cosmos_users_container: str = "users"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        env_prefix="",
        extra="ignore",
    )


def get_directory_config() -> DirectoryConfig:
    """Get user directory configuration.

    Returns:
        DirectoryConfig instance
    """
    return DirectoryConfig()


def configure_logging(config: DirectoryConfig | None = None) -> None:
    """Configure root logging from the configured log level."""
    config = config or get_directory_config()
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

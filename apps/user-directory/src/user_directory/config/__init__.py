"""Configuration package."""

from user_directory.config.directory_config import DirectoryConfig, configure_logging, get_directory_config

__all__ = ["DirectoryConfig", "configure_logging", "get_directory_config"]

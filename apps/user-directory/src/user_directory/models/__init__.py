"""Directory models package."""

from user_directory.models.user import User

__all__ = ["User"]

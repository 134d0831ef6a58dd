"""User model for the user directory."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User entity model.

    Instances are immutable and compare equal when id, username and password
    are all equal. The password is kept verbatim.
    """

    id: int = Field(..., description="Identifier of the user")
    username: str = Field(..., description="Login name of the user")
    password: str = Field(..., description="Plain-text password, compared verbatim on login")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "Ivan",
                "password": "123",
            }
        },
    )

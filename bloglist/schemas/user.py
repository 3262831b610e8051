"""User request and response schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from bloglist.configs import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.configs.settings import MAX_USERNAME_LENGTH
from bloglist.schemas.blog import BlogSummary


class UserCreate(BaseModel):
    """User registration payload."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(
        ...,
        min_length=MIN_USERNAME_LENGTH,
        max_length=MAX_USERNAME_LENGTH,
        description="Username (unique)",
        examples=["mluukkai"],
    )
    name: str | None = Field(
        default=None,
        max_length=100,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=MIN_PASSWORD_LENGTH,
        description="Password",
        examples=["salainen"],
    )


class UserResponse(BaseModel):
    """Public user representation with owned blogs populated."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "mluukkai",
                "name": "Matti Luukkainen",
                "blogs": [],
            },
        },
    )

    id: UUID
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = Field(default_factory=list)

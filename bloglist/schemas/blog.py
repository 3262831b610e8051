"""
Blog schemas.

`BlogCreate` and `BlogUpdate` validate incoming payloads; `BlogResponse` is the
public representation with the owner and comments populated. Internal
columns (`user_id`, `comment_ids`) never appear in a response.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloglist.schemas.comment import CommentResponse


class BlogCreate(BaseModel):
    """Blog creation payload."""

    title: str = Field(
        ...,
        min_length=1,
        description="Blog title",
        examples=["React patterns"],
    )
    author: str | None = Field(
        default=None,
        description="Blog author",
        examples=["Michael Chan"],
    )
    url: str = Field(
        ...,
        min_length=1,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int | None = Field(
        default=None,
        ge=0,
        description="Like count (defaults to 0)",
        examples=[7],
    )

    @field_validator("title", "url", mode="after")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject values made only of whitespace."""
        if not v.strip():
            mssg = "must not be blank"
            raise ValueError(mssg)
        return v


class BlogUpdate(BlogCreate):
    """Full replacement payload for an existing blog."""


class OwnerSummary(BaseModel):
    """Owner information embedded in blog responses (no credentials)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    name: str | None = None


class BlogSummary(BaseModel):
    """Blog information embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class BlogResponse(BlogSummary):
    """Blog with its owner and comments populated."""

    user: OwnerSummary | None = None
    comments: list[CommentResponse] = Field(default_factory=list)

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "mluukkai",
                    "name": "Matti Luukkainen",
                },
                "comments": [
                    {"id": "9b2f6c1e-8f0a-4d61-9a3c-2f1e7b6d5c4a", "text": "Great read"},
                ],
            },
        },
    )

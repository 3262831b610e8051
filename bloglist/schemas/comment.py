"""Comment request and response schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from bloglist.configs import MIN_COMMENT_LENGTH


class CommentCreate(BaseModel):
    """Comment creation payload."""

    text: str = Field(
        ...,
        min_length=MIN_COMMENT_LENGTH,
        description="Comment text",
        examples=["Great read, thanks!"],
    )


class CommentResponse(BaseModel):
    """Comment as embedded in a populated blog."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    text: str

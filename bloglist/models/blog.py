"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    `user_id` references the owning user. `comment_ids` keeps the order in
    which comments were appended.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )
    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Owner ID (foreign key to users.id)",
    )
    title: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog title",
    )
    author: str | None = Field(
        default=None,
        sa_column=Column(Text),
        description="Blog author",
    )
    url: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Blog URL",
    )
    likes: int = Field(default=0, nullable=False, ge=0, description="Like count")
    comment_ids: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="IDs of comments in creation order",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        description="Creation timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "React patterns",
                "author": "Michael Chan",
                "url": "https://reactpatterns.com/",
                "likes": 7,
                "comment_ids": [],
            },
        },
    )

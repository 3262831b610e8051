"""Comment database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel


class CommentDB(SQLModel, table=True):
    """Comment attached to a single blog."""

    __tablename__ = cast("declared_attr[str]", "comments")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Comment ID",
    )
    text: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment text",
    )
    blog_id: UUID = Field(
        sa_column=Column(
            "blog_id",
            ForeignKey("blogs.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        description="Owning blog ID (foreign key to blogs.id)",
    )

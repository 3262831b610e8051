"""Database models for the application."""

from bloglist.models.blog import BlogDB
from bloglist.models.comment import CommentDB
from bloglist.models.user import UserDB

__all__ = ["BlogDB", "CommentDB", "UserDB"]

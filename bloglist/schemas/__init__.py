"""Request and response schemas."""

from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogResponse,
    BlogSummary,
    BlogUpdate,
    OwnerSummary,
)
from bloglist.schemas.comment import CommentCreate, CommentResponse
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.statistics import AuthorBlogs, AuthorLikes, BlogStatistics, FavoriteBlog
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "AuthorBlogs",
    "AuthorLikes",
    "BlogCreate",
    "BlogResponse",
    "BlogStatistics",
    "BlogSummary",
    "BlogUpdate",
    "CommentCreate",
    "CommentResponse",
    "FavoriteBlog",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "OwnerSummary",
    "TokenData",
    "UserCreate",
    "UserResponse",
]

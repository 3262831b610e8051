"""Response schemas for blog statistics."""

from pydantic import BaseModel


class FavoriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class AuthorBlogs(BaseModel):
    author: str | None = None
    blogs: int


class AuthorLikes(BaseModel):
    author: str | None = None
    likes: int


class BlogStatistics(BaseModel):
    """Aggregate metrics over every stored blog."""

    total_blogs: int
    total_likes: int
    favorite_blog: FavoriteBlog | None = None
    most_blogs: AuthorBlogs | None = None
    most_likes: AuthorLikes | None = None

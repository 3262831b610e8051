# tests/services/conftest.py
"""Pytest fixtures for services tests."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from bloglist.models import BlogDB, UserDB
from bloglist.schemas.blog import BlogResponse


@pytest.fixture
def owner() -> UserDB:
    return UserDB(id=uuid4(), username="root", name="Superuser", password_hash="$argon2id$hash")


@pytest.fixture
def stranger() -> UserDB:
    return UserDB(id=uuid4(), username="other", name=None, password_hash="$argon2id$hash")


@pytest.fixture
def stored_blog(owner: UserDB) -> BlogDB:
    return BlogDB(
        id=uuid4(),
        user_id=owner.id,
        title="React patterns",
        author="Michael Chan",
        url="https://reactpatterns.com/",
        likes=7,
    )


@pytest.fixture
def blog_repo(stored_blog: BlogDB) -> MagicMock:
    """Blog repository mock that echoes blogs back as responses."""
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=stored_blog)
    repo.get_all = AsyncMock(return_value=[stored_blog])
    repo.create = AsyncMock(return_value=stored_blog)
    repo.replace = AsyncMock(return_value=stored_blog)
    repo.add_comment = AsyncMock(return_value=stored_blog)
    repo.delete = AsyncMock(return_value=True)

    async def populate_one(blog: BlogDB) -> BlogResponse:
        return BlogResponse(id=blog.id, title=blog.title, author=blog.author, url=blog.url, likes=blog.likes)

    repo.populate_one = AsyncMock(side_effect=populate_one)
    return repo


@pytest.fixture
def user_repo() -> MagicMock:
    repo = MagicMock()
    repo.add_blog = AsyncMock()
    repo.remove_blog = AsyncMock()
    repo.get_by_username = AsyncMock(return_value=None)
    repo.create = AsyncMock()
    return repo


@pytest.fixture
def comment_repo() -> MagicMock:
    repo = MagicMock()
    repo.create = AsyncMock()
    return repo

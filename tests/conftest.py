# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so the test environment must be in place
# before the app is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-signing-tokens"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from bloglist.db import close_db, init_db, transaction  # noqa: E402
from bloglist.main import app  # noqa: E402
from bloglist.managers.password_manager import hash_password  # noqa: E402
from bloglist.managers.token_manager import create_access_token  # noqa: E402
from bloglist.models import UserDB  # noqa: E402
from bloglist.repositories import UserRepository  # noqa: E402


@pytest.fixture
async def database() -> AsyncGenerator[None, None]:
    """Create the schema on a fresh in-memory database for each test."""
    await init_db()
    yield
    # Disposing the static pool drops the in-memory database
    await close_db()


@pytest.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(database: None) -> Callable[..., Awaitable[UserDB]]:
    """Return a factory that stores a user with a hashed password."""

    async def _make_user(
        username: str = "mluukkai",
        password: str = "salainen",
        name: str | None = "Matti Luukkainen",
    ) -> UserDB:
        async with transaction() as session:
            return await UserRepository(session).create(
                username=username,
                password_hash=await hash_password(password),
                name=name,
            )

    return _make_user


@pytest.fixture
async def root_user(make_user: Callable[..., Awaitable[UserDB]]) -> UserDB:
    """Create the default test user."""
    return await make_user(username="root", password="sekret", name="Superuser")


@pytest.fixture
def auth_headers(root_user: UserDB) -> dict[str, str]:
    """Create auth headers with a valid access token for `root_user`."""
    token = create_access_token(user_id=root_user.id, username=root_user.username)
    return {"Authorization": f"Bearer {token}"}

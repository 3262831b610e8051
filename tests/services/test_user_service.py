"""Tests for user registration and login services."""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest

from bloglist.errors import DuplicateEntryError, InvalidCredentialsError, ValidationError
from bloglist.managers.token_manager import decode_access_token
from bloglist.models import UserDB
from bloglist.services import AuthService, UserService


class TestRegister:
    @pytest.mark.asyncio
    async def test_stores_hash_not_password(self, user_repo: MagicMock) -> None:
        user_repo.create.return_value = UserDB(
            id=uuid4(),
            username="mluukkai",
            name="Matti Luukkainen",
            password_hash="$argon2id$hash",
        )
        service = UserService(user_repo)

        with patch(
            "bloglist.services.user.hash_password",
            AsyncMock(return_value="$argon2id$hash"),
        ) as mock_hash:
            user = await service.register("mluukkai", "salainen", "Matti Luukkainen")

        mock_hash.assert_awaited_once_with("salainen")
        user_repo.create.assert_awaited_once_with(
            username="mluukkai",
            password_hash="$argon2id$hash",
            name="Matti Luukkainen",
        )
        assert user.username == "mluukkai"
        assert user.blogs == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(("username", "password"), [("ab", "secret"), ("alice", "pw"), (None, "secret")])
    async def test_short_credentials_rejected(
        self,
        user_repo: MagicMock,
        username: str | None,
        password: str,
    ) -> None:
        with pytest.raises(ValidationError):
            await UserService(user_repo).register(username, password)
        user_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_existing_username_rejected(self, user_repo: MagicMock) -> None:
        user_repo.get_by_username.return_value = MagicMock()

        with pytest.raises(ValidationError) as exc_info:
            await UserService(user_repo).register("root", "salainen")

        assert "expected `username` to be unique" in exc_info.value.detail
        user_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_constraint_violation_becomes_validation_error(self, user_repo: MagicMock) -> None:
        user_repo.create.side_effect = DuplicateEntryError("Username 'root' already exists")

        with (
            patch("bloglist.services.user.hash_password", AsyncMock(return_value="h")),
            pytest.raises(ValidationError) as exc_info,
        ):
            await UserService(user_repo).register("root", "salainen")

        assert exc_info.value.status_code == 400


class TestLogin:
    @pytest.mark.asyncio
    async def test_valid_credentials_issue_token(self, user_repo: MagicMock) -> None:
        user = UserDB(id=uuid4(), username="root", name="Superuser", password_hash="$argon2id$hash")
        user_repo.get_by_username.return_value = user

        with patch("bloglist.services.auth.verify_password", AsyncMock(return_value=True)):
            response = await AuthService(user_repo).login("root", "sekret")

        assert response.username == "root"
        assert response.name == "Superuser"
        token_data = decode_access_token(response.token)
        assert token_data is not None
        assert token_data.user_id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, user_repo: MagicMock) -> None:
        user_repo.get_by_username.return_value = UserDB(
            id=uuid4(),
            username="root",
            password_hash="$argon2id$hash",
        )

        with (
            patch("bloglist.services.auth.verify_password", AsyncMock(return_value=False)),
            pytest.raises(InvalidCredentialsError) as exc_info,
        ):
            await AuthService(user_repo).login("root", "wrong")

        assert exc_info.value.detail == "invalid username or password"

    @pytest.mark.asyncio
    async def test_unknown_user_still_verifies(self, user_repo: MagicMock) -> None:
        with (
            patch(
                "bloglist.services.auth.verify_password",
                AsyncMock(return_value=False),
            ) as mock_verify,
            pytest.raises(InvalidCredentialsError),
        ):
            await AuthService(user_repo).login("ghost", "whatever")

        mock_verify.assert_awaited_once_with("whatever", None)

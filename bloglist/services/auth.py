"""Authentication service for username/password login."""

from datetime import timedelta

from bloglist.configs import settings
from bloglist.errors.auth import InvalidCredentialsError
from bloglist.managers.password_manager import verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str | None, password: str | None) -> UserDB:
        """
        Authenticate a user by username and password.

        Unknown users still go through a password verification so that both
        failure paths take comparable time.

        Args:
            username: Username
            password: Plain password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If authentication fails
        """
        user = await self.user_repo.get_by_username(username) if username else None
        hashed = user.password_hash if user else None

        if not await verify_password(password or "", hashed) or user is None:
            logger.info("Failed login attempt")
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Issue an access token for a user.

        Args:
            user: User entity

        Returns:
            LoginResponse: Token with the user's username and name
        """
        token = create_access_token(
            user_id=user.id,
            username=user.username,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def login(self, username: str | None, password: str | None) -> LoginResponse:
        """Authenticate credentials and return a fresh token."""
        user = await self.authenticate_user(username, password)
        logger.info(f"User {user.id} logged in")
        return self.create_token_for_user(user)

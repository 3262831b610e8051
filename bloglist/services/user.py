"""User registration and listing."""

from bloglist.configs import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.errors.database import DuplicateEntryError
from bloglist.errors.validation import ValidationError
from bloglist.managers.password_manager import hash_password
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.user import UserResponse

logger = get_logger(__name__)

UNIQUE_USERNAME_MESSAGE = "expected `username` to be unique"


class UserService:
    """Service for creating and listing users."""

    def __init__(self, user_repo: UserRepository) -> None:
        self.user_repo = user_repo

    async def list_users(self) -> list[UserResponse]:
        """Return every user with their blogs populated."""
        users = await self.user_repo.get_all()
        return await self.user_repo.populate(users)

    async def register(
        self,
        username: str | None,
        password: str | None,
        name: str | None = None,
    ) -> UserResponse:
        """
        Register a new user.

        Args:
            username: Unique username, at least 3 characters
            password: Plain password, at least 3 characters; only its hash is stored
            name: Optional display name

        Returns:
            UserResponse: Created user with an empty blog list

        Raises:
            ValidationError: If the username or password is too short, or the
                username is already taken
        """
        if not username or len(username) < MIN_USERNAME_LENGTH:
            mssg = f"username must be at least {MIN_USERNAME_LENGTH} characters long"
            raise ValidationError(mssg)
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            mssg = f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
            raise ValidationError(mssg)

        if await self.user_repo.get_by_username(username):
            raise ValidationError(UNIQUE_USERNAME_MESSAGE)

        password_hash = await hash_password(password)
        try:
            user: UserDB = await self.user_repo.create(
                username=username,
                password_hash=password_hash,
                name=name,
            )
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration
            raise ValidationError(UNIQUE_USERNAME_MESSAGE) from e

        logger.info(f"User {user.id} registered")
        return UserResponse(id=user.id, username=user.username, name=user.name, blogs=[])

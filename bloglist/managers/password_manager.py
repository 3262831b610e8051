"""
Password hashing module using Argon2 with passlib's CryptContext.

Hashing is CPU and memory bound, so the async helpers run it in a thread
pool to keep the event loop responsive.
"""

from asyncio import get_event_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.errors.password_hasher import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    Password hashing and verification using Argon2id.

    Wraps passlib's CryptContext with cost parameters taken from the
    configured security level.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str | None) -> bool:
        """
        Verify a plaintext password against a stored hash.

        A missing hash still runs a dummy verification so the response time
        does not reveal whether the user exists.
        """
        if not hashed_password or not hashed_password.strip():
            self.pwd_context.dummy_verify()
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Get or create the default password hasher instance."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """Hash a password with the default hasher off the event loop."""
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str | None) -> bool:
    """Verify a password with the default hasher off the event loop."""
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )

"""Authentication and authorization errors."""

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import NOT_OWNER_MESSAGE, TOKEN_ERROR_MESSAGE
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.monitoring import get_logger

logger = get_logger(__name__)


class AuthFailure(BaseAppError):
    """Raised when a credential is missing, malformed, expired or unverifiable."""

    def __init__(
        self,
        detail: str = TOKEN_ERROR_MESSAGE,
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(AuthFailure):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class Forbidden(BaseAppError):
    """Raised when a valid identity lacks the rights for an operation."""

    # Non-owners get 401, the same status as a bad or missing token.
    def __init__(
        self,
        detail: str = NOT_OWNER_MESSAGE,
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


auth_exception_handler = create_exception_handler(logger)

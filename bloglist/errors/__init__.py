from bloglist.errors.auth import (
    AuthFailure,
    Forbidden,
    InvalidCredentialsError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import (
    ValidationError,
    app_validation_exception_handler,
    validation_exception_handler,
)

__all__ = [
    "AuthFailure",
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "Forbidden",
    "InvalidCredentialsError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "ValidationError",
    "app_validation_exception_handler",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]

from bloglist.configs.settings import (
    CONFIG_MAP,
    MIN_COMMENT_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    NOT_OWNER_MESSAGE,
    TOKEN_ERROR_MESSAGE,
    Argon2Config,
    Settings,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "MIN_COMMENT_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "NOT_OWNER_MESSAGE",
    "TOKEN_ERROR_MESSAGE",
    "Settings",
    "settings",
]

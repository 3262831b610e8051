from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    BlogServiceDep,
    CommentRepoDep,
    OptionalUserDep,
    UserDBDep,
    UserRepoDep,
    UserServiceDep,
    get_current_user,
    get_optional_user,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "BlogServiceDep",
    "CommentRepoDep",
    "OptionalUserDep",
    "UserDBDep",
    "UserRepoDep",
    "UserServiceDep",
    "get_current_user",
    "get_optional_user",
    "oauth2_scheme",
]

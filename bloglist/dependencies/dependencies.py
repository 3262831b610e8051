"""Application dependencies: repositories, services and bearer authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.errors.auth import AuthFailure
from bloglist.managers.token_manager import authenticate
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, CommentRepository, UserRepository
from bloglist.services import AuthService, BlogService, UserService

# auto_error=False so a missing header reaches `authenticate` and gets the
# same 401 body as a malformed one.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_comment_repository(session: SessionDep) -> CommentRepository:
    return CommentRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
CommentRepoDep = Annotated[CommentRepository, Depends(get_comment_repository)]


def get_blog_service(
    blog_repo: BlogRepoDep,
    user_repo: UserRepoDep,
    comment_repo: CommentRepoDep,
) -> BlogService:
    """Build a `BlogService` whose repositories share one request session."""
    return BlogService(blog_repo, user_repo, comment_repo)


def get_user_service(user_repo: UserRepoDep) -> UserService:
    return UserService(user_repo)


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    return AuthService(user_repo)


BlogServiceDep = Annotated[BlogService, Depends(get_blog_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB:
    """
    Get the authenticated user from the bearer token.

    Parameters
    ----------
    token : str | None
        Bearer token, None when the header is missing.
    user_repo : UserRepository
        User repository bound to the request session.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    AuthFailure
        If the token is missing or invalid, or its user no longer exists.
    """
    token_data = authenticate(token)

    user = await user_repo.get_by_id(token_data.user_id)
    if not user:
        raise AuthFailure
    return user


async def get_optional_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: UserRepoDep,
) -> UserDB | None:
    """Return the authenticated user if a valid token was sent, else None."""
    if not token:
        return None
    try:
        return await get_current_user(token, user_repo)
    except AuthFailure:
        return None


UserDBDep = Annotated[UserDB, Depends(get_current_user)]
OptionalUserDep = Annotated[UserDB | None, Depends(get_optional_user)]

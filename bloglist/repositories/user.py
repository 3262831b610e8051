"""User repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from bloglist.errors.database import DuplicateEntryError
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository, to_uuids
from bloglist.schemas.blog import BlogSummary
from bloglist.schemas.user import UserResponse


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Besides CRUD it maintains the `blog_ids` forward index and populates it
    into blog summaries for responses.
    """

    model = UserDB
    order_field = "created_at"

    async def create(self, username: str, password_hash: str, name: str | None = None) -> UserDB:
        """
        Create a new user in the database.

        Args:
            username: Unique username
            password_hash: Already hashed password
            name: Optional display name

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If username already exists
        """
        db_user = UserDB(username=username, name=name, password_hash=password_hash)
        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            raise DuplicateEntryError(detail=f"Username '{username}' already exists") from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        result = await self.session.execute(select(UserDB).where(UserDB.username == username))
        return result.scalar_one_or_none()

    async def add_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """Append a blog id to the user's blog list."""
        # Reassign instead of mutating so the JSON column is flagged dirty
        user.blog_ids = [*user.blog_ids, str(blog_id)]
        return await self._add_and_refresh(user)

    async def remove_blog(self, user: UserDB, blog_id: UUID) -> UserDB:
        """Remove every occurrence of a blog id from the user's blog list."""
        user.blog_ids = [b for b in user.blog_ids if b != str(blog_id)]
        return await self._add_and_refresh(user)

    async def populate(self, users: list[UserDB]) -> list[UserResponse]:
        """
        Resolve each user's `blog_ids` into blog summaries.

        Ids that no longer resolve to a blog are skipped.

        Args:
            users: Users to populate

        Returns:
            list[UserResponse]: Users with blogs embedded, same order as input
        """
        wanted = {blog_id for user in users for blog_id in to_uuids(user.blog_ids)}
        blogs: dict[UUID, BlogDB] = {}
        if wanted:
            result = await self.session.execute(select(BlogDB).where(BlogDB.id.in_(wanted)))
            blogs = {blog.id: blog for blog in result.scalars().all()}

        return [
            UserResponse(
                id=user.id,
                username=user.username,
                name=user.name,
                blogs=[
                    BlogSummary.model_validate(blogs[blog_id])
                    for blog_id in to_uuids(user.blog_ids)
                    if blog_id in blogs
                ],
            )
            for user in users
        ]

"""Comment repository for database operations."""

from uuid import UUID

from bloglist.models.comment import CommentDB
from bloglist.repositories.base import BaseRepository


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB

    async def create(self, text: str, blog_id: UUID) -> CommentDB:
        """
        Persist a new comment referencing a blog.

        Args:
            text: Comment text
            blog_id: Owning blog UUID

        Returns:
            CommentDB: Created comment
        """
        return await self._add_and_refresh(CommentDB(text=text, blog_id=blog_id))

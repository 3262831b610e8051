"""Blog repository for database operations."""

from uuid import UUID

from sqlalchemy import select

from bloglist.models.blog import BlogDB
from bloglist.models.comment import CommentDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository, to_uuids
from bloglist.schemas.blog import BlogResponse, OwnerSummary
from bloglist.schemas.comment import CommentResponse


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Population of the owner and the comments is an explicit second query per
    referenced table rather than an ORM relationship.
    """

    model = BlogDB
    order_field = "created_at"

    async def create(
        self,
        title: str,
        url: str,
        user_id: UUID | None,
        author: str | None = None,
        likes: int = 0,
    ) -> BlogDB:
        """
        Create a new blog post in the database.

        Args:
            title: Blog title
            url: Blog URL
            user_id: Owner UUID
            author: Optional author name
            likes: Initial like count

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(title=title, url=url, author=author, likes=likes, user_id=user_id)
        return await self._add_and_refresh(db_blog)

    async def replace(
        self,
        blog_id: UUID,
        title: str,
        url: str,
        author: str | None,
        likes: int,
    ) -> BlogDB | None:
        """
        Replace the editable fields of a blog.

        Owner and comment references are left untouched.

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        db_blog = await self.get_by_id(blog_id)
        if not db_blog:
            return None

        db_blog.title = title
        db_blog.url = url
        db_blog.author = author
        db_blog.likes = likes
        return await self._add_and_refresh(db_blog)

    async def add_comment(self, blog: BlogDB, comment_id: UUID) -> BlogDB:
        """Append a comment id to the blog's comment list."""
        blog.comment_ids = [*blog.comment_ids, str(comment_id)]
        return await self._add_and_refresh(blog)

    async def populate(self, blogs: list[BlogDB]) -> list[BlogResponse]:
        """
        Resolve owners and comments for a list of blogs.

        Args:
            blogs: Blogs to populate

        Returns:
            list[BlogResponse]: Blogs with `user` and `comments` embedded,
            same order as input
        """
        owner_ids = {blog.user_id for blog in blogs if blog.user_id is not None}
        comment_ids = {comment_id for blog in blogs for comment_id in to_uuids(blog.comment_ids)}

        owners: dict[UUID, UserDB] = {}
        if owner_ids:
            result = await self.session.execute(select(UserDB).where(UserDB.id.in_(owner_ids)))
            owners = {user.id: user for user in result.scalars().all()}

        comments: dict[UUID, CommentDB] = {}
        if comment_ids:
            result = await self.session.execute(
                select(CommentDB).where(CommentDB.id.in_(comment_ids)),
            )
            comments = {comment.id: comment for comment in result.scalars().all()}

        populated = []
        for blog in blogs:
            owner = owners.get(blog.user_id) if blog.user_id is not None else None
            populated.append(
                BlogResponse(
                    id=blog.id,
                    title=blog.title,
                    author=blog.author,
                    url=blog.url,
                    likes=blog.likes,
                    user=OwnerSummary.model_validate(owner) if owner else None,
                    comments=[
                        CommentResponse.model_validate(comments[comment_id])
                        for comment_id in to_uuids(blog.comment_ids)
                        if comment_id in comments
                    ],
                ),
            )
        return populated

    async def populate_one(self, blog: BlogDB) -> BlogResponse:
        """Populate a single blog."""
        return (await self.populate([blog]))[0]

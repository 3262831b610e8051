"""
Blog mutation service.

Enforces the invariants around creating, updating, commenting on and
deleting blogs: required fields, the default like count, ownership, and the
reference lists kept on the owner (`blog_ids`) and on the blog
(`comment_ids`).

Multi-step writes run on the request's session, so they commit or roll back
together. The write order is fixed: blog before owner on create, comment
before blog on add comment.
"""

from uuid import UUID

from bloglist.configs import MIN_COMMENT_LENGTH, settings
from bloglist.errors.auth import AuthFailure, Forbidden
from bloglist.errors.database import RecordNotFoundError
from bloglist.errors.validation import ValidationError
from bloglist.models import BlogDB, UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import BlogRepository, CommentRepository, UserRepository
from bloglist.schemas.blog import BlogResponse
from bloglist.services.statistics import summarize

logger = get_logger(__name__)


def validate_blog_fields(title: str | None, url: str | None, likes: int | None = None) -> None:
    """
    Check the fields every stored blog must have.

    Raises:
        ValidationError: If title or url is missing/blank or likes is negative
    """
    missing = [name for name, value in (("title", title), ("url", url)) if not (value or "").strip()]
    if missing:
        mssg = f"missing required field(s): {', '.join(missing)}"
        raise ValidationError(mssg)
    if likes is not None and likes < 0:
        mssg = "likes must be a non-negative integer"
        raise ValidationError(mssg)


def validate_comment_text(text: str | None) -> None:
    """
    Check comment length.

    Raises:
        ValidationError: If the text is shorter than the minimum length
    """
    if text is None or len(text) < MIN_COMMENT_LENGTH:
        mssg = f"comment must be at least {MIN_COMMENT_LENGTH} characters long"
        raise ValidationError(mssg)


def ensure_owner(blog: BlogDB, user: UserDB | None) -> UserDB:
    """
    Check that `user` is present and owns `blog`.

    Raises:
        AuthFailure: If there is no acting user
        Forbidden: If the acting user is not the blog's owner
    """
    if user is None:
        raise AuthFailure
    if blog.user_id != user.id:
        raise Forbidden
    return user


class BlogService:
    """Service for blog mutations and reporting."""

    def __init__(
        self,
        blog_repo: BlogRepository,
        user_repo: UserRepository,
        comment_repo: CommentRepository,
        *,
        require_owner_on_update: bool | None = None,
    ) -> None:
        """
        Initialize the blog service.

        Args:
            blog_repo: Blog repository
            user_repo: User repository
            comment_repo: Comment repository
            require_owner_on_update: Apply delete's ownership checks to
                updates; defaults to the `REQUIRE_OWNER_ON_UPDATE` setting
        """
        self.blog_repo = blog_repo
        self.user_repo = user_repo
        self.comment_repo = comment_repo
        self.require_owner_on_update = (
            settings.REQUIRE_OWNER_ON_UPDATE
            if require_owner_on_update is None
            else require_owner_on_update
        )

    async def list_blogs(self) -> list[BlogResponse]:
        """Return every blog with owner and comments populated."""
        blogs = await self.blog_repo.get_all()
        return await self.blog_repo.populate(blogs)

    async def statistics(self) -> dict:
        """Compute aggregate statistics over every stored blog."""
        blogs = await self.blog_repo.get_all()
        return summarize(blogs)

    async def create_blog(
        self,
        user: UserDB | None,
        title: str | None,
        url: str | None,
        author: str | None = None,
        likes: int | None = None,
    ) -> BlogResponse:
        """
        Create a blog owned by `user` and register it on the owner.

        Args:
            user: Authenticated acting user
            title: Blog title (required)
            url: Blog URL (required)
            author: Optional author name
            likes: Optional like count, 0 when absent or falsy

        Returns:
            BlogResponse: Created blog with its owner populated

        Raises:
            AuthFailure: If there is no acting user
            ValidationError: If title or url is missing
        """
        if user is None:
            raise AuthFailure
        validate_blog_fields(title, url, likes)

        blog = await self.blog_repo.create(
            title=title,
            url=url,
            author=author,
            likes=likes or 0,
            user_id=user.id,
        )
        await self.user_repo.add_blog(user, blog.id)

        logger.info(f"Blog {blog.id} created by user {user.id}")
        return await self.blog_repo.populate_one(blog)

    async def update_blog(
        self,
        blog_id: UUID,
        title: str | None,
        url: str | None,
        author: str | None = None,
        likes: int | None = None,
        user: UserDB | None = None,
    ) -> BlogResponse | None:
        """
        Replace a blog's title, author, url and likes.

        Ownership is only enforced when `require_owner_on_update` is set.

        Returns:
            BlogResponse | None: Updated blog, or None if the id is unknown

        Raises:
            ValidationError: If title or url is missing
            AuthFailure: If ownership is enforced and there is no acting user
            Forbidden: If ownership is enforced and the user is not the owner
        """
        validate_blog_fields(title, url, likes)

        if self.require_owner_on_update:
            if user is None:
                raise AuthFailure
            existing = await self.blog_repo.get_by_id(blog_id)
            if existing is None:
                return None
            ensure_owner(existing, user)

        blog = await self.blog_repo.replace(
            blog_id,
            title=title,
            url=url,
            author=author,
            likes=likes or 0,
        )
        if blog is None:
            logger.info(f"Update skipped, blog {blog_id} not found")
            return None

        return await self.blog_repo.populate_one(blog)

    async def add_comment(self, blog_id: UUID, text: str | None) -> BlogResponse:
        """
        Attach a new comment to a blog.

        Returns:
            BlogResponse: Blog with comments populated

        Raises:
            ValidationError: If the text is too short
            RecordNotFoundError: If the blog does not exist
        """
        validate_comment_text(text)

        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")

        comment = await self.comment_repo.create(text=text, blog_id=blog.id)
        blog = await self.blog_repo.add_comment(blog, comment.id)

        logger.info(f"Comment {comment.id} added to blog {blog.id}")
        return await self.blog_repo.populate_one(blog)

    async def delete_blog(self, blog_id: UUID, user: UserDB | None) -> bool:
        """
        Delete a blog owned by `user`.

        Deleting an unknown id is a successful no-op.

        Returns:
            bool: True if a blog was deleted, False if it did not exist

        Raises:
            AuthFailure: If there is no acting user
            Forbidden: If the acting user is not the blog's owner
        """
        if user is None:
            raise AuthFailure

        blog = await self.blog_repo.get_by_id(blog_id)
        if blog is None:
            logger.info(f"Delete of unknown blog {blog_id} treated as no-op")
            return False

        ensure_owner(blog, user)

        await self.blog_repo.delete(blog.id)
        await self.user_repo.remove_blog(user, blog.id)

        logger.info(f"Blog {blog_id} deleted by user {user.id}")
        return True

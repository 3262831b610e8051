"""
Blog Routes.

Provides the blog list endpoints.

Summary
-------
Endpoints include:
  - List blogs
  - Blog statistics
  - Create blog
  - Update blog
  - Comment on a blog
  - Delete blog

Authentication
--------------
Create and delete require a bearer token. Update only checks ownership when
`REQUIRE_OWNER_ON_UPDATE` is enabled.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.dependencies import BlogServiceDep, OptionalUserDep, UserDBDep
from bloglist.schemas import BlogCreate, BlogResponse, BlogStatistics, BlogUpdate, CommentCreate

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

TOKEN_401 = {
    "description": "Unauthorized",
    "content": {"application/json": {"example": {"detail": "token missing or invalid"}}},
}
VALIDATION_400 = {
    "description": "Bad request",
    "content": {
        "application/json": {
            "example": {
                "detail": "Validation failed",
                "errors": [{"field": "title", "message": "Field required", "type": "missing"}],
            },
        },
    },
}


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Return every blog with its owner and comments populated.",
    operation_id="blogs_list",
)
async def get_blogs(service: BlogServiceDep) -> list[BlogResponse]:
    return await service.list_blogs()


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatistics,
    summary="Blog statistics",
    description="Total likes, favorite blog and the most productive and most liked authors.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "total_blogs": 6,
                        "total_likes": 36,
                        "favorite_blog": {
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "likes": 12,
                        },
                        "most_blogs": {"author": "Robert C. Martin", "blogs": 3},
                        "most_likes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_stats",
)
async def get_blog_statistics(service: BlogServiceDep) -> BlogStatistics:
    return BlogStatistics.model_validate(await service.statistics())


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog owned by the authenticated user.",
    responses={400: VALIDATION_400, 401: TOKEN_401},
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload.
    current_user : UserDB
        Authenticated user, recorded as the blog's owner.
    service : BlogService
        Blog service dependency.

    Returns
    -------
    BlogResponse
        Created blog with its owner populated.
    """
    return await service.create_blog(
        current_user,
        title=blog.title,
        url=blog.url,
        author=blog.author,
        likes=blog.likes,
    )


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse | None,
    summary="Update blog",
    description="Replace a blog's title, author, url and likes. Returns null for an unknown id.",
    responses={400: VALIDATION_400},
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog: BlogUpdate,
    service: BlogServiceDep,
    current_user: OptionalUserDep,
) -> BlogResponse | None:
    """
    Update blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    blog : BlogUpdate
        Replacement values.
    service : BlogService
        Blog service dependency.
    current_user : UserDB | None
        Authenticated user if a valid token was sent.

    Returns
    -------
    BlogResponse | None
        Updated blog, or None when no blog has the id.
    """
    return await service.update_blog(
        blog_id,
        title=blog.title,
        url=blog.url,
        author=blog.author,
        likes=blog.likes,
        user=current_user,
    )


@router.post(
    "/{blog_id}/comments",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Comment on a blog",
    description="Attach an anonymous comment to a blog.",
    responses={
        400: VALIDATION_400,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_comment",
)
async def add_comment(
    blog_id: UUID,
    comment: CommentCreate,
    service: BlogServiceDep,
) -> BlogResponse:
    return await service.add_comment(blog_id, comment.text)


@router.delete(
    "/{blog_id}",
    response_class=ORJSONResponse,
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete blog",
    description="Delete a blog owned by the authenticated user. Unknown ids are a no-op.",
    responses={
        204: {"description": "No Content"},
        401: {
            "description": "Unauthorized",
            "content": {
                "application/json": {
                    "example": {"detail": "only the creator can modify or delete blogs"},
                },
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    current_user: UserDBDep,
    service: BlogServiceDep,
) -> None:
    """
    Delete blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    current_user : UserDB
        Authenticated user; must own the blog.
    service : BlogService
        Blog service dependency.
    """
    await service.delete_blog(blog_id, current_user)

"""User routes for registration and listing."""

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.dependencies import UserServiceDep
from bloglist.schemas.user import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="List users",
    description="Return every user with the blogs they created.",
    operation_id="users_list",
)
async def get_users(service: UserServiceDep) -> list[UserResponse]:
    return await service.list_users()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. Usernames are unique; only a password hash is stored.",
    responses={
        201: {
            "content": {
                "application/json": {
                    "example": {
                        "id": "123e4567-e89b-12d3-a456-426614174000",
                        "username": "mluukkai",
                        "name": "Matti Luukkainen",
                        "blogs": [],
                    },
                },
            },
        },
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {"example": {"detail": "expected `username` to be unique"}},
            },
        },
    },
    operation_id="users_create",
)
async def create_user(user: UserCreate, service: UserServiceDep) -> UserResponse:
    """
    Register a user.

    Parameters
    ----------
    user : UserCreate
        Registration payload.
    service : UserService
        User service dependency.

    Returns
    -------
    UserResponse
        Created user with an empty blog list.
    """
    return await service.register(
        username=user.username,
        password=user.password.get_secret_value(),
        name=user.name,
    )

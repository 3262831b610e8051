from uuid import UUID

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for the login endpoint."""

    username: str = Field(..., min_length=1, examples=["mluukkai"])
    password: str = Field(..., min_length=1, examples=["salainen"])


class LoginResponse(BaseModel):
    """Token issued on successful login."""

    token: str
    username: str
    name: str | None = None


class TokenData(BaseModel):
    """Claims extracted from a verified access token."""

    username: str
    user_id: UUID
    jti: str
    token_type: str = "access"

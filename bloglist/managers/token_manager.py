"""Token manager for issuing and verifying JWT access tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import JWTError, jwt

from bloglist.configs import settings
from bloglist.errors.auth import AuthFailure
from bloglist.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: UUID,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new signed access token.

    Args:
        user_id: User's UUID
        username: User's username
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "user_id": str(user_id),
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> TokenData | None:
    """
    Decode and validate an access token.

    Signature, expiry and token type are all checked.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: Decoded token data or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except JWTError:
        return None

    username: str | None = payload.get("sub")
    user_id: str | None = payload.get("user_id")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not username or not user_id or not jti or token_type != ACCESS_TOKEN_TYPE:
        return None

    try:
        subject = UUID(user_id)
    except ValueError:
        return None

    return TokenData(username=username, user_id=subject, jti=jti, token_type=token_type)


def authenticate(token: str | None) -> TokenData:
    """
    Verify a raw bearer credential.

    Args:
        token: Token taken from the Authorization header, if any

    Returns:
        TokenData: Verified claims, including the subject's user id

    Raises:
        AuthFailure: If the token is absent, malformed, badly signed or expired
    """
    if not token:
        raise AuthFailure

    token_data = decode_access_token(token)
    if token_data is None:
        raise AuthFailure
    return token_data

"""Authentication service for password hashing and session cookies."""

from datetime import UTC, datetime, timedelta
from urllib.parse import quote, unquote

from fastapi import Request, Response
from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.services.errors import ErrorCode, ResolverError

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    With no hash (unknown user) a dummy verification still runs so the
    response time does not reveal whether the account exists.
    """
    if hashed_password is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int) -> str:
    """Create a signed session token for a user."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a session token."""
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def set_session_cookie(response: Response, user_id: int) -> None:
    """Issue the session cookie for a logged-in user."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=quote(create_access_token(user_id), safe=""),
        max_age=settings.session_max_age,
        httponly=False,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie from the client."""
    response.delete_cookie(key=settings.session_cookie_name, httponly=False, samesite="lax")


def get_session_user_id(request: Request) -> int:
    """Read the user id carried by the request's session cookie.

    Raises SESSION_EXPIRED when the cookie is missing, tampered with or past
    its expiry.
    """
    raw = request.cookies.get(settings.session_cookie_name)
    if not raw:
        raise ResolverError("Session expired", ErrorCode.SESSION_EXPIRED)

    payload = decode_access_token(unquote(raw))
    if payload is None or payload.get("sub") is None:
        raise ResolverError("Session expired", ErrorCode.SESSION_EXPIRED)

    try:
        return int(payload["sub"])
    except (TypeError, ValueError):
        raise ResolverError("Session expired", ErrorCode.SESSION_EXPIRED) from None

"""Session cookie handling.

The session is a signed JWT whose ``sub`` claim is the user id, stored in
an HTTP-only cookie.
"""

from datetime import datetime, timedelta

from fastapi import Response
from jose import JWTError, jwt

from app.config import settings


def create_session_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.utcnow() + (expires_delta or timedelta(days=settings.session_max_age_days))
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(token: str) -> str | None:
    """Return the user id in a valid token, or None."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None

    user_id = payload.get("sub")
    return user_id if isinstance(user_id, str) and user_id else None


def set_session_cookie(response: Response, user_id: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(user_id),
        max_age=settings.session_max_age_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

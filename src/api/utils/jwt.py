from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_browser_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate the signed browser-session token issued at login.

    Args:
        user_id: Logged-in user ID
        expires_delta: Lifetime, BROWSER_SESSION_TTL_MINUTES when omitted

    Returns:
        JWT token string (HS256)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.BROWSER_SESSION_TTL_MINUTES)
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.SESSION_SECRET, algorithm="HS256")


def verify_browser_token(token: str) -> Optional[dict]:
    """
    Verify and decode a browser-session token

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.SESSION_SECRET, algorithms=["HS256"]
        )
    except JWTError:
        return None
    if not isinstance(payload.get("user_id"), int):
        return None
    return payload

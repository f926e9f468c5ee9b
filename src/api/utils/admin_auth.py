"""
Link management authorization.

Shortlinks can be created by member accounts with a browser session, or by
other services presenting the admin API key.
"""

from typing import Optional

from fastapi import Depends, Header, status
from libs.result import Error
from src.api.error import ClientError
from src.depends import get_session_user
from src.domain.authorization import SessionUser
from config import ApplicationConfig


async def verify_link_manager(
    x_admin_api_key: Optional[str] = Header(None),
    user: Optional[SessionUser] = Depends(get_session_user),
):
    """
    Allow either a valid X-Admin-API-Key header or a member session.

    Raises:
        ClientError: 401 if no identity or a wrong key, 403 for non-members

    Returns:
        True if allowed
    """
    if x_admin_api_key:
        if x_admin_api_key != ApplicationConfig.ADMIN_API_KEY:
            raise ClientError(
                Error("INVALID_API_KEY", "Invalid admin API key"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        return True

    if user is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Login or admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if not user.member:
        raise ClientError(
            Error("FORBIDDEN", "Only members can manage shortlinks"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return True

"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Login intent plus the request details a new session records"""

    email: Optional[str] = None
    password: Optional[str] = None
    session_cookie: Optional[str] = None
    user_agent: str = ""
    ip_address: str = ""


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user_id: int
    email: str
    member: bool
    # New sessionId cookie value; None when the presented cookie was kept
    session_id: Optional[str] = None
    evicted_session_ids: list[str] = []


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    session_deleted: bool

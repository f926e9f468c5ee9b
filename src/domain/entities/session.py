"""
Session Entity

A logged-in browser/device, identified by the sessionId cookie.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class Session(SQLModel, table=True):
    """
    Session entity - one active device session for a user.

    Business Rules:
    - session_id is random (128 bits) and globally unique
    - At most MAX_SESSIONS_PER_USER per user; the oldest is evicted first
    - Never updated after creation; deleted on eviction or logout
    - Every row is mirrored into saved_sessions
    """

    __tablename__ = "sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: str = Field(unique=True, index=True, max_length=64)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    user_agent: str = Field(default="", max_length=512)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

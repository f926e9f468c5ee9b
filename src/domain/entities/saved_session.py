"""
SavedSession Entity

Append-only mirror of every session ever issued.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class SavedSession(SQLModel, table=True):
    """
    SavedSession entity - historical record of an issued session.

    Business Rules:
    - Immutable (never updated or deleted)
    - Keyed by the same session_id as the live session
    - Lets operators spot cookies that were valid once but are no longer active
    """

    __tablename__ = "saved_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: str = Field(unique=True, index=True, max_length=64)
    user_id: int = Field(nullable=False, index=True)
    user_agent: str = Field(default="", max_length=512)
    ip_address: str = Field(default="", max_length=128)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

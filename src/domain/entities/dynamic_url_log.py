"""
DynamicURLLog Entity

Immutable record of every destination handed out after linkbusting.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class DynamicURLLog(SQLModel, table=True):
    __tablename__ = "dynamic_urls"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, index=True)
    full_url: str = Field(max_length=512)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

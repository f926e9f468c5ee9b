"""
SavedIP Entity

Append-only history of every IP address ever granted.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class SavedIP(SQLModel, table=True):
    __tablename__ = "saved_ips"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(nullable=False, index=True)
    ip_address: str = Field(max_length=128)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

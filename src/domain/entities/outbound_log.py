"""
OutboundLog Entity

Immutable record of each authorized /l/<code> access.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class OutboundLog(SQLModel, table=True):
    __tablename__ = "outbound"

    id: Optional[int] = Field(default=None, primary_key=True)
    ip_address: str = Field(max_length=128)
    user_agent: str = Field(default="", max_length=255)
    code: str = Field(max_length=32)
    auth_method: str = Field(max_length=32)
    auth_value: str = Field(max_length=64)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

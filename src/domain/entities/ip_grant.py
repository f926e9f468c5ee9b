"""
IPGrant Entity

An address from which any request is trusted on behalf of a user.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class IPGrant(SQLModel, table=True):
    """
    IPGrant entity - authorizes every requester from ip_address.

    Business Rules:
    - Replaced as a whole set on every dashboard update
    - At most MAX_IPS_PER_USER entries per user
    """

    __tablename__ = "ips"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    ip_address: str = Field(index=True, max_length=128)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

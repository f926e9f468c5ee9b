"""
Shortlink Entity

Maps a public code to a destination.
"""

from datetime import UTC, datetime
from typing import List, Optional

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel, Text

from .enums import LinkMethod


class Shortlink(SQLModel, table=True):
    """
    Shortlink entity - a code and where it leads.

    Business Rules:
    - Codes are not unique; the row with the highest id wins
    - data holds serialized JSON and is only set for POST links
    - linkbust is stored already sorted in application order
    - Immutable once created
    """

    __tablename__ = "shortlinks"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(max_length=32)
    method: LinkMethod = Field(default=LinkMethod.GET)
    destination: str = Field(max_length=512)
    data: Optional[str] = Field(default=None, sa_column=Column(Text))
    linkbust: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_shortlink_code", "code"),)

"""
User Entity

Represents an account that can log in and own sessions and IP grants.
"""

from datetime import UTC, datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - an account holder.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - member flag gates link management (and redirects when
      REQUIRE_MEMBER_FOR_REDIRECT is enabled)
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    member: bool = Field(default=False)
    password_hash: str = Field(max_length=128)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

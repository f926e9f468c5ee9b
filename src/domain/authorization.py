"""
Authorization values passed through the redirect pipeline.

All of them are immutable: the API layer builds one RequestContext per
request and the trust evaluator turns it into exactly one AuthorizationResult.
"""

from dataclasses import dataclass
from typing import Optional

from src.domain.entities import TrustMethod


@dataclass(frozen=True)
class SessionUser:
    """User behind a valid browser-session token, detached from the database"""

    id: int
    email: str
    member: bool


@dataclass(frozen=True)
class RequestContext:
    ip_address: str
    user_agent: str = ""
    session_user: Optional[SessionUser] = None
    session_cookie: Optional[str] = None


@dataclass(frozen=True)
class AuthorizationResult:
    method: Optional[TrustMethod] = None
    value: Optional[str] = None
    user_id: Optional[int] = None
    # Set when a presented sessionId cookie matched no live session
    clear_session_cookie: bool = False

    @property
    def authorized(self) -> bool:
        return self.method is not None

    @classmethod
    def unauthorized(cls, clear_session_cookie: bool = False) -> "AuthorizationResult":
        return cls(clear_session_cookie=clear_session_cookie)

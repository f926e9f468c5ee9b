from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import Session, User


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_session_id(self, session_id: str) -> Optional[Session]:
        """Get live session by its cookie value"""
        pass

    @abstractmethod
    async def get_with_user(self, session_id: str) -> Optional[Tuple[User, Session]]:
        """Get the (user, session) pair for a live session cookie value"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: int) -> List[Session]:
        """Get all live sessions for a user, oldest first"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def delete(self, session: Session) -> None:
        """Delete a live session (its saved mirror is kept)"""
        pass

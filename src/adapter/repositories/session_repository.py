from typing import List, Optional, Tuple

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.session_repository import ISessionRepository
from src.domain.entities import Session, User


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_session_id(self, session_id: str) -> Optional[Session]:
        """Get live session by its cookie value"""
        stmt = select(Session).where(Session.session_id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_user(self, session_id: str) -> Optional[Tuple[User, Session]]:
        """Get the (user, session) pair for a live session cookie value"""
        stmt = (
            select(User, Session)
            .join(Session, Session.user_id == User.id)
            .where(Session.session_id == session_id)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_user_id(self, user_id: int) -> List[Session]:
        """Get all live sessions for a user, oldest first"""
        stmt = select(Session).where(Session.user_id == user_id).order_by(Session.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def delete(self, session_obj: Session) -> None:
        """Delete a live session"""
        await self.session.delete(session_obj)
        await self.session.flush()

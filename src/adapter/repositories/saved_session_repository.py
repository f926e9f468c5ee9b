from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.saved_session_repository import ISavedSessionRepository
from src.domain.entities import SavedSession


class SavedSessionRepository(ISavedSessionRepository):
    """SavedSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, saved_session: SavedSession) -> SavedSession:
        """Mirror a newly issued session (immutable)"""
        self.session.add(saved_session)
        await self.session.flush()
        await self.session.refresh(saved_session)
        return saved_session

    async def get_by_session_id(self, session_id: str) -> Optional[SavedSession]:
        stmt = select(SavedSession).where(SavedSession.session_id == session_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

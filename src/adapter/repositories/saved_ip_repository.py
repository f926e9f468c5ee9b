from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.saved_ip_repository import ISavedIPRepository
from src.domain.entities import SavedIP


class SavedIPRepository(ISavedIPRepository):
    """SavedIP repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, saved_ip: SavedIP) -> SavedIP:
        self.session.add(saved_ip)
        await self.session.flush()
        await self.session.refresh(saved_ip)
        return saved_ip

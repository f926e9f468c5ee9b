from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.outbound_log_repository import IOutboundLogRepository
from src.domain.entities import OutboundLog


class OutboundLogRepository(IOutboundLogRepository):
    """OutboundLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: OutboundLog) -> OutboundLog:
        """Append an access record (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        return entry

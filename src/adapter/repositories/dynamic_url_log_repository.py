from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.dynamic_url_log_repository import IDynamicURLLogRepository
from src.domain.entities import DynamicURLLog


class DynamicURLLogRepository(IDynamicURLLogRepository):
    """DynamicURLLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: DynamicURLLog) -> DynamicURLLog:
        """Append a resolved destination (immutable)"""
        self.session.add(entry)
        await self.session.flush()
        return entry

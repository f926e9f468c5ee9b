from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.shortlink_repository import IShortlinkRepository
from src.domain.entities import Shortlink


class ShortlinkRepository(IShortlinkRepository):
    """Shortlink repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_latest_by_code(self, code: str) -> Optional[Shortlink]:
        """
        Get the most recent shortlink for a code.

        Codes may repeat; the highest id is the one that resolves.
        """
        stmt = (
            select(Shortlink)
            .where(Shortlink.code == code)
            .order_by(Shortlink.id.desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, shortlink: Shortlink) -> Shortlink:
        """Create a new shortlink"""
        self.session.add(shortlink)
        await self.session.flush()
        await self.session.refresh(shortlink)
        return shortlink

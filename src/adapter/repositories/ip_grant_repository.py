from typing import List, Optional, Tuple

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.ip_grant_repository import IIPGrantRepository
from src.domain.entities import IPGrant, User


class IPGrantRepository(IIPGrantRepository):
    """IPGrant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_with_user_by_ip(self, ip_address: str) -> Optional[Tuple[User, IPGrant]]:
        """Get the (user, grant) pair authorizing an address"""
        stmt = (
            select(User, IPGrant)
            .join(IPGrant, IPGrant.user_id == User.id)
            .where(IPGrant.ip_address == ip_address)
            .order_by(IPGrant.id)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_by_user_id(self, user_id: int) -> List[IPGrant]:
        """Get all grants for a user"""
        stmt = select(IPGrant).where(IPGrant.user_id == user_id).order_by(IPGrant.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_all_by_user_id(self, user_id: int) -> int:
        """Delete every grant for a user"""
        stmt = delete(IPGrant).where(IPGrant.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def create(self, grant: IPGrant) -> IPGrant:
        """Create a new grant"""
        self.session.add(grant)
        await self.session.flush()
        await self.session.refresh(grant)
        return grant

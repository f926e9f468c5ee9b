from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import IPGrant, User


class IIPGrantRepository(ABC):
    """IPGrant repository interface - application layer"""

    @abstractmethod
    async def get_with_user_by_ip(self, ip_address: str) -> Optional[Tuple[User, IPGrant]]:
        """Get the (user, grant) pair authorizing an address"""
        pass

    @abstractmethod
    async def list_by_user_id(self, user_id: int) -> List[IPGrant]:
        """Get all grants for a user"""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: int) -> int:
        """Delete every grant for a user. Returns count of deleted rows."""
        pass

    @abstractmethod
    async def create(self, grant: IPGrant) -> IPGrant:
        """Create a new grant"""
        pass

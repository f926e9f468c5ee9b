from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Shortlink


class IShortlinkRepository(ABC):
    """Shortlink repository interface - application layer"""

    @abstractmethod
    async def get_latest_by_code(self, code: str) -> Optional[Shortlink]:
        """Get the shortlink with the highest id for a code"""
        pass

    @abstractmethod
    async def create(self, shortlink: Shortlink) -> Shortlink:
        """Create a new shortlink"""
        pass

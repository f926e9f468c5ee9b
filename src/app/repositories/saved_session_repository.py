from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import SavedSession


class ISavedSessionRepository(ABC):
    """SavedSession repository interface - append only"""

    @abstractmethod
    async def create(self, saved_session: SavedSession) -> SavedSession:
        """Mirror a newly issued session"""
        pass

    @abstractmethod
    async def get_by_session_id(self, session_id: str) -> Optional[SavedSession]:
        """Get the historical record for a session cookie value"""
        pass

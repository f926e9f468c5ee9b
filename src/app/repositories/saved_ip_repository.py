from abc import ABC, abstractmethod

from src.domain.entities import SavedIP


class ISavedIPRepository(ABC):
    """SavedIP repository interface - append only"""

    @abstractmethod
    async def create(self, saved_ip: SavedIP) -> SavedIP:
        pass

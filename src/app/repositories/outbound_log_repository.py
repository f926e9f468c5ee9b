from abc import ABC, abstractmethod

from src.domain.entities import OutboundLog


class IOutboundLogRepository(ABC):
    """OutboundLog repository interface - append only"""

    @abstractmethod
    async def create(self, entry: OutboundLog) -> OutboundLog:
        pass

from abc import ABC, abstractmethod

from src.domain.entities import DynamicURLLog


class IDynamicURLLogRepository(ABC):
    """DynamicURLLog repository interface - append only"""

    @abstractmethod
    async def create(self, entry: DynamicURLLog) -> DynamicURLLog:
        pass

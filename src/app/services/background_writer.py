from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from src.app.services.unit_of_work import UnitOfWork

WriteJob = Callable[[UnitOfWork], Awaitable[None]]


class BackgroundWriter(ABC):
    """
    Abstract BackgroundWriter - fire-and-forget persistence.

    Jobs run outside the request/response cycle in their own unit of work.
    A failing job is logged and dropped; it never reaches the caller.
    """

    @abstractmethod
    def submit(self, job: WriteJob, description: str = "write") -> None:
        pass

    @abstractmethod
    async def join(self) -> None:
        """Wait until every submitted job has been attempted"""
        pass

    @abstractmethod
    async def stop(self) -> None:
        pass

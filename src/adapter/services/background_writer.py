import asyncio
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import sessionmaker

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.background_writer import BackgroundWriter, WriteJob

logger = logging.getLogger(__name__)


class QueuedBackgroundWriter(BackgroundWriter):
    """
    asyncio.Queue backed writer with a single worker task.

    The worker is started lazily on the first submit so it always lives on
    the running event loop. Each job gets a fresh database session and is
    committed on success. Errors go to the log and the job is dropped; there
    are no retries.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._queue: Optional[asyncio.Queue] = None
        self._worker: Optional[asyncio.Task] = None

    def submit(self, job: WriteJob, description: str = "write") -> None:
        self._ensure_worker()
        self._queue.put_nowait((job, description))

    async def join(self) -> None:
        if self._queue is not None:
            await self._queue.join()

    async def stop(self) -> None:
        if self._worker is None:
            return
        await self.join()
        self._worker.cancel()
        try:
            await self._worker
        except asyncio.CancelledError:
            pass
        self._worker = None
        self._queue = None

    def _ensure_worker(self) -> None:
        if self._worker is None or self._worker.done():
            self._queue = asyncio.Queue()
            self._worker = asyncio.create_task(self._run())

    async def _run(self) -> None:
        while True:
            item: Tuple[WriteJob, str] = await self._queue.get()
            job, description = item
            try:
                await self._execute(job)
            except Exception:
                logger.exception(f"Background {description} failed, dropping it")
            finally:
                self._queue.task_done()

    async def _execute(self, job: WriteJob) -> None:
        async with self.session_factory() as session:
            async with SqlAlchemyUnitOfWork(session) as uow:
                await job(uow)
                await uow.commit()

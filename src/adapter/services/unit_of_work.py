from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.dynamic_url_log_repository import DynamicURLLogRepository
from src.adapter.repositories.ip_grant_repository import IPGrantRepository
from src.adapter.repositories.outbound_log_repository import OutboundLogRepository
from src.adapter.repositories.saved_ip_repository import SavedIPRepository
from src.adapter.repositories.saved_session_repository import SavedSessionRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.adapter.repositories.shortlink_repository import ShortlinkRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.saved_sessions = SavedSessionRepository(self.session)
        self.ips = IPGrantRepository(self.session)
        self.saved_ips = SavedIPRepository(self.session)
        self.shortlinks = ShortlinkRepository(self.session)
        self.outbound_logs = OutboundLogRepository(self.session)
        self.dynamic_urls = DynamicURLLogRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

from abc import ABC, abstractmethod

from src.app.repositories.dynamic_url_log_repository import IDynamicURLLogRepository
from src.app.repositories.ip_grant_repository import IIPGrantRepository
from src.app.repositories.outbound_log_repository import IOutboundLogRepository
from src.app.repositories.saved_ip_repository import ISavedIPRepository
from src.app.repositories.saved_session_repository import ISavedSessionRepository
from src.app.repositories.session_repository import ISessionRepository
from src.app.repositories.shortlink_repository import IShortlinkRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    saved_sessions: ISavedSessionRepository
    ips: IIPGrantRepository
    saved_ips: ISavedIPRepository
    shortlinks: IShortlinkRepository
    outbound_logs: IOutboundLogRepository
    dynamic_urls: IDynamicURLLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

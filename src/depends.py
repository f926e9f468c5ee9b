from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.background_writer import QueuedBackgroundWriter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.cookies import BROWSER_SESSION_COOKIE
from src.api.utils.jwt import verify_browser_token
from src.app.services.background_writer import BackgroundWriter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.authorization import SessionUser

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

background_writer = QueuedBackgroundWriter(AsyncSessionLocal)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_background_writer() -> BackgroundWriter:
    return background_writer


async def get_session_user(
    request: Request, uow: UnitOfWork = Depends(get_unit_of_work)
) -> Optional[SessionUser]:
    """
    Dependency resolving the browser-session cookie to a user.

    A missing, invalid or expired token, or one for a deleted user, yields
    None rather than an error: callers decide whether that is fatal.
    """
    token = request.cookies.get(BROWSER_SESSION_COOKIE)
    if not token:
        return None

    payload = verify_browser_token(token)
    if payload is None:
        return None

    async with uow:
        user = await uow.users.get_by_id(payload["user_id"])
        if user is None:
            return None
        return SessionUser(id=user.id, email=user.email, member=user.member)

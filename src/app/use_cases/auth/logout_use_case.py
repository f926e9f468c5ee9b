"""
Logout Use Case

Ends the device session behind a sessionId cookie.
"""

from typing import Optional

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Business Rules:
    - Deletes the live session only; saved_sessions keeps its mirror
    - A missing or unknown cookie is not an error
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_cookie: Optional[str]) -> Result[LogoutResponse]:
        if not session_cookie:
            return Return.ok(LogoutResponse(session_deleted=False))

        async with self.uow:
            session = await self.uow.sessions.get_by_session_id(session_cookie)
            if session is None:
                return Return.ok(LogoutResponse(session_deleted=False))

            await self.uow.sessions.delete(session)
            await self.uow.commit()

            return Return.ok(LogoutResponse(session_deleted=True))

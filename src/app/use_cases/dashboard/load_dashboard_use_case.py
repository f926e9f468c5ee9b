"""
Load Dashboard Use Case

Fetches the caller's current IP grants and live sessions.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DashboardView, SessionInfo


class LoadDashboardUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int) -> Result[DashboardView]:
        async with self.uow:
            grants = await self.uow.ips.list_by_user_id(user_id)
            sessions = await self.uow.sessions.list_by_user_id(user_id)

            return Return.ok(
                DashboardView(
                    ips=[grant.ip_address for grant in grants],
                    sessions=[
                        SessionInfo(
                            session_id=session.session_id,
                            user_agent=session.user_agent,
                            created_at=session.created_at,
                        )
                        for session in sessions
                    ],
                )
            )

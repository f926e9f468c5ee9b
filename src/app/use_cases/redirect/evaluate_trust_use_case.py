"""
Evaluate Trust Use Case

Decides whether a requester may resolve shortlinks.
"""

import logging

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.authorization import AuthorizationResult, RequestContext
from src.domain.entities import TrustMethod

logger = logging.getLogger(__name__)


class EvaluateTrustUseCase:
    """
    Three-tier trust check, first match wins.

    Business Rules:
    - USER: a valid browser session (value = user id)
    - SESSION: a sessionId cookie bound to a live session (value = cookie)
    - IP: the requester address is granted to some user (value = address)
    - A sessionId cookie with no live session is flagged for clearing, logged
      as revoked or never issued (per saved_sessions), and
      evaluation falls through to the IP tier
    - With require_member, USER and SESSION only match member accounts
    - The unauthorized result never says which tier failed
    """

    def __init__(self, uow: UnitOfWork, require_member: bool = False):
        self.uow = uow
        self.require_member = require_member

    async def execute(self, context: RequestContext) -> Result[AuthorizationResult]:
        user = context.session_user
        if user is not None and self._is_trusted(user.member):
            return Return.ok(
                AuthorizationResult(
                    method=TrustMethod.USER, value=str(user.id), user_id=user.id
                )
            )

        async with self.uow:
            clear_cookie = False
            if context.session_cookie:
                pair = await self.uow.sessions.get_with_user(context.session_cookie)
                if pair is None:
                    clear_cookie = True
                    await self._log_stale_cookie(context)
                else:
                    owner, _ = pair
                    if self._is_trusted(owner.member):
                        return Return.ok(
                            AuthorizationResult(
                                method=TrustMethod.SESSION,
                                value=context.session_cookie,
                                user_id=owner.id,
                            )
                        )

            pair = await self.uow.ips.get_with_user_by_ip(context.ip_address)
            if pair is not None:
                owner, _ = pair
                return Return.ok(
                    AuthorizationResult(
                        method=TrustMethod.IP,
                        value=context.ip_address,
                        user_id=owner.id,
                        clear_session_cookie=clear_cookie,
                    )
                )

            return Return.ok(AuthorizationResult.unauthorized(clear_cookie))

    def _is_trusted(self, member: bool) -> bool:
        return member or not self.require_member

    async def _log_stale_cookie(self, context: RequestContext) -> None:
        saved = await self.uow.saved_sessions.get_by_session_id(context.session_cookie)
        if saved is not None:
            logger.warning(
                f"Revoked session cookie of user {saved.user_id} presented from {context.ip_address}"
            )
        else:
            logger.warning(f"Unknown session cookie presented from {context.ip_address}")

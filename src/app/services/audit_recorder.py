import logging
from typing import Optional

from src.app.services.background_writer import BackgroundWriter
from src.domain.authorization import AuthorizationResult, RequestContext
from src.domain.entities import DynamicURLLog, OutboundLog

logger = logging.getLogger(__name__)


class AuditRecorder:
    """
    Records redirect traffic through the background writer.

    Both methods return immediately; the rows are written after the response
    may already have been sent, and a failed write is only logged.
    """

    def __init__(self, writer: BackgroundWriter):
        self.writer = writer

    def record_outbound(
        self, context: RequestContext, code: str, authorization: AuthorizationResult
    ) -> None:
        entry = OutboundLog(
            ip_address=context.ip_address[:128],
            user_agent=(context.user_agent or "")[:255],
            code=code[:32],
            auth_method=authorization.method.value if authorization.method else "",
            auth_value=(authorization.value or "")[:64],
        )

        async def job(uow):
            await uow.outbound_logs.create(entry)

        self.writer.submit(job, "outbound log")

    def record_dynamic_url(self, user_id: Optional[int], full_url: str) -> None:
        entry = DynamicURLLog(user_id=user_id, full_url=full_url[:512])

        async def job(uow):
            await uow.dynamic_urls.create(entry)

        self.writer.submit(job, "dynamic url log")

"""
Resolve Shortlink Use Case

Turns an authorized request for a code into a delivery payload.
"""

import json
import logging
import random
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.audit_recorder import AuditRecorder
from src.app.services.unit_of_work import UnitOfWork
from src.domain.authorization import AuthorizationResult, RequestContext
from src.domain.entities import LinkMethod
from src.domain.linkbust import apply_linkbust
from .dtos import ShortlinkDelivery

logger = logging.getLogger(__name__)


class ResolveShortlinkUseCase:
    """
    Use case for resolving a code after authorization.

    Business Rules:
    - Every authorized attempt is recorded, found or not
    - The most recent shortlink (highest id) for the code wins
    - Linkbust techniques are applied to the destination on every resolution
    - POST links carry their stored data; unreadable data fails the request
    - Every successful resolution records the final destination
    """

    def __init__(
        self,
        uow: UnitOfWork,
        audit: AuditRecorder,
        rng: Optional[random.Random] = None,
    ):
        self.uow = uow
        self.audit = audit
        self.rng = rng

    async def execute(
        self, code: str, context: RequestContext, authorization: AuthorizationResult
    ) -> Result[ShortlinkDelivery]:
        if not authorization.authorized:
            return Return.err(Error("UNAUTHORIZED", "Unauthorized"))

        self.audit.record_outbound(context, code, authorization)

        async with self.uow:
            shortlink = await self.uow.shortlinks.get_latest_by_code(code)
            if shortlink is None:
                return Return.err(Error("SHORTLINK_NOT_FOUND", "Shortlink not found"))

            method = LinkMethod(shortlink.method)
            destination = apply_linkbust(shortlink.destination, shortlink.linkbust, self.rng)

            data = None
            if method == LinkMethod.POST:
                try:
                    data = json.loads(shortlink.data) if shortlink.data else {}
                except ValueError:
                    data = None
                if not isinstance(data, dict):
                    logger.error(f"Shortlink {shortlink.id} has unreadable data")
                    return Return.err(
                        Error("MALFORMED_STORED_DATA", "Stored shortlink data is invalid")
                    )

        self.audit.record_dynamic_url(authorization.user_id, destination)
        logger.info(f"Resolved {code} via {authorization.method.value}")

        return Return.ok(
            ShortlinkDelivery(method=method.value, destination=destination, data=data)
        )

"""
Update IPs Use Case

Replaces the set of addresses trusted on behalf of a user.
"""

import ipaddress
from typing import List, Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import IPGrant, SavedIP
from .dtos import UpdateIPsResponse


class UpdateIPsUseCase:
    """
    Use case for replacing a user's IP grants.

    Business Rules:
    - Blank entries are ignored, duplicates collapsed
    - Every remaining entry must be a valid IPv4 or IPv6 address
    - At most max_ips addresses
    - Delete-all then insert runs in one unit of work, so a failure leaves
      the previous grants in place
    - Every inserted address is mirrored into saved_ips
    """

    def __init__(self, uow: UnitOfWork, max_ips: int = 2):
        self.uow = uow
        self.max_ips = max_ips

    async def execute(
        self, user_id: int, addresses: List[Optional[str]]
    ) -> Result[UpdateIPsResponse]:
        ips = []
        for address in addresses:
            address = (address or "").strip()
            if not address:
                continue
            try:
                ipaddress.ip_address(address)
            except ValueError:
                return Return.err(Error("IP_INVALID", f"{address} is not a valid IP address."))
            if address not in ips:
                ips.append(address)

        if len(ips) > self.max_ips:
            return Return.err(
                Error("TOO_MANY_IPS", f"At most {self.max_ips} IP addresses are allowed.")
            )

        async with self.uow:
            removed = await self.uow.ips.delete_all_by_user_id(user_id)

            for address in ips:
                await self.uow.ips.create(IPGrant(user_id=user_id, ip_address=address))
                await self.uow.saved_ips.create(SavedIP(user_id=user_id, ip_address=address))

            await self.uow.commit()

            return Return.ok(UpdateIPsResponse(ips=ips, removed_count=removed))

"""
Requester address resolution.

The forwarded header is trusted as-is: this service is meant to sit behind a
reverse proxy that overwrites it. Exposed directly, anyone could spoof an
authorized address.
"""

from fastapi import Request

from config import ApplicationConfig


def resolve_client_ip(request: Request) -> str:
    forwarded = request.headers.get(ApplicationConfig.FORWARDED_FOR_HEADER)
    if forwarded:
        # "client, proxy1, proxy2"
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client is not None and request.client.host:
        return request.client.host
    return ""

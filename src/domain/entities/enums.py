"""
Authcord Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class LinkMethod(str, Enum):
    """How a shortlink delivers the caller to its destination"""

    GET = "GET"
    POST = "POST"


class TrustMethod(str, Enum):
    """Trust tier that authorized a redirect, in evaluation order"""

    USER = "USER"
    SESSION = "SESSION"
    IP = "IP"


class LinkbustTechnique(str, Enum):
    """Destination obfuscation techniques, declared in application order"""

    RANDOM = "RANDOM"
    CACHEBUST = "CACHEBUST"
    CAPITALS = "CAPITALS"

"""
Authcord Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import LinkMethod, LinkbustTechnique, TrustMethod

# Export all entities
from .user import User
from .session import Session
from .saved_session import SavedSession
from .ip_grant import IPGrant
from .saved_ip import SavedIP
from .shortlink import Shortlink
from .outbound_log import OutboundLog
from .dynamic_url_log import DynamicURLLog

__all__ = [
    # Enums
    "LinkMethod",
    "LinkbustTechnique",
    "TrustMethod",
    # Entities
    "User",
    "Session",
    "SavedSession",
    "IPGrant",
    "SavedIP",
    "Shortlink",
    "OutboundLog",
    "DynamicURLLog",
]

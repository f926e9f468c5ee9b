"""
Dashboard Use Cases
"""

from .load_dashboard_use_case import LoadDashboardUseCase
from .update_ips_use_case import UpdateIPsUseCase
from .dtos import DashboardView, SessionInfo, UpdateIPsResponse

__all__ = [
    "LoadDashboardUseCase",
    "UpdateIPsUseCase",
    "DashboardView",
    "SessionInfo",
    "UpdateIPsResponse",
]

"""
Use Cases

Organized into domain folders:
- auth/: Login and logout
- redirect/: Trust evaluation and shortlink resolution
- links/: Shortlink creation
- dashboard/: IP grants and session overview
"""

from .auth import LoginUseCase, LogoutUseCase
from .redirect import EvaluateTrustUseCase, ResolveShortlinkUseCase
from .links import CreateShortlinkUseCase
from .dashboard import LoadDashboardUseCase, UpdateIPsUseCase

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    # Redirect
    "EvaluateTrustUseCase",
    "ResolveShortlinkUseCase",
    # Links
    "CreateShortlinkUseCase",
    # Dashboard
    "LoadDashboardUseCase",
    "UpdateIPsUseCase",
]

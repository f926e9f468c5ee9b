"""
Authentication Use Cases

Login and logout for browser and device sessions.
"""

from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .dtos import LoginCommand, LoginResponse, LogoutResponse

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
]

"""
Shortlink Use Cases
"""

from .create_shortlink_use_case import CreateShortlinkUseCase
from .dtos import CreateShortlinkCommand, CreateShortlinkResponse

__all__ = [
    "CreateShortlinkUseCase",
    "CreateShortlinkCommand",
    "CreateShortlinkResponse",
]

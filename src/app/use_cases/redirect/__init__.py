"""
Redirect Use Cases

Trust evaluation and shortlink resolution for /l/<code>.
"""

from .evaluate_trust_use_case import EvaluateTrustUseCase
from .resolve_shortlink_use_case import ResolveShortlinkUseCase
from .dtos import ShortlinkDelivery

__all__ = [
    "EvaluateTrustUseCase",
    "ResolveShortlinkUseCase",
    "ShortlinkDelivery",
]

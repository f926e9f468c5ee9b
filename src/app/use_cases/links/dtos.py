"""
Shortlink Use Case DTOs

Command/Response pair for link creation. The command is deliberately loose:
every field arrives as the caller sent it and the use case reports
field-specific errors.
"""

from typing import Any, Optional

from pydantic import BaseModel


class CreateShortlinkCommand(BaseModel):
    method: Optional[Any] = None
    destination: Optional[Any] = None
    data: Optional[Any] = None
    linkbust: Optional[Any] = None
    code: Optional[Any] = None


class CreateShortlinkResponse(BaseModel):
    message: str
    code: str

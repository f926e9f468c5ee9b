"""
Redirect Use Case DTOs
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ShortlinkDelivery(BaseModel):
    """Render-ready result of resolving a code"""

    method: str
    destination: str
    # Only set for POST links
    data: Optional[Dict[str, Any]] = None

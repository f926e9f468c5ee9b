"""
Dashboard Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class SessionInfo(BaseModel):
    session_id: str
    user_agent: str
    created_at: Optional[datetime] = None


class DashboardView(BaseModel):
    ips: List[str]
    sessions: List[SessionInfo]


class UpdateIPsResponse(BaseModel):
    ips: List[str]
    removed_count: int

"""
Notifications module data models.
"""

from typing import Optional
from pydantic import BaseModel


class DispatchResult(BaseModel):
    """Outcome of delivering one pass to one user."""

    user_id: int
    success: bool
    error: Optional[str] = None


class DispatchSummary(BaseModel):
    """Totals sent as the final event of a streamed batch."""

    total: int
    succeeded: int
    failed: int

"""
Passes module data models.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class PassCategory(str, Enum):
    """Pass tier. Each tier has its own per-event quota."""

    GOLD = "Gold"
    SILVER = "Silver"
    PLATINUM = "Platinum"


class PassStatus(str, Enum):
    """Pass lifecycle status. Every status occupies a quota slot."""

    ACTIVE = "Active"
    USED = "Used"
    CANCELLED = "Cancelled"


class Pass(BaseModel):
    """An issued pass. Passes are never deleted."""

    id: int
    event_id: int
    user_id: int
    category: PassCategory
    status: PassStatus = PassStatus.ACTIVE
    created_at: datetime


class UserPass(Pass):
    """A pass as listed for its holder, with the event it admits to."""

    event_name: str
    event_date: datetime


class IssuePassRequest(BaseModel):
    """Request to issue a pass to the calling user."""

    event_id: int = Field(..., gt=0)
    category: PassCategory


class UpdatePassStatusRequest(BaseModel):
    """Request to change a pass's status."""

    status: PassStatus

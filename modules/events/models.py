"""
Events module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class Event(BaseModel):
    """An event with per-category pass quotas."""

    id: int
    name: str
    description: Optional[str] = None
    date: datetime
    location: str
    organizer_id: int
    gold_limit: int = 0
    silver_limit: int = 0
    platinum_limit: int = 0
    created_at: datetime


class CreateEventRequest(BaseModel):
    """Request to create an event. The caller becomes its organizer."""

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    date: datetime
    location: str = Field(..., min_length=1, max_length=300)
    gold_limit: int = Field(default=0, ge=0)
    silver_limit: int = Field(default=0, ge=0)
    platinum_limit: int = Field(default=0, ge=0)


class UpdateEventRequest(BaseModel):
    """
    Partial event update.

    Only these four fields are mutable; quotas are fixed at creation.
    Omitted fields keep their current value.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    date: Optional[datetime] = None
    location: Optional[str] = Field(None, min_length=1, max_length=300)

"""
Rendering module data models.
"""

from pydantic import BaseModel, Field

from modules.passes.models import PassCategory


class PassDetails(BaseModel):
    """The text printed on a pass card. ``event_date`` is display text."""

    user_name: str = Field(..., min_length=1, max_length=200)
    event_name: str = Field(..., min_length=1, max_length=200)
    event_date: str = Field(..., min_length=1, max_length=100)
    category: PassCategory

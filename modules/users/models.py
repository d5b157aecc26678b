"""
Users module data models.
"""

from datetime import datetime
from pydantic import BaseModel, EmailStr, Field


class User(BaseModel):
    """A registered user. Immutable after registration."""

    id: int
    name: str
    phone: str
    email: EmailStr
    created_at: datetime

    model_config = {"frozen": True}


class RegisterUserRequest(BaseModel):
    """Request to register a new user."""

    name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=1, max_length=32, description="WhatsApp-reachable phone number")
    email: EmailStr


class RegisterUserResponse(BaseModel):
    """Registration result: the new id and a bearer token for it."""

    id: int
    token: str

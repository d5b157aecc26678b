"""
Authentication module data models.
"""

from pydantic import BaseModel, Field


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload.

    Tokens are minted by AuthService.issue_token at registration.
    """

    sub: str = Field(..., description="Subject (user id as a string)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")

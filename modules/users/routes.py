"""
User API endpoints.

Registration is public and returns the bearer token used by every
authenticated endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_service

from .interfaces import IUserService
from .models import User, RegisterUserRequest, RegisterUserResponse

router = APIRouter()


@router.post("/register", response_model=RegisterUserResponse, status_code=201)
async def register_user(
    request: RegisterUserRequest,
    service: IUserService = Depends(get_user_service),
) -> RegisterUserResponse:
    """
    Register a new user.

    Phone and email must both be unused.
    """
    return await service.register(request)


@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    service: IUserService = Depends(get_user_service),
) -> User:
    """Get a user's public profile."""
    return await service.get_user(user_id)

"""
Pass API endpoints.

All endpoints act on behalf of the bearer-token user.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_pass_service
from shared.models import AuthenticatedUser

from .interfaces import IPassService
from .models import Pass, UserPass, IssuePassRequest, UpdatePassStatusRequest

router = APIRouter()


@router.post("", response_model=Pass, status_code=201)
async def issue_pass(
    request: IssuePassRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassService = Depends(get_pass_service),
) -> Pass:
    """
    Issue a pass for an event to the caller.

    Returns 400 once the category's quota is used up.
    """
    return await service.issue_pass(request.event_id, request.category, user.id)


@router.get("", response_model=list[UserPass])
async def list_my_passes(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassService = Depends(get_pass_service),
) -> list[UserPass]:
    """List the caller's passes with event name and date."""
    return await service.list_user_passes(user.id)


@router.put("/{pass_id}/status", response_model=Pass)
async def update_pass_status(
    pass_id: int,
    request: UpdatePassStatusRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassService = Depends(get_pass_service),
) -> Pass:
    """Change the status of one of the caller's passes."""
    return await service.update_pass_status(pass_id, user.id, request.status)

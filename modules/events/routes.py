"""
Event API endpoints.

Reads are public. Create/update/delete require a bearer token, and
update/delete only succeed for the event's organizer (404 otherwise).
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_event_service, get_pass_service
from shared.models import AuthenticatedUser
from modules.passes.interfaces import IPassService
from modules.passes.models import Pass

from .interfaces import IEventService
from .models import Event, CreateEventRequest, UpdateEventRequest

router = APIRouter()


@router.post("", response_model=Event, status_code=201)
async def create_event(
    request: CreateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    """Create an event organized by the caller."""
    return await service.create_event(user.id, request)


@router.get("", response_model=list[Event])
async def list_events(
    service: IEventService = Depends(get_event_service),
) -> list[Event]:
    """List all events."""
    return await service.list_events()


@router.get("/{event_id}", response_model=Event)
async def get_event(
    event_id: int,
    service: IEventService = Depends(get_event_service),
) -> Event:
    """Get a single event."""
    return await service.get_event(event_id)


@router.put("/{event_id}", response_model=Event)
async def update_event(
    event_id: int,
    request: UpdateEventRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> Event:
    """Update name, description, date or location of an owned event."""
    return await service.update_event(event_id, user.id, request)


@router.delete("/{event_id}")
async def delete_event(
    event_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IEventService = Depends(get_event_service),
) -> dict:
    """Delete an owned event that has no passes."""
    await service.delete_event(event_id, user.id)
    return {"message": "Event deleted successfully"}


@router.get("/{event_id}/passes", response_model=list[Pass])
async def list_event_passes(
    event_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassService = Depends(get_pass_service),
) -> list[Pass]:
    """List every pass issued for an owned event."""
    return await service.list_event_passes(event_id, user.id)

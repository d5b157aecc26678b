"""
Pass delivery endpoints.

Single sends are owner-scoped; batch sends are organizer-scoped. The
batch can be streamed as server-sent events since each send is paced.
"""

from typing import AsyncIterator

from fastapi import APIRouter, Depends
from sse_starlette.sse import EventSourceResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_delivery_service
from shared.models import AuthenticatedUser

from .interfaces import IPassDeliveryService
from .models import DispatchResult, DispatchSummary

# Mounted under /api/passes
pass_router = APIRouter()

# Mounted under /api/events
event_router = APIRouter()


@pass_router.post("/{pass_id}/send", response_model=DispatchResult)
async def send_pass(
    pass_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassDeliveryService = Depends(get_delivery_service),
) -> DispatchResult:
    """Send one of the caller's passes to the caller's phone."""
    return await service.send_pass(pass_id, user.id)


@event_router.post("/{event_id}/passes/send", response_model=list[DispatchResult])
async def send_event_passes(
    event_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassDeliveryService = Depends(get_delivery_service),
) -> list[DispatchResult]:
    """
    Send every Active pass of an event to its holder.

    Organizer only. Waits for the whole batch, which takes a few seconds
    per recipient.
    """
    return await service.send_event_passes(event_id, user.id)


async def dispatch_event_generator(results: AsyncIterator[DispatchResult]):
    """
    Generate SSE events for a batch send.

    Yields one ``dispatch_result`` per recipient, then a single
    ``dispatch_completed`` with totals.
    """
    total = succeeded = 0
    async for result in results:
        total += 1
        succeeded += int(result.success)
        yield {
            "event": "dispatch_result",
            "data": result.model_dump_json(),
        }

    summary = DispatchSummary(total=total, succeeded=succeeded, failed=total - succeeded)
    yield {
        "event": "dispatch_completed",
        "data": summary.model_dump_json(),
    }


@event_router.get("/{event_id}/passes/send/stream")
async def stream_event_passes(
    event_id: int,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPassDeliveryService = Depends(get_delivery_service),
):
    """
    Send every Active pass of an event, streaming results via SSE.

    Event format:
        event: dispatch_result
        data: {"user_id": 1, "success": true, "error": null}

        event: dispatch_completed
        data: {"total": 3, "succeeded": 2, "failed": 1}
    """
    results = await service.stream_event_passes(event_id, user.id)
    return EventSourceResponse(
        dispatch_event_generator(results),
        media_type="text/event-stream",
    )

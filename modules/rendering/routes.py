"""
Pass image preview endpoint.

Renders a card straight from the request body, without touching the
store or the messaging channel.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from api.dependencies import get_pass_renderer

from .interfaces import IPassRenderer
from .models import PassDetails

router = APIRouter()


@router.post(
    "/preview",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def preview_pass(
    details: PassDetails,
    renderer: IPassRenderer = Depends(get_pass_renderer),
) -> Response:
    """Render a pass card and return it as PNG."""
    return Response(content=renderer.render(details), media_type="image/png")

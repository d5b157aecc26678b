"""
Rendering module.

Turns pass details into a PNG card with an embedded QR code.

Public API:
- IPassRenderer: Interface for pass rendering
- PassRenderer: SVG + CairoSVG implementation
- PassDetails: Text printed on the card
- RenderError
"""

from .interfaces import IPassRenderer
from .models import PassDetails
from .exceptions import RenderError
from .renderer import (
    PassRenderer,
    escape_markup,
    build_qr_payload,
    format_event_date,
)

__all__ = [
    # Interface
    "IPassRenderer",
    # Implementation
    "PassRenderer",
    "escape_markup",
    "build_qr_payload",
    "format_event_date",
    # Models
    "PassDetails",
    # Exceptions
    "RenderError",
]

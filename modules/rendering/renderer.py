"""
Pass card rendering.

A card is an 800px wide SVG (gradient header, three detail rows, QR code
with a short ticket reference) rasterised to PNG. Every interpolated text
field is XML-escaped; the QR payload is embedded as a PNG data URI and
carries the raw, unescaped values.
"""

import base64
import logging
import uuid
from contextlib import contextmanager
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Callable, Iterator, Optional
from xml.sax.saxutils import escape

import qrcode

from .interfaces import IPassRenderer
from .models import PassDetails
from .exceptions import RenderError

logger = logging.getLogger(__name__)

# Layout
WIDTH = 800
HEADER_HEIGHT = 100
QR_SIZE = 200
PADDING = 40
ICON_SIZE = 24
CONTENT_START = HEADER_HEIGHT + PADDING
LEFT_COLUMN_WIDTH = WIDTH - QR_SIZE - 3 * PADDING
HEIGHT = HEADER_HEIGHT + 4 * PADDING + 150

_QUOTE_ENTITIES = {"'": "&apos;", '"': "&quot;"}

Rasterizer = Callable[[str], bytes]


def escape_markup(text: str) -> str:
    """Escape the five XML metacharacters (``&`` first)."""
    return escape(text, _QUOTE_ENTITIES)


def build_qr_payload(user_name: str, event_name: str, event_date: str) -> str:
    return f"EVENT:{event_name}|USER:{user_name}|DATE:{event_date}"


def render_qr_png(payload: str) -> bytes:
    """Encode payload as a QR code and return it as PNG bytes."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def new_ticket_ref() -> str:
    """First 8 hex characters of a fresh uuid4, upper-cased. Display only."""
    return uuid.uuid4().hex[:8].upper()


def format_event_date(value: datetime) -> str:
    """Display form of an event date, e.g. ``Wed Dec 31 2025``."""
    return value.strftime("%a %b %d %Y")


def build_svg(details: PassDetails, ticket_ref: str, qr_png: bytes) -> str:
    """Lay out the pass card as SVG markup."""
    event_name = escape_markup(details.event_name)
    category = escape_markup(details.category.value)
    user_name = escape_markup(details.user_name)
    event_date = escape_markup(details.event_date)
    ref = escape_markup(ticket_ref)
    qr_data = base64.b64encode(qr_png).decode("ascii")
    label_x = ICON_SIZE + 15
    divider_x = LEFT_COLUMN_WIDTH + PADDING

    return f"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg width="{WIDTH}" height="{HEIGHT}" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
  <defs>
    <linearGradient id="headerGradient" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" style="stop-color:#7C3AED;stop-opacity:1" />
      <stop offset="100%" style="stop-color:#9333EA;stop-opacity:1" />
    </linearGradient>
  </defs>
  <rect width="{WIDTH}" height="{HEADER_HEIGHT}" fill="url(#headerGradient)" />
  <text x="{PADDING}" y="{HEADER_HEIGHT - 30}" font-family="Arial" font-size="32" fill="white" font-weight="bold">{event_name}</text>
  <text x="{PADDING}" y="{HEADER_HEIGHT - 5}" font-family="Arial" font-size="20" fill="white" fill-opacity="0.9">{category} Pass</text>
  <rect x="0" y="{HEADER_HEIGHT}" width="{WIDTH}" height="{HEIGHT - HEADER_HEIGHT}" fill="#ffffff" />
  <g transform="translate({PADDING}, {CONTENT_START})">
    <rect x="0" y="0" width="{ICON_SIZE}" height="{ICON_SIZE}" rx="4" fill="#6B7280" />
    <text x="{label_x}" y="18" font-family="Arial" font-size="16" fill="#6B7280">Date &amp; Time</text>
    <text x="{label_x}" y="45" font-family="Arial" font-size="20" fill="#111827">{event_date}</text>
    <circle cx="12" cy="{PADDING + 50}" r="12" fill="#6B7280" />
    <text x="{label_x}" y="{PADDING + 60}" font-family="Arial" font-size="16" fill="#6B7280">Attendee</text>
    <text x="{label_x}" y="{PADDING + 87}" font-family="Arial" font-size="20" fill="#111827">{user_name}</text>
    <rect x="0" y="{2 * PADDING + 70}" width="{ICON_SIZE}" height="{ICON_SIZE}" rx="4" fill="#6B7280" />
    <text x="{label_x}" y="{2 * PADDING + 90}" font-family="Arial" font-size="16" fill="#6B7280">Pass Category</text>
    <text x="{label_x}" y="{2 * PADDING + 117}" font-family="Arial" font-size="20" fill="#111827">{category}</text>
  </g>
  <line x1="{divider_x}" y1="{CONTENT_START}" x2="{divider_x}" y2="{HEIGHT - PADDING}" stroke="#E5E7EB" stroke-width="2" stroke-dasharray="8,8" />
  <g transform="translate({WIDTH - QR_SIZE - PADDING}, {CONTENT_START})">
    <image xlink:href="data:image/png;base64,{qr_data}" width="{QR_SIZE}" height="{QR_SIZE}" />
    <text x="{QR_SIZE // 2}" y="{QR_SIZE + 30}" font-family="Arial" font-size="16" fill="#6B7280" text-anchor="middle">Ticket #{ref}</text>
  </g>
</svg>
"""


def svg_to_png(svg: str) -> bytes:
    """Rasterise SVG markup with CairoSVG."""
    try:
        # Needs the system cairo library, so import on first use
        import cairosvg
    except (ImportError, OSError) as e:
        raise RenderError("SVG rasteriser is not available") from e
    return cairosvg.svg2png(bytestring=svg.encode("utf-8"))


class PassRenderer(IPassRenderer):
    """
    Renders pass cards to PNG.

    Args:
        temp_dir: Directory for render_to_file() output; created on demand.
        rasterize: SVG-to-PNG function. Defaults to svg_to_png().
    """

    def __init__(self, temp_dir: Path, rasterize: Optional[Rasterizer] = None):
        self._temp_dir = Path(temp_dir)
        self._rasterize = rasterize or svg_to_png

    def build(self, details: PassDetails) -> str:
        """Build the SVG for a card with a fresh ticket reference."""
        payload = build_qr_payload(details.user_name, details.event_name, details.event_date)
        return build_svg(details, new_ticket_ref(), render_qr_png(payload))

    def render(self, details: PassDetails) -> bytes:
        return self._rasterize(self.build(details))

    @contextmanager
    def render_to_file(self, details: PassDetails) -> Iterator[Path]:
        png = self.render(details)
        self._temp_dir.mkdir(parents=True, exist_ok=True)
        path = self._temp_dir / f"{uuid.uuid4()}.png"
        try:
            path.write_bytes(png)
            logger.debug("Wrote pass image %s", path)
            yield path
        finally:
            path.unlink(missing_ok=True)

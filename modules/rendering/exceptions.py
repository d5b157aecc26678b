"""
Rendering module exceptions.
"""

from shared.exceptions import PasshubError


class RenderError(PasshubError):
    """Raised when a pass image cannot be produced."""

    def __init__(self, message: str = "Pass image could not be rendered"):
        super().__init__(message, code="RENDER_ERROR")

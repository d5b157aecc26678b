"""
Rendering module interface.
"""

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Protocol, runtime_checkable

from .models import PassDetails


@runtime_checkable
class IPassRenderer(Protocol):
    """Interface for turning pass details into a PNG card."""

    def render(self, details: PassDetails) -> bytes:
        """Render the card and return PNG bytes."""
        ...

    def render_to_file(self, details: PassDetails) -> AbstractContextManager[Path]:
        """
        Render the card into a uniquely named temp file.

        The file exists only inside the ``with`` block and is removed on
        exit, including when the block raises.
        """
        ...

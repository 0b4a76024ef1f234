# hardware/display/display_interface.py
"""
IGridDisplay Protocol
=====================
Presentation sink for completed 13×9 frames.
Minimal contract for any physical or virtual display.
"""

from __future__ import annotations
from typing import Protocol

from sigil.models.frame import GridFrame


class IGridDisplay(Protocol):
    """
    Protocol defining the presentation boundary.

    All implementations must provide:
    - present: push one complete frame and show it (called once per frame)
    - clear: turn every pixel off
    """

    def present(self, frame: GridFrame) -> None:
        """Show a fully assembled frame. Never called with a partial grid."""
        ...

    def clear(self) -> None:
        """Turn off all pixels."""
        ...

# hardware/reader/reader_interface.py
"""
IIdentifierSource Protocol
==========================
Acquisition boundary: delivers one ReadResult per poll.
"""

from __future__ import annotations
from typing import Protocol

from sigil.models.read_result import ReadResult


class IIdentifierSource(Protocol):
    """
    Protocol defining the identifier acquisition boundary.

    All implementations must provide:
    - read: poll once (TAG with bytes, NO_TAG, or READ_FAILURE)
    - close: release the underlying device
    """

    def read(self) -> ReadResult:
        """Poll the reader once. Must not raise for reader-side errors."""
        ...

    def close(self) -> None:
        ...

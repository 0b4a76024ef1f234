"""
ReadResult - what the identifier source reports on each poll
"""

from dataclasses import dataclass

from sigil.models.enums import ReadStatus
from sigil.models.identifier import Identifier


@dataclass(frozen=True)
class ReadResult:
    """
    One poll outcome.

    status TAG carries data; NO_TAG and READ_FAILURE carry nothing.
    """

    status: ReadStatus
    data: bytes = b""

    @classmethod
    def tag(cls, data: bytes) -> 'ReadResult':
        return cls(ReadStatus.TAG, bytes(data))

    @classmethod
    def no_tag(cls) -> 'ReadResult':
        return cls(ReadStatus.NO_TAG)

    @classmethod
    def failure(cls) -> 'ReadResult':
        return cls(ReadStatus.READ_FAILURE)

    @property
    def valid(self) -> bool:
        return self.status is ReadStatus.TAG and len(self.data) > 0

    def to_identifier(self) -> Identifier:
        return Identifier.from_bytes(self.data)

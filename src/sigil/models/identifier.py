"""
Identifier model - opaque tag UID bytes

The engine treats the identifier purely as entropy: bytes 0-2 seed the
palette, bytes 3-6 seed geometry, shape and sparsity. Anything past byte 6
is carried but ignored.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from sigil.models.errors import IdentifierError

MAX_IDENTIFIER_LENGTH = 10   # Longest UID a reader can deliver
MIN_PATTERN_BYTES = 7        # Bytes consumed by palette + geometry


@dataclass(frozen=True)
class Identifier:
    """
    Immutable identifier byte sequence (0-10 bytes)

    Example:
        ident = Identifier.from_hex("04:1A:2B:3C:05:10:07")
        ident.is_usable   # True
        ident[3]          # 0x3C
    """

    data: bytes = b""

    def __post_init__(self):
        if not isinstance(self.data, (bytes, bytearray)):
            raise IdentifierError(f"Identifier data must be bytes, got {type(self.data).__name__}")
        if len(self.data) > MAX_IDENTIFIER_LENGTH:
            raise IdentifierError(
                f"Identifier has {len(self.data)} bytes, maximum is {MAX_IDENTIFIER_LENGTH}"
            )
        # Copy so later mutation of a caller's bytearray can't leak in
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, Iterable[int]]) -> 'Identifier':
        try:
            return cls(bytes(data))
        except ValueError as ex:
            raise IdentifierError(f"Invalid identifier bytes: {ex}") from ex

    @classmethod
    def from_hex(cls, text: str) -> 'Identifier':
        """
        Parse "04:1A:2B", "04 1A 2B", "04-1a-2b" or "041A2B"
        """
        cleaned = text.strip()
        for sep in (":", " ", "-"):
            cleaned = cleaned.replace(sep, "")
        try:
            return cls(bytes.fromhex(cleaned))
        except ValueError as ex:
            raise IdentifierError(f"Invalid identifier hex '{text}': {ex}") from ex

    @property
    def is_usable(self) -> bool:
        """True when long enough to derive palette and geometry"""
        return len(self.data) >= MIN_PATTERN_BYTES

    def hex(self) -> str:
        return ":".join(f"{b:02X}" for b in self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __str__(self) -> str:
        return f"Identifier({self.hex() or 'empty'})"

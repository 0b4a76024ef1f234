"""
Typed failures raised at the engine's API boundary
"""


class SigilError(Exception):
    """Base class for all sigil errors"""


class IdentifierError(SigilError, ValueError):
    """Identifier bytes are malformed (bad hex, too long, out-of-range values)"""


class InsufficientIdentifierError(IdentifierError):
    """Identifier is too short to derive a pattern from"""

    def __init__(self, length: int, required: int):
        super().__init__(f"Identifier has {length} bytes, pattern needs at least {required}")
        self.length = length
        self.required = required


class ConfigError(SigilError):
    """Configuration file could not be parsed into a valid AppConfig"""

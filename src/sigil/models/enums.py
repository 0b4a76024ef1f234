"""
Enums for the sigil pattern engine and its runtime
"""

from enum import Enum, auto


class ShapeMode(Enum):
    """
    Base distance metric used for the quadrant distance field.

    Selected by identifier byte 3 modulo 3, so the order is significant.
    """
    MANHATTAN = 0   # dx + dy
    EUCLIDEAN = 1   # sqrt(dx² + dy²)
    CHEBYSHEV = 2   # max(dx, dy)


class EngineState(Enum):
    """
    Engine-level state machine

    NO_IDENTIFIER: nothing usable to draw (blank or error marker)
    GEOMETRY_STALE: identifier arrived, geometry must be recomputed before render
    GEOMETRY_FRESH: geometry cache matches the active identifier
    """
    NO_IDENTIFIER = auto()
    GEOMETRY_STALE = auto()
    GEOMETRY_FRESH = auto()


class FrameKind(Enum):
    """What a committed frame shows"""
    BLANK = auto()
    PATTERN = auto()
    ERROR = auto()


class ReadStatus(Enum):
    """Outcome of one identifier source poll"""
    TAG = auto()           # Identifier bytes delivered
    NO_TAG = auto()        # Nothing in the field (silently blank)
    READ_FAILURE = auto()  # Reader reported an error (error marker)


class DisplayType(Enum):
    """Presentation sink implementations"""
    VIRTUAL = auto()
    TERMINAL = auto()
    WS281X = auto()


class ReaderType(Enum):
    """Identifier source implementations"""
    SCRIPTED = auto()
    PN532 = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()         # Configuration loading, validation
    HARDWARE = auto()       # Display drivers, GPIO
    READER = auto()         # Identifier acquisition
    STATE = auto()          # Engine state machine transitions
    COLOR = auto()          # Palette derivation
    GEOMETRY = auto()       # Distance field precompute
    RENDER_ENGINE = auto()  # Frame assembly and render loop
    SYSTEM = auto()         # Startup, shutdown, errors

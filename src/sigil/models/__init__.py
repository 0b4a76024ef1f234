"""
Models package - Data models for the sigil pattern engine
"""

from .enums import (
    ShapeMode, EngineState, FrameKind, ReadStatus, DisplayType, ReaderType, LogLevel, LogCategory
)
from .errors import SigilError, IdentifierError, InsufficientIdentifierError, ConfigError
from .color import Color
from .identifier import Identifier, MAX_IDENTIFIER_LENGTH, MIN_PATTERN_BYTES
from .read_result import ReadResult
from .frame import GridFrame, GRID_WIDTH, GRID_HEIGHT, CENTER_X, CENTER_Y
from .geometry import GeometryCache, QUADRANT_WIDTH, QUADRANT_HEIGHT

__all__ = [
    'ShapeMode',
    'EngineState',
    'FrameKind',
    'ReadStatus',
    'DisplayType',
    'ReaderType',
    'LogLevel',
    'LogCategory',
    'SigilError',
    'IdentifierError',
    'InsufficientIdentifierError',
    'ConfigError',
    'Color',
    'Identifier',
    'MAX_IDENTIFIER_LENGTH',
    'MIN_PATTERN_BYTES',
    'ReadResult',
    'GridFrame',
    'GRID_WIDTH',
    'GRID_HEIGHT',
    'CENTER_X',
    'CENTER_Y',
    'GeometryCache',
    'QUADRANT_WIDTH',
    'QUADRANT_HEIGHT',
]

"""
Engine package - identifier → symmetric animated pattern
"""

from .palette import generate_palette, palette_hues, PALETTE_SIZE
from .geometry import precompute_geometry
from .animator import render_pattern, ring_index_at, is_active, SPEED, RING_PERIOD, RING_CYCLE_MS
from .frame_assembler import FrameAssembler
from .error_pattern import render_error_frame, ERROR_COLOR
from .pattern_engine import PatternEngine

__all__ = [
    'generate_palette',
    'palette_hues',
    'PALETTE_SIZE',
    'precompute_geometry',
    'render_pattern',
    'ring_index_at',
    'is_active',
    'SPEED',
    'RING_PERIOD',
    'RING_CYCLE_MS',
    'FrameAssembler',
    'render_error_frame',
    'ERROR_COLOR',
    'PatternEngine',
]

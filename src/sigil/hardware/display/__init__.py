from .display_interface import IGridDisplay
from .virtual_display import VirtualGridDisplay
from .terminal_display import TerminalGridDisplay
from .grid_pixel_mapper import GridPixelMapper

__all__ = [
    'IGridDisplay',
    'VirtualGridDisplay',
    'TerminalGridDisplay',
    'GridPixelMapper',
]

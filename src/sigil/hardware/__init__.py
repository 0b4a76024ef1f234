"""
Hardware package - presentation sinks and identifier sources
"""

from .factory import create_grid_display, create_identifier_source

__all__ = [
    'create_grid_display',
    'create_identifier_source',
]

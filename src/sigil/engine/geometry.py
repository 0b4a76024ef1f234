"""
Geometry precompute

Builds the static distance field for one quadrant of the grid from
identifier bytes 3-6. Runs once per identifier arrival; the animator only
reads the result.

Identifier byte layout:
    3: shape     - value % 3: metric, bits 4-5: ring size
    4: style     - bits 0-1: twist, bits 2-3: pinch/bulge, bits 4-5: jaggedness
    5: sparsity  - activation threshold (higher = sparser)
    6: seed      - palette offset and activation hash seed
"""

import math
from typing import List

from sigil.models.enums import ShapeMode, LogCategory
from sigil.models.errors import InsufficientIdentifierError
from sigil.models.frame import CENTER_X, CENTER_Y
from sigil.models.geometry import GeometryCache, QUADRANT_WIDTH, QUADRANT_HEIGHT
from sigil.models.identifier import Identifier, MIN_PATTERN_BYTES
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.GEOMETRY)

TWIST_STEP = 0.05
PINCH_STEP = 0.2
JAG_STEP = 0.15
RING_SIZE_STEP = 0.15


def base_distance(mode: ShapeMode, dx: int, dy: int) -> float:
    if mode is ShapeMode.MANHATTAN:
        return float(dx + dy)
    if mode is ShapeMode.EUCLIDEAN:
        return math.sqrt(dx * dx + dy * dy)
    return float(max(dx, dy))


def twist_amount(style_byte: int) -> float:
    return (style_byte & 0x3) * TWIST_STEP


def pinch_amount(style_byte: int) -> float:
    # -0.3, -0.1, 0.1, 0.3: never zero
    return (((style_byte >> 2) & 0x3) - 1.5) * PINCH_STEP


def jag_amount(style_byte: int) -> float:
    return ((style_byte >> 4) & 0x3) * JAG_STEP


def ring_size_modifier(shape_byte: int) -> float:
    return 1.0 + ((shape_byte >> 4) & 0x3) * RING_SIZE_STEP


def cell_distance(x: int, y: int, mode: ShapeMode, style_byte: int) -> float:
    """Raw distance of one quadrant cell; may be negative, never clamped here"""
    dx = abs(x - CENTER_X)
    dy = abs(y - CENTER_Y)
    d = base_distance(mode, dx, dy)

    twist = twist_amount(style_byte)
    if twist > 0 and dx + dy > 0:
        d += twist * math.atan2(dy, dx) * 2

    pinch = pinch_amount(style_byte)
    if pinch != 0 and dx + dy > 0:
        diag = 2.0 * dx * dy / (dx * dx + dy * dy)
        d -= pinch * diag * d

    jag = jag_amount(style_byte)
    if jag > 0:
        hash8 = (x * 13 + y * 29) % 256
        d += math.sin(hash8 * math.pi / 7) * jag

    return d


def precompute_geometry(identifier: Identifier) -> GeometryCache:
    """
    Build the GeometryCache for an identifier.

    The full table is built before the cache object exists, so a returned
    cache is always complete and clean.

    Raises:
        InsufficientIdentifierError: identifier shorter than 7 bytes
    """
    if len(identifier) < MIN_PATTERN_BYTES:
        raise InsufficientIdentifierError(len(identifier), MIN_PATTERN_BYTES)

    shape_byte = identifier[3]
    style_byte = identifier[4]
    sparsity_byte = identifier[5]
    seed_byte = identifier[6]
    mode = ShapeMode(shape_byte % 3)

    rows: List[tuple] = []
    for y in range(QUADRANT_HEIGHT):
        row = []
        for x in range(QUADRANT_WIDTH):
            if x == CENTER_X and y == CENTER_Y:
                row.append(0.0)
            else:
                row.append(cell_distance(x, y, mode, style_byte))
        rows.append(tuple(row))

    cache = GeometryCache(
        distances=tuple(rows),
        shape_mode=mode,
        ring_size_modifier=ring_size_modifier(shape_byte),
        shape_byte=shape_byte,
        style_byte=style_byte,
        sparsity_byte=sparsity_byte,
        seed_byte=seed_byte,
        dirty=False,
    )

    log.debug(
        "Geometry precomputed",
        shape=mode.name,
        ring_size=f"{cache.ring_size_modifier:.2f}",
        twist=f"{twist_amount(style_byte):.2f}",
        pinch=f"{pinch_amount(style_byte):.2f}",
        jag=f"{jag_amount(style_byte):.2f}",
        sparsity=sparsity_byte,
    )
    return cache

"""
PatternEngine - owned state for identifier → animated frame.

State machine:
    NO_IDENTIFIER  --set_identifier()-->   GEOMETRY_STALE
    GEOMETRY_STALE --render() precompute--> GEOMETRY_FRESH
    GEOMETRY_FRESH --set_identifier()-->   GEOMETRY_STALE   (even the same uid)
    any            --clear_identifier()--> NO_IDENTIFIER   (blank frames)
    any            --report_read_failure()--> NO_IDENTIFIER (error marker frames)

Geometry and palette are only rebuilt inside render(), right before they are
used, so a frame never mixes an old cache with a new identifier. All calls
must come from one task; the cache/dirty pair is not independently atomic.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Union

from sigil.engine.animator import render_pattern
from sigil.engine.error_pattern import ERROR_COLOR, render_error_frame
from sigil.engine.frame_assembler import FrameAssembler
from sigil.engine.geometry import precompute_geometry
from sigil.engine.palette import generate_palette, palette_hues
from sigil.models.color import Color
from sigil.models.enums import EngineState, FrameKind, LogCategory, ReadStatus
from sigil.models.frame import GridFrame
from sigil.models.geometry import GeometryCache
from sigil.models.identifier import Identifier
from sigil.models.read_result import ReadResult
from sigil.utils.colors import hue_to_name
from sigil.utils.logger import get_logger

log = get_logger().for_category(LogCategory.STATE)

PrecomputeFn = Callable[[Identifier], GeometryCache]
PaletteFn = Callable[[int, int, int], List[Color]]


class PatternEngine:
    """
    Single owner of identifier, palette, geometry cache and output buffer.

    Example:
        engine = PatternEngine()
        engine.set_identifier(Identifier.from_hex("04:1A:2B:3C:05:10:07"))
        frame = engine.render(t_ms=0)
    """

    def __init__(
        self,
        assembler: Optional[FrameAssembler] = None,
        precompute: PrecomputeFn = precompute_geometry,
        palette_fn: PaletteFn = generate_palette,
        error_color: Color = ERROR_COLOR,
    ):
        self.assembler = assembler or FrameAssembler()
        self._precompute = precompute
        self._palette_fn = palette_fn
        self.error_color = error_color

        self.identifier: Optional[Identifier] = None
        self.palette: Sequence[Color] = ()
        self.geometry: Optional[GeometryCache] = None
        self.state = EngineState.NO_IDENTIFIER
        self.error_active = False
        self.precompute_count = 0

    # ------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------

    @property
    def dirty(self) -> bool:
        return self.geometry is None or self.geometry.dirty

    def set_identifier(self, identifier: Union[Identifier, bytes]) -> None:
        """
        Accept a newly read identifier.

        Always marks geometry stale, even for the identifier already active.
        An identifier too short for a pattern resets to NO_IDENTIFIER.
        """
        if not isinstance(identifier, Identifier):
            identifier = Identifier.from_bytes(identifier)

        if not identifier.is_usable:
            log.debug("Identifier too short for a pattern", uid=identifier.hex(), length=len(identifier))
            self.clear_identifier()
            return

        changed = identifier != self.identifier
        self.identifier = identifier
        if self.geometry is not None:
            self.geometry.invalidate()
        self.error_active = False
        self._transition(EngineState.GEOMETRY_STALE, quiet=not changed, uid=identifier.hex())

    def clear_identifier(self) -> None:
        """Drop the active identifier; frames go blank"""
        self.identifier = None
        if self.geometry is not None:
            self.geometry.invalidate()
        self.error_active = False
        self._transition(EngineState.NO_IDENTIFIER)

    def report_read_failure(self) -> None:
        """Drop the active identifier and show the error marker until the next tag"""
        was_error = self.error_active
        self.clear_identifier()
        self.error_active = True
        if not was_error:
            log.warn("Identifier read failed, showing error marker")

    def apply_read(self, result: ReadResult) -> None:
        """Route one identifier source poll into the state machine"""
        if result.status is ReadStatus.READ_FAILURE:
            self.report_read_failure()
        elif result.valid:
            self.set_identifier(result.to_identifier())
        else:
            self.clear_identifier()

    def _transition(self, new_state: EngineState, quiet: bool = False, **details) -> None:
        old_state = self.state
        self.state = new_state
        if old_state is new_state:
            log.debug("State unchanged", state=new_state.name, **details)
            return
        if quiet:
            log.debug("State transition", state=f"{old_state.name} → {new_state.name}", **details)
        else:
            log.info("State transition", state=f"{old_state.name} → {new_state.name}", **details)

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------

    def _refresh_geometry(self) -> None:
        """Rebuild palette + geometry for the active identifier (the only write path)"""
        if self.identifier is None:
            raise RuntimeError("Geometry refresh without an active identifier")
        ident = self.identifier

        self.palette = self._palette_fn(ident[0], ident[1], ident[2])
        self.geometry = self._precompute(ident)
        self.precompute_count += 1
        self._transition(EngineState.GEOMETRY_FRESH, quiet=True, uid=ident.hex())

        log.debug(
            "Palette derived",
            category=LogCategory.COLOR,
            hues=", ".join(f"{h}° ({hue_to_name(h)})" for h in palette_hues(ident[0], ident[1], ident[2])),
            colors=", ".join(str(c) for c in self.palette),
        )

    # ------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------

    def render(self, t_ms: int) -> GridFrame:
        """
        Produce exactly one committed frame for time t_ms.

        Returns:
            ERROR frame after a read failure, PATTERN frame for a usable
            identifier, BLANK frame otherwise.
        """
        if self.error_active:
            return render_error_frame(self.assembler, t_ms, self.error_color)

        if self.state is EngineState.GEOMETRY_STALE:
            self._refresh_geometry()

        self.assembler.begin(t_ms)
        if self.state is EngineState.GEOMETRY_FRESH and self.geometry is not None and not self.geometry.dirty:
            render_pattern(self.geometry, self.palette, t_ms, self.assembler)
            return self.assembler.commit(FrameKind.PATTERN)
        return self.assembler.commit(FrameKind.BLANK)

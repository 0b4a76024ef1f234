"""
Tests for the pattern animator: ring indices, activation, mirroring.
"""

import pytest

from sigil.engine.animator import (
    positive_mod, ring_index_at, activation_hash, is_active, render_pattern, RING_CYCLE_MS,
)
from sigil.engine.geometry import precompute_geometry
from sigil.engine.palette import generate_palette
from sigil.models.enums import FrameKind
from sigil.models.geometry import QUADRANT_WIDTH, QUADRANT_HEIGHT
from sigil.models.identifier import Identifier


class TestPositiveMod:

    @pytest.mark.parametrize("value, expected", [
        (9.0, 1.0), (-0.5, 3.5), (-4.0, 0.0), (0.0, 0.0), (-7.25, 0.75),
    ])
    def test_lands_in_period(self, value, expected):
        assert positive_mod(value, 4.0) == pytest.approx(expected)

    def test_never_returns_period(self):
        assert 0.0 <= positive_mod(-1e-17, 4.0) < 4.0


class TestRingIndex:

    def test_reference_rings_at_t0(self, reference_geometry):
        g = reference_geometry
        assert ring_index_at(g, 6, 3, 0) == 0
        assert ring_index_at(g, 5, 4, 0) == 0
        assert ring_index_at(g, 4, 4, 0) == 1
        assert ring_index_at(g, 3, 4, 0) == 2
        assert ring_index_at(g, 0, 0, 0) == 3

    def test_rings_move_with_time(self, reference_geometry):
        # (3,4): d / 1.45 ≈ 2.069
        assert ring_index_at(reference_geometry, 3, 4, 1000) == 1
        assert ring_index_at(reference_geometry, 3, 4, 3000) == 3

    def test_cycle_is_4000_ms(self):
        assert RING_CYCLE_MS == 4000

    @pytest.mark.parametrize("t_ms", [0, 250, 1000, 2750, 10_000])
    def test_periodic(self, sample_identifiers, t_ms):
        for ident in sample_identifiers:
            g = precompute_geometry(ident)
            for y in range(QUADRANT_HEIGHT):
                for x in range(QUADRANT_WIDTH):
                    assert ring_index_at(g, x, y, t_ms) == ring_index_at(g, x, y, t_ms + RING_CYCLE_MS)

    def test_always_in_range(self, sample_identifiers):
        for ident in sample_identifiers:
            g = precompute_geometry(ident)
            for t_ms in range(0, 4000, 333):
                for y in range(QUADRANT_HEIGHT):
                    for x in range(QUADRANT_WIDTH):
                        assert 0 <= ring_index_at(g, x, y, t_ms) <= 3


class TestActivation:

    def test_reference_hash(self, reference_geometry):
        # ((7*31 + 4)*31 + 4) = 6855; (6855 ^ 5) * 31 + 1 = 212351
        assert activation_hash(reference_geometry, 4, 4, 1) == 212351

    def test_reference_decisions(self, reference_geometry):
        assert is_active(reference_geometry, 4, 4, 1) is True    # 127 > 16
        assert is_active(reference_geometry, 5, 3, 1) is True    # 33 > 16
        assert is_active(reference_geometry, 0, 0, 3) is False   # 1 <= 16

    def test_hash_wraps_at_32_bits(self):
        g = precompute_geometry(Identifier(bytes([0, 0, 0, 0, 0xFF, 0, 0xFF])))
        assert 0 <= activation_hash(g, 6, 4, 3) <= 0xFFFFFFFF

    def test_max_sparsity_draws_only_center(self, assembler):
        ident = Identifier(bytes([0x04, 0x1A, 0x2B, 0x3C, 0x05, 0xFF, 0x07]))
        g = precompute_geometry(ident)
        assembler.begin(0)
        render_pattern(g, generate_palette(0x04, 0x1A, 0x2B), 1234, assembler)
        frame = assembler.commit(FrameKind.PATTERN)
        assert frame.count_lit() == 1
        assert not frame.get(6, 4).is_black()


class TestRenderPattern:

    def test_writes_mirrored_quadrants(self, reference_geometry, assembler):
        palette = generate_palette(0x04, 0x1A, 0x2B)
        assembler.begin(0)
        render_pattern(reference_geometry, palette, 0, assembler)
        frame = assembler.commit(FrameKind.PATTERN)

        assert frame.is_symmetric()
        assert frame.get(5, 3) == frame.get(7, 3) == frame.get(5, 5) == frame.get(7, 5) == palette[3]

    def test_center_uses_seed_color(self, reference_geometry, assembler):
        palette = generate_palette(0x04, 0x1A, 0x2B)
        assembler.begin(0)
        render_pattern(reference_geometry, palette, 0, assembler)
        frame = assembler.commit(FrameKind.PATTERN)
        assert frame.get(6, 4) == palette[7 % 5]

    def test_inner_ring_skipped(self, reference_geometry, assembler):
        palette = generate_palette(0x04, 0x1A, 0x2B)
        assembler.begin(0)
        render_pattern(reference_geometry, palette, 0, assembler)
        frame = assembler.commit(FrameKind.PATTERN)
        for x, y in [(6, 3), (5, 4), (7, 4), (6, 5)]:
            assert frame.get(x, y).is_black()

    def test_rejects_stale_geometry(self, reference_geometry, assembler):
        reference_geometry.invalidate()
        assembler.begin(0)
        with pytest.raises(RuntimeError):
            render_pattern(reference_geometry, generate_palette(1, 2, 3), 0, assembler)

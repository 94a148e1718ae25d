"""
Tests for brightness mapping and the glyph ramp.

Covers:
- Luma of black, white and primaries
- Index bounds for every ramp length
- Brightness adjustments at the dark end of the ramp
- Whole-frame conversion
"""

import numpy as np
import pytest

from ascii_webcam.converter import CharacterSets, GlyphRamp, glyph_rows, luma
from conftest import WEBCAM_RAMP, solid_image


class TestLuma:
    def test_white_is_one(self):
        assert luma(255, 255, 255) == 1.0

    def test_black_is_zero(self):
        assert luma(0, 0, 0) == 0.0

    def test_linear_weights(self):
        assert luma(255, 0, 0) == pytest.approx(0.299)
        assert luma(0, 255, 0) == pytest.approx(0.587)
        assert luma(0, 0, 255) == pytest.approx(0.114)


class TestGlyphFor:
    def test_white_maps_to_brightest(self, ramp):
        assert ramp.glyph_for(255, 255, 255) == "@"

    def test_black_maps_to_blank(self, ramp):
        assert ramp.glyph_for(0, 0, 0) == " "

    def test_matches_floor_of_scaled_luma(self, ramp):
        for rgb in [(10, 200, 30), (128, 128, 128), (250, 1, 90), (0, 0, 255)]:
            expected = int((len(ramp) - 1) * luma(*rgb))
            assert ramp.glyph_for(*rgb) == WEBCAM_RAMP[expected]

    @pytest.mark.parametrize("length", [1, 2, 15, 64])
    def test_index_grid_in_range_over_full_channel_range(self, length):
        ramp = GlyphRamp("x" * length)
        levels = np.arange(256)
        zeros = np.zeros(256, dtype=np.int64)
        samples = np.concatenate([
            np.stack([levels, levels, levels], axis=-1),
            np.stack([levels, zeros, zeros], axis=-1),
            np.stack([zeros, levels, zeros], axis=-1),
            np.stack([zeros, zeros, levels], axis=-1),
            np.random.default_rng(0).integers(0, 256, (4096, 3)),
        ]).astype(np.uint8)

        indices = ramp.index_grid(samples)
        assert indices.min() >= 0
        assert indices.max() <= length - 1
        assert ramp.index_grid(np.array([255, 255, 255], dtype=np.uint8)) == length - 1
        assert ramp.index_grid(np.array([0, 0, 0], dtype=np.uint8)) == 0

    def test_index_grid_matches_integer_floor(self, ramp):
        samples = np.random.default_rng(1).integers(0, 256, (64, 3))
        for rgb, index in zip(samples, ramp.index_grid(samples)):
            r, g, b = (int(c) for c in rgb)
            assert index == (len(ramp) - 1) * (299 * r + 587 * g + 114 * b) // 255000

    def test_single_glyph_ramp(self):
        ramp = GlyphRamp("#")
        assert ramp.glyph_for(255, 255, 255) == "#"
        assert ramp.glyph_for(0, 0, 0) == "#"


class TestGlyphRamp:
    def test_empty_ramp_rejected(self):
        with pytest.raises(ValueError):
            GlyphRamp("")

    def test_increase_drops_leading_blank(self, ramp):
        assert ramp.increase_brightness() is True
        assert len(ramp) == len(WEBCAM_RAMP) - 1
        assert ramp.glyphs == "".join(WEBCAM_RAMP[1:])

    def test_increase_is_noop_once_leading_glyph_is_visible(self):
        ramp = GlyphRamp(".:#@")
        for _ in range(3):
            assert ramp.increase_brightness() is False
        assert ramp.glyphs == ".:#@"

    def test_increase_stops_after_all_blanks_removed(self, ramp):
        for _ in range(10):
            ramp.increase_brightness()
        assert ramp.glyphs == ".,:;+*?%S#@"

    def test_decrease_prepends_blank(self, ramp):
        assert ramp.decrease_brightness() is True
        assert ramp[0] == " "
        assert len(ramp) == len(WEBCAM_RAMP) + 1

    def test_decrease_then_increase_round_trip(self):
        ramp = GlyphRamp(".:#@")
        before = ramp.copy()
        ramp.decrease_brightness()
        ramp.increase_brightness()
        assert ramp == before

    def test_decrease_is_unbounded_by_default(self, ramp):
        for _ in range(100):
            ramp.decrease_brightness()
        assert len(ramp) == len(WEBCAM_RAMP) + 100

    def test_decrease_respects_cap(self):
        ramp = GlyphRamp(".:#@", max_length=6)
        for _ in range(5):
            ramp.decrease_brightness()
        assert ramp.glyphs == "  .:#@"


class TestGlyphRows:
    def test_shape_matches_frame(self, ramp):
        rows = glyph_rows(solid_image(7, 3, (255, 255, 255)), ramp)
        assert rows == ["@" * 7] * 3

    def test_mixed_pixels(self, ramp):
        image = solid_image(2, 1, (0, 0, 0))
        image.putpixel((1, 0), (255, 255, 255))
        assert glyph_rows(image, ramp) == [" @"]

    def test_grayscale_input_is_converted(self, ramp):
        image = solid_image(3, 2, (255, 255, 255)).convert("L")
        assert glyph_rows(image, ramp) == ["@@@", "@@@"]


class TestCharacterSets:
    def test_preset_lookup(self):
        assert CharacterSets.get("webcam") == CharacterSets.WEBCAM
        assert CharacterSets.get("standard") == CharacterSets.STANDARD

    def test_literal_ramp_passes_through(self):
        assert CharacterSets.get(" .oO@") == " .oO@"

    def test_webcam_ramp_matches_default(self):
        assert list(CharacterSets.WEBCAM) == WEBCAM_RAMP

"""
Brightness mapping for ASCII conversion.

Maps RGB pixels to glyphs from an ordered ramp using:
- Linear luma weights (no gamma correction)
- A mutable ramp that grows or shrinks with leading blanks
- Vectorized conversion of whole frames with numpy
"""

from typing import Iterable, List, Optional
import numpy as np
from PIL import Image


# Luma weights in per mille, kept integral so white maps to exactly 1.0
LUMA_WEIGHTS = (299, 587, 114)
LUMA_SCALE = sum(LUMA_WEIGHTS) * 255

BLANK = " "


class CharacterSets:
    """Predefined glyph ramps, ordered darkest to brightest."""

    # Webcam ramp with a blank-heavy dark end
    WEBCAM = "    .,:;+*?%S#@"

    # Standard ASCII characters ordered by perceived density
    STANDARD = " .:-=+*#%@"

    # Block characters for a pixelated look
    BLOCKS = " ░▒▓█"

    # Simple/minimal set
    MINIMAL = " .-+*#"

    @classmethod
    def get(cls, name: str) -> str:
        """Look up a ramp by name, or treat the value as a literal ramp."""
        return getattr(cls, name.upper(), name) if name.isalpha() else name


def weighted_luma(pixels: np.ndarray) -> np.ndarray:
    """
    Integer luma of RGB samples, scaled so that white is LUMA_SCALE.

    Args:
        pixels: Array whose last axis holds 8-bit (R, G, B)

    Returns:
        Integer array with the last axis reduced
    """
    pixels = np.asarray(pixels, dtype=np.int64)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * pixels[..., 0] + wg * pixels[..., 1] + wb * pixels[..., 2]


def luma(r: int, g: int, b: int) -> float:
    """
    Perceptual brightness of an 8-bit RGB triple.

    Returns:
        Value in [0, 1]
    """
    return int(weighted_luma((r, g, b))) / LUMA_SCALE


class GlyphRamp:
    """
    Ordered glyph sequence from darkest to brightest.

    The ramp is never empty. Brightness adjustments only touch the
    leading (darkest) end: decreasing prepends a blank, increasing
    drops a leading blank if there is one.
    """

    def __init__(self, glyphs: Iterable[str] = CharacterSets.WEBCAM, max_length: Optional[int] = None):
        """
        Initialize the ramp.

        Args:
            glyphs: Characters ordered darkest to brightest
            max_length: Upper bound for growth on decrease (None = unbounded)
        """
        self._glyphs: List[str] = list(glyphs)
        if not self._glyphs:
            raise ValueError("Glyph ramp must not be empty")
        if max_length is not None and max_length < 1:
            raise ValueError("max_length must be positive")
        self.max_length = max_length

    def __len__(self) -> int:
        return len(self._glyphs)

    def __getitem__(self, index: int) -> str:
        return self._glyphs[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, GlyphRamp):
            return self._glyphs == other._glyphs
        return NotImplemented

    def __repr__(self) -> str:
        return f"GlyphRamp({''.join(self._glyphs)!r})"

    @property
    def glyphs(self) -> str:
        return "".join(self._glyphs)

    def copy(self) -> "GlyphRamp":
        return GlyphRamp(self._glyphs, self.max_length)

    def increase_brightness(self) -> bool:
        """
        Drop the leading glyph if it is blank.

        Returns:
            True if the ramp changed
        """
        if len(self._glyphs) > 1 and self._glyphs[0] == BLANK:
            del self._glyphs[0]
            return True
        return False

    def decrease_brightness(self) -> bool:
        """
        Prepend a blank glyph, unless the ramp is at its length cap.

        Returns:
            True if the ramp changed
        """
        if self.max_length is not None and len(self._glyphs) >= self.max_length:
            return False
        self._glyphs.insert(0, BLANK)
        return True

    def glyph_for(self, r: int, g: int, b: int) -> str:
        """Map an 8-bit RGB pixel to its glyph."""
        return self._glyphs[int(self.index_grid(np.array([r, g, b])))]

    def index_grid(self, pixels: np.ndarray) -> np.ndarray:
        """
        Map RGB samples to ramp indices: floor((len - 1) * luma).

        Args:
            pixels: Array of shape (..., 3), usually (height, width, 3)

        Returns:
            Integer array with the channel axis removed
        """
        # Integer floor, so pure white lands on the last glyph
        return (len(self._glyphs) - 1) * weighted_luma(pixels) // LUMA_SCALE


def frame_pixels(image: Image.Image) -> np.ndarray:
    """Return the RGB samples of a frame as a (height, width, 3) uint8 array."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    return np.asarray(image, dtype=np.uint8)


def glyph_rows(image: Image.Image, ramp: GlyphRamp) -> List[str]:
    """
    Convert a frame to glyph rows.

    Args:
        image: Frame to convert
        ramp: Glyph ramp to map brightness with

    Returns:
        One string per pixel row, one glyph per column
    """
    indices = ramp.index_grid(frame_pixels(image))
    lookup = np.array(list(ramp.glyphs))
    return ["".join(row) for row in lookup[indices]]

"""Runtime settings for the live ASCII feed."""

from dataclasses import dataclass
from typing import Optional

from .converter import CharacterSets, GlyphRamp


@dataclass
class AppConfig:
    camera_index: int = 0
    mock: bool = False
    mock_pattern: str = "gradient"
    color: bool = False
    ramp: str = CharacterSets.WEBCAM
    # None keeps the ramp unbounded when decreasing brightness
    max_ramp_length: Optional[int] = None
    snapshot_dir: str = "."
    status_rows: int = 1
    resize_poll_interval: float = 0.1
    log_file: Optional[str] = None
    debug: bool = False

    def validate(self) -> "AppConfig":
        """
        Check settings that argparse cannot.

        Raises:
            ValueError: On the first invalid setting
        """
        if not self.ramp:
            raise ValueError("ramp must contain at least one glyph")
        if self.max_ramp_length is not None and self.max_ramp_length < len(self.ramp):
            raise ValueError("max ramp length must be at least the initial ramp length")
        if self.status_rows < 1:
            raise ValueError("status_rows must be at least 1")
        if self.resize_poll_interval <= 0:
            raise ValueError("resize_poll_interval must be positive")
        return self

    def make_ramp(self) -> GlyphRamp:
        return GlyphRamp(self.ramp, self.max_ramp_length)

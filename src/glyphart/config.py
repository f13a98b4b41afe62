import math
from dataclasses import dataclass

from glyphart.charsets import AlphabetKind


def _scaled(cells: int, scale: float) -> int:
    # Non-finite or negative scales leave nothing to resample
    size = cells * scale
    if not math.isfinite(size) or size <= 0:
        return 0
    return int(size)


@dataclass(frozen=True)
class ConversionConfig:
    """Settings for one image-to-glyph conversion.

    Values are taken as given. Out-of-range combinations such as a zero
    width or a scale below 1.0 are not rejected here; the pipeline degrades
    gracefully instead (cells with no source pixels render as the darkest
    glyph).
    """

    width: int = 100  # output columns
    height: int = 50  # output rows
    use_detailed_chars: bool = False
    use_high_density: bool = False
    use_color: bool = False
    color_saturation: float = 0.7
    invert: bool = False
    contrast: float = 1.0
    brightness: float = 1.0
    scale: float = 1.0  # source pixels per cell along each axis after resampling

    @classmethod
    def with_size(cls, width: int, height: int) -> "ConversionConfig":
        return cls(width=width, height=height)

    @property
    def grid_size(self) -> tuple[int, int]:
        return max(self.width, 0), max(self.height, 0)

    @property
    def target_size(self) -> tuple[int, int]:
        """Pixel size the source is resampled to before block sampling."""
        cols, rows = self.grid_size
        return _scaled(cols, self.scale), _scaled(rows, self.scale)

    @property
    def alphabet_kind(self) -> AlphabetKind:
        return AlphabetKind.from_flags(self.use_detailed_chars, self.use_high_density)

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self.alphabet_kind.glyphs

from collections.abc import Sequence

import numpy as np


def glyph_indices(brightness, length: int) -> np.ndarray:
    """Map brightness values in [0, 1] to alphabet indices.

    Truncates ``v * (length - 1)`` and clamps to ``[0, length - 1]``, so 1.0
    lands on the last glyph. NaN maps to 0.
    """
    values = np.nan_to_num(np.asarray(brightness, dtype=np.float64), nan=0.0)
    scaled = np.clip(values * (length - 1), 0, length - 1)
    return np.floor(scaled).astype(np.intp)


def glyph_index(brightness: float, length: int) -> int:
    return int(glyph_indices(brightness, length))


def select_glyph(brightness: float, alphabet: Sequence[str]) -> str:
    return alphabet[glyph_index(brightness, len(alphabet))]


def select_rows(grid: np.ndarray, alphabet: Sequence[str]) -> list[str]:
    """Pick a glyph for every cell of a (rows, cols) brightness grid, one string per row."""
    indices = glyph_indices(grid, len(alphabet))
    glyphs = np.array(alphabet, dtype=object)
    return ["".join(glyphs[row]) for row in indices]


def blend_colours(grid: np.ndarray, saturation: float) -> np.ndarray:
    """Blend averaged RGB values (last axis, 0-1) towards neutral grey.

    ``out = avg * saturation + (1 - saturation) * 0.5`` scaled to 0-255 and
    truncated. Returns uint8 with the same leading shape.
    """
    rgb = np.asarray(grid, dtype=np.float64)[..., :3]
    blended = (rgb * saturation + (1.0 - saturation) * 0.5) * 255.0
    return np.clip(np.nan_to_num(blended, nan=0.0), 0, 255).astype(np.uint8)


def blend_colour(r: float, g: float, b: float, saturation: float) -> tuple[int, int, int]:
    br, bg, bb = blend_colours(np.array([r, g, b]), saturation)
    return int(br), int(bg), int(bb)

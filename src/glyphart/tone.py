import math

import numpy as np


def _clamp01(v: float) -> float:
    # NaN (e.g. 0 * inf) collapses to black
    if math.isnan(v):
        return 0.0
    return min(max(v, 0.0), 1.0)


def adjust_channel(value: int, contrast: float, brightness: float) -> int:
    """Contrast then brightness remap of a single 0-255 channel value."""
    v = value / 255.0
    v = _clamp01((v - 0.5) * contrast + 0.5)
    v = _clamp01(v * brightness)
    return int(v * 255.0 + 0.5)


def adjust_tone(pixels: np.ndarray, contrast: float, brightness: float) -> np.ndarray:
    """Apply contrast and brightness to the RGB channels of an RGBA array.

    Returns a new uint8 array; alpha is copied through unchanged and the
    input is never modified. Any multiplier is accepted, including inf and
    NaN; undefined products become 0.
    """
    adjusted = np.array(pixels, dtype=np.uint8, copy=True)
    if adjusted.size == 0:
        return adjusted
    rgb = adjusted[..., :3].astype(np.float64) / 255.0
    with np.errstate(invalid="ignore", over="ignore"):
        rgb = np.clip(np.nan_to_num((rgb - 0.5) * contrast + 0.5, nan=0.0), 0.0, 1.0)
        rgb = np.clip(np.nan_to_num(rgb * brightness, nan=0.0), 0.0, 1.0)
    adjusted[..., :3] = np.floor(rgb * 255.0 + 0.5).astype(np.uint8)
    return adjusted

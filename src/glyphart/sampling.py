from dataclasses import dataclass

import numpy as np

# Perceptual luma weights for the colored path
LUMA_WEIGHTS = np.array([0.3, 0.59, 0.11])

# Channel layout of an aggregate grid: (rows, cols, 4)
BRIGHTNESS = 3


@dataclass(frozen=True)
class BlockAggregate:
    avg_r: float = 0.0
    avg_g: float = 0.0
    avg_b: float = 0.0
    avg_brightness: float = 0.0


def _edges(indices, scale: float, limit: int) -> np.ndarray:
    # Smallest integer pixel >= i * scale; rounding first keeps 10 * 1.1 at 11
    with np.errstate(invalid="ignore", over="ignore"):
        edges = np.ceil(np.round(np.asarray(indices, dtype=np.float64) * scale, 9))
    # A NaN scale covers nothing
    edges = np.nan_to_num(edges, nan=0.0, posinf=float(max(limit, 0)), neginf=0.0)
    return np.clip(edges, 0, max(limit, 0)).astype(np.intp)


def block_bounds(count: int, scale: float, limit: int) -> tuple[np.ndarray, np.ndarray]:
    """Half-open source pixel ranges covered by each of ``count`` cells on one axis.

    Cell ``i`` holds the pixels ``p`` with ``i * scale <= p < (i + 1) * scale``,
    clipped to ``[0, limit)``. Border cells may be partially covered or empty.
    """
    edges = _edges(np.arange(max(count, 0) + 1), scale, limit)
    return edges[:-1], edges[1:]


def _block_means(values: np.ndarray, width: int, height: int, scale: float) -> tuple[np.ndarray, np.ndarray]:
    """Mean of ``values`` (rows, cols, channels) over every cell's block.

    Uses a summed-area table so each cell is a constant-time lookup.
    Returns the means (height, width, channels) and the covered pixel
    counts (height, width). Cells with no pixels get a mean of 0.
    """
    rows, cols = values.shape[:2]
    y0, y1 = block_bounds(height, scale, rows)
    x0, x1 = block_bounds(width, scale, cols)

    table = np.zeros((rows + 1, cols + 1) + values.shape[2:], dtype=np.float64)
    table[1:, 1:] = values.cumsum(axis=0).cumsum(axis=1)

    sums = table[np.ix_(y1, x1)] - table[np.ix_(y0, x1)] - table[np.ix_(y1, x0)] + table[np.ix_(y0, x0)]
    counts = (y1 - y0)[:, np.newaxis] * (x1 - x0)[np.newaxis, :]

    covered = np.broadcast_to((counts > 0)[..., np.newaxis], sums.shape)
    divisor = np.broadcast_to(counts[..., np.newaxis], sums.shape)
    means = np.divide(sums, divisor, out=np.zeros_like(sums), where=covered)
    return means, counts


def sample_luminance(gray: np.ndarray, width: int, height: int, scale: float, invert: bool = False) -> np.ndarray:
    """Average brightness per cell of a single-channel image.

    Returns a (height, width) float array in [0, 1]. Inversion is applied to
    each pixel before averaging.
    """
    values = np.asarray(gray, dtype=np.float64) / 255.0
    if invert:
        values = 1.0 - values
    means, _ = _block_means(values[..., np.newaxis], width, height, scale)
    # Rounding keeps p and its inverted complement 255 - p on the same glyph
    return np.round(means[..., 0], 12)


def sample_colours(rgba: np.ndarray, width: int, height: int, scale: float, invert: bool = False) -> np.ndarray:
    """Average colour and brightness per cell of an RGB(A) image.

    Returns a (height, width, 4) float array holding r, g, b and brightness,
    all in [0, 1]. Brightness is the luma of the averaged channels and is
    inverted after averaging, unlike ``sample_luminance``.
    """
    rgb = np.asarray(rgba, dtype=np.float64)[..., :3] / 255.0
    means, counts = _block_means(rgb, width, height, scale)

    # Weights sum to 1; rounding keeps pure white at exactly 1.0
    brightness = np.round(means @ LUMA_WEIGHTS, 12)
    if invert:
        brightness = np.where(counts > 0, 1.0 - brightness, 0.0)

    grid = np.empty(means.shape[:2] + (4,), dtype=np.float64)
    grid[..., :3] = means
    grid[..., BRIGHTNESS] = brightness
    return grid


def sample_block(rgba: np.ndarray, x: int, y: int, scale: float, invert: bool = False) -> BlockAggregate:
    """Colored-path aggregate for the single cell at column ``x``, row ``y``."""
    rows, cols = rgba.shape[:2]
    y0, y1 = _edges([y, y + 1], scale, rows)
    x0, x1 = _edges([x, x + 1], scale, cols)
    block = np.asarray(rgba, dtype=np.float64)[y0:y1, x0:x1, :3] / 255.0
    if block.size == 0:
        return BlockAggregate()

    r, g, b = block.reshape(-1, 3).mean(axis=0)
    brightness = round(float(np.array([r, g, b]) @ LUMA_WEIGHTS), 12)
    if invert:
        brightness = 1.0 - brightness
    return BlockAggregate(float(r), float(g), float(b), float(brightness))

import html
from pathlib import Path

import numpy as np
from loguru import logger
from PIL import Image

from glyphart.config import ConversionConfig
from glyphart.decode import ImageSource, load_image
from glyphart.errors import WriteError
from glyphart.glyphs import blend_colours, select_rows
from glyphart.sampling import BRIGHTNESS, sample_colours, sample_luminance
from glyphart.tone import adjust_tone

HTML_HEADER = (
    "<!DOCTYPE html>\n<html>\n<head>\n<style>\n"
    "body { background-color: #000; margin: 0; padding: 10px; }\n"
    "pre { font-family: monospace; font-size: 10px; line-height: 0.9; }\n"
    "</style>\n</head>\n<body>\n<pre>\n"
)
HTML_FOOTER = "</pre>\n</body>\n</html>"


def _format_text(rows: list[str]) -> str:
    return "".join(row + "\n" for row in rows)


def _format_html(rows: list[str], colours: np.ndarray) -> str:
    """Wrap each glyph in a span coloured with its cell's blended RGB."""
    out = [HTML_HEADER]
    for r, row in enumerate(rows):
        parts = []
        for c, glyph in enumerate(row):
            red, green, blue = (int(v) for v in colours[r, c])
            parts.append(f'<span style="color:rgb({red},{green},{blue})">{html.escape(glyph)}</span>')
        parts.append("<br/>\n")
        out.append("".join(parts))
    out.append(HTML_FOOTER)
    return "".join(out)


def save_output(text: str, destination: str | Path) -> None:
    """Write ``text`` to ``destination`` as UTF-8, replacing any existing file."""
    path = Path(destination)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write {path}", exc) from exc
    logger.debug(f"Wrote {len(text)} characters to {path}")


class GlyphArtConverter:
    """Renders images as plain-text or colored-HTML glyph art."""

    def __init__(self, config: ConversionConfig | None = None):
        self.config = config if config is not None else ConversionConfig()

    def convert(self, path: str | Path) -> str:
        return self.render(load_image(Path(path)))

    def convert_bytes(self, data: bytes | bytearray | memoryview) -> str:
        return self.render(load_image(data))

    def convert_image(self, image: Image.Image) -> str:
        return self.render(load_image(image))

    def save(self, text: str, destination: str | Path) -> None:
        save_output(text, destination)

    def _prepare(self, image: Image.Image) -> np.ndarray:
        """Resample to the target size and apply tone adjustments, as an RGBA array."""
        config = self.config
        target_width, target_height = config.target_size
        if target_width == 0 or target_height == 0:
            logger.warning(
                f"Target size {target_width}x{target_height} is empty "
                f"(width={config.width}, height={config.height}, scale={config.scale}); cells will be blank"
            )
            return np.zeros((target_height, target_width, 4), dtype=np.uint8)

        logger.debug(f"Resizing {image.width}x{image.height} to {target_width}x{target_height}")
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        resized = image.resize((target_width, target_height), Image.LANCZOS)
        return adjust_tone(np.asarray(resized), config.contrast, config.brightness)

    def _render_text(self, pixels: np.ndarray) -> str:
        config = self.config
        if pixels.size:
            gray = np.asarray(Image.fromarray(pixels).convert("L"))
        else:
            gray = np.zeros(pixels.shape[:2], dtype=np.uint8)
        width, height = config.grid_size
        grid = sample_luminance(gray, width, height, config.scale, config.invert)
        return _format_text(select_rows(grid, config.alphabet))

    def _render_html(self, pixels: np.ndarray) -> str:
        config = self.config
        width, height = config.grid_size
        grid = sample_colours(pixels, width, height, config.scale, config.invert)
        rows = select_rows(grid[..., BRIGHTNESS], config.alphabet)
        return _format_html(rows, blend_colours(grid, config.color_saturation))

    def render(self, image: Image.Image) -> str:
        """Run the resize, adjust, sample and assemble stages on a decoded image."""
        config = self.config
        logger.debug(
            f"Rendering {config.width}x{config.height} cells, alphabet={config.alphabet_kind.value}, "
            f"color={config.use_color}"
        )
        pixels = self._prepare(image)
        if config.use_color:
            return self._render_html(pixels)
        return self._render_text(pixels)


def image_to_glyphs(image: ImageSource, config: ConversionConfig | None = None) -> str:
    converter = GlyphArtConverter(config)
    return converter.render(load_image(image))

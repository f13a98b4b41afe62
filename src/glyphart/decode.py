import io
from pathlib import Path

from loguru import logger
from PIL import Image

from glyphart.errors import DecodeError

ImageSource = Image.Image | str | Path | bytes | bytearray | memoryview


def _open(source: str | Path | bytes | bytearray | memoryview) -> Image.Image:
    """Decode the first frame of ``source`` as RGBA, closing the underlying file."""
    fp = io.BytesIO(bytes(source)) if isinstance(source, (bytes, bytearray, memoryview)) else Path(source)
    with Image.open(fp) as image:
        # Image.open is lazy; force the decode so errors surface here
        image.load()
        logger.debug(f"Decoded {image.format} {image.mode} {image.width}x{image.height}")
        return image.convert("RGBA")


def load_image(source: ImageSource) -> Image.Image:
    """Decode ``source`` into an RGBA image.

    Accepts an already decoded image, a filesystem path, or the raw bytes
    of an encoded image. Raises ``DecodeError`` when the source cannot be
    read or decoded.
    """
    if isinstance(source, Image.Image):
        return source.convert("RGBA")

    label = "<bytes>" if isinstance(source, (bytes, bytearray, memoryview)) else str(source)
    try:
        image = _open(source)
    except FileNotFoundError as exc:
        raise DecodeError(f"Image not found: {label}", exc) from exc
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"Image too large to decode: {label}", exc) from exc
    except (OSError, ValueError, SyntaxError) as exc:
        # UnidentifiedImageError is an OSError; some plugins raise SyntaxError on bad headers
        raise DecodeError(f"Failed to decode image: {label}", exc) from exc

    return image

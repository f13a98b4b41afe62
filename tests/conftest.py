import io

import pytest
from PIL import Image


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def gradient_image():
    """64x32 RGB image, black on the left fading to white on the right."""
    img = Image.new("RGB", (64, 32))
    pixels = img.load()
    for x in range(64):
        level = x * 255 // 63
        for y in range(32):
            pixels[x, y] = (level, level, level)
    return img


@pytest.fixture
def png_bytes(gradient_image):
    return encode_png(gradient_image)

import io

import pytest
from PIL import Image, ImageDraw

from luma_ascii.pixels import PixelBuffer


def _encode_png(image: Image.Image) -> bytes:
    out = io.BytesIO()
    image.save(out, format='PNG')
    return out.getvalue()


def _uniform_buffer(rgb, width=4, height=3) -> PixelBuffer:
    return PixelBuffer(width, height, bytes(list(rgb) + [255]) * (width * height))


@pytest.fixture
def encode_png():
    return _encode_png


@pytest.fixture
def uniform_buffer():
    return _uniform_buffer


@pytest.fixture
def landscape_image():
    image = Image.new('RGB', (120, 60), color='white')
    draw = ImageDraw.Draw(image)
    draw.ellipse([10, 5, 110, 55], fill='red', outline='black')
    draw.rectangle([40, 20, 80, 40], fill='blue')
    return image


@pytest.fixture
def png_bytes(landscape_image):
    return _encode_png(landscape_image)


@pytest.fixture
def gradient_buffer():
    """A 256x1 grey ramp from black to white."""
    data = b''.join(bytes([v, v, v, 255]) for v in range(256))
    return PixelBuffer(256, 1, data)

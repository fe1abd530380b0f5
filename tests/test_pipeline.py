import asyncio
import io

import pytest
from PIL import Image

from luma_ascii.config import Presets
from luma_ascii.errors import ImageDecodeError
from luma_ascii.pipeline import convert_bytes, convert_path, decode_image


def test_decode_image(png_bytes):
    image = asyncio.run(decode_image(png_bytes))
    assert isinstance(image, Image.Image)
    assert image.size == (120, 60)


def test_convert_bytes(png_bytes):
    result = asyncio.run(convert_bytes(png_bytes, content_type='image/png'))
    assert result.original_size == (120, 60)
    assert result.text.count('\n') == result.height == 140


def test_convert_bytes_with_preset(png_bytes):
    result = asyncio.run(convert_bytes(png_bytes, Presets.classic().replace(landscape_width=30)))
    assert result.width == 30


@pytest.mark.parametrize('data, content_type', [
    (b'', None),
    (b'not an image at all', None),
    (b'\x89PNG\r\n\x1a\n truncated', 'image/png'),
])
def test_undecodable_data(data, content_type):
    with pytest.raises(ImageDecodeError):
        asyncio.run(convert_bytes(data, content_type=content_type))


def test_non_image_content_type(png_bytes):
    with pytest.raises(ImageDecodeError, match='must be an image'):
        asyncio.run(convert_bytes(png_bytes, content_type='text/plain'))


def test_convert_path(tmp_path, landscape_image):
    path = tmp_path / 'shape.jpg'
    landscape_image.save(path, format='JPEG')
    result = asyncio.run(convert_path(str(path)))
    assert result.width == 400


def test_convert_missing_path(tmp_path):
    with pytest.raises(ImageDecodeError):
        asyncio.run(convert_path(str(tmp_path / 'missing.png')))


def test_exif_orientation_applied(landscape_image):
    exif = Image.Exif()
    exif[0x0112] = 6  # rotated 90 degrees clockwise
    buf = io.BytesIO()
    landscape_image.save(buf, format='JPEG', exif=exif)

    result = asyncio.run(convert_bytes(buf.getvalue(), content_type='image/jpeg'))
    assert result.original_size == (60, 120)
    assert result.height == 200

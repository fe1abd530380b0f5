#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Async Pipeline
=============================================
Sequences the blocking steps around the pure converter:

    read -> decode -> rasterize -> convert

Decoding runs in the default executor so an event loop stays responsive.
Each stage is awaited before the next starts.
"""

import asyncio
import io
import logging
import time
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from luma_ascii.config import ConversionConfig
from luma_ascii.converter import AsciiArtResult, AsciiConverter
from luma_ascii.errors import ImageDecodeError

logger = logging.getLogger(__name__)


def _decode(data: bytes) -> Image.Image:
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
        # Camera images are stored unrotated with an orientation tag
        image = ImageOps.exif_transpose(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
        raise ImageDecodeError(f"Failed to load image: {e}") from e
    return image


def _read(path: str) -> bytes:
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise ImageDecodeError(f"Failed to read file: {e}") from e


def check_content_type(content_type: Optional[str]) -> None:
    """Reject uploads whose declared type is not an image."""
    if content_type is not None and not content_type.lower().startswith('image/'):
        raise ImageDecodeError(f"Selected file must be an image, got {content_type!r}")


async def decode_image(data: bytes) -> Image.Image:
    """Decode image bytes off the event loop."""
    if not data:
        raise ImageDecodeError("No file selected")
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, _decode, data)


async def convert_bytes(data: bytes, config: Optional[ConversionConfig] = None,
                        content_type: Optional[str] = None) -> AsciiArtResult:
    """
    Decode image bytes and convert them to ASCII art.

    Args:
        data: Encoded image file contents
        config: Conversion settings
        content_type: Declared MIME type, checked when given

    Returns:
        AsciiArtResult

    Raises:
        ImageDecodeError: if the data is not a decodable image
    """
    check_content_type(content_type)
    started = time.perf_counter()
    image = await decode_image(data)
    decoded = time.perf_counter()

    result = AsciiConverter(config).convert_image(image)
    logger.debug("pipeline: decode %.1f ms, convert %.1f ms",
                 (decoded - started) * 1000, (time.perf_counter() - decoded) * 1000)
    return result


async def convert_path(path: str, config: Optional[ConversionConfig] = None) -> AsciiArtResult:
    """Read an image file and convert it to ASCII art."""
    loop = asyncio.get_running_loop()
    data = await loop.run_in_executor(None, _read, path)
    return await convert_bytes(data, config)

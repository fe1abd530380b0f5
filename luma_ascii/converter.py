#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Converter
========================================
Ties the stages together: pixels -> luminance -> normalized -> glyphs -> text.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from PIL import Image

from luma_ascii.config import ConversionConfig, Presets
from luma_ascii.constants import CharacterSet
from luma_ascii.luminance import luminance_array
from luma_ascii.mapper import glyph_indices, join_lines, render_lines
from luma_ascii.normalizer import LuminanceStats, normalize
from luma_ascii.pixels import PixelBuffer
from luma_ascii.resize import rasterize

logger = logging.getLogger(__name__)


@dataclass
class AsciiArtResult:
    """Result of ASCII art conversion."""
    text: str                                          # The ASCII art text
    lines: List[str] = field(default_factory=list)     # Rows without newlines
    width: int = 0                                     # Output width in glyphs
    height: int = 0                                    # Output height in rows
    original_size: Tuple[int, int] = (0, 0)            # Source image size
    stats: Optional[LuminanceStats] = None             # Luminance statistics used


class AsciiConverter:
    """Convert pixel buffers and images to ASCII art."""

    def __init__(self, config: Optional[ConversionConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or ConversionConfig()

    def _lines(self, buffer: PixelBuffer) -> Tuple[List[str], LuminanceStats]:
        config = self.config
        lum = luminance_array(buffer, config.gamma, config.gamma_transfer)
        stats = LuminanceStats.from_array(lum)
        normalized = normalize(lum, config, stats)
        indices = glyph_indices(normalized, len(config.charset), config.darkness_bias)
        return render_lines(indices, config.charset, config.spacer), stats

    def convert(self, buffer: PixelBuffer) -> str:
        """
        Convert a pixel buffer to ASCII art text.

        Pure and synchronous; every intermediate array is local to the call.

        Args:
            buffer: RGBA pixel buffer

        Returns:
            ``buffer.height`` newline-terminated rows of glyph+spacer pairs
        """
        lines, _ = self._lines(buffer)
        return join_lines(lines)

    def convert_buffer(self, buffer: PixelBuffer,
                       original_size: Optional[Tuple[int, int]] = None) -> AsciiArtResult:
        """Convert a pixel buffer and keep the rows and statistics."""
        lines, stats = self._lines(buffer)
        return AsciiArtResult(
            text=join_lines(lines),
            lines=lines,
            width=buffer.width,
            height=buffer.height,
            original_size=original_size or buffer.size,
            stats=stats,
        )

    def convert_image(self, image: Image.Image) -> AsciiArtResult:
        """Rasterize a decoded image onto the canvas and convert it."""
        buffer = rasterize(image, self.config)
        result = self.convert_buffer(buffer, original_size=image.size)
        logger.debug("convert_image: %s -> %dx%d glyphs", image.size, result.width, result.height)
        return result


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def convert_pixels(width: int, height: int, data: bytes,
                   config: Optional[ConversionConfig] = None) -> str:
    """
    Convert raw RGBA bytes to ASCII art.

    Args:
        width: Buffer width in pixels
        height: Buffer height in pixels
        data: ``width * height * 4`` bytes, row-major RGBA
        config: Conversion settings

    Returns:
        ASCII art text

    Raises:
        InvalidInputError: if the byte length does not match the dimensions
    """
    return AsciiConverter(config).convert(PixelBuffer(width, height, data))


def image_to_ascii(image: Image.Image,
                   preset: str = 'adaptive',
                   charset: Union[str, None] = None,
                   **kwargs) -> AsciiArtResult:
    """
    Convenience function to convert a PIL image to ASCII art.

    Args:
        image: PIL Image
        preset: Preset name to start from
        charset: Character set name or custom ramp string
        **kwargs: ConversionConfig fields overriding the preset

    Returns:
        AsciiArtResult
    """
    if charset is not None and charset.lower() in CharacterSet.names():
        charset = CharacterSet.get_preset(charset)
    config = Presets.get(preset).replace(charset=charset, **kwargs)
    return AsciiConverter(config).convert_image(image)

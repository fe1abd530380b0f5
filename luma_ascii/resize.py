"""Canvas sizing and rasterization of decoded images."""

import logging
import math
from typing import Optional, Tuple

from PIL import Image

from luma_ascii.config import ConversionConfig
from luma_ascii.errors import InvalidInputError
from luma_ascii.pixels import PixelBuffer

logger = logging.getLogger(__name__)


def target_size(src_width: int, src_height: int,
                config: Optional[ConversionConfig] = None) -> Tuple[int, int]:
    """
    Calculate the canvas size for a source image.

    Landscape sources get a fixed width, everything else a fixed height. The
    other side follows the source aspect, squeezed by the glyph aspect ratio
    because glyphs are taller than they are wide.

    Args:
        src_width: Source width in pixels
        src_height: Source height in pixels
        config: Conversion settings

    Returns:
        (width, height), each at least 1
    """
    config = config or ConversionConfig()
    ratio = config.char_aspect_ratio

    if src_width > src_height:
        width = config.landscape_width
        height = math.floor((width / src_width) * src_height * ratio)
    else:
        height = config.portrait_height
        width = math.floor((height / (src_height * ratio)) * src_width)

    return max(1, width), max(1, height)


def rasterize(image: Image.Image, config: Optional[ConversionConfig] = None) -> PixelBuffer:
    """Resize an image onto the conversion canvas and return its RGBA pixels."""
    if image.width < 1 or image.height < 1:
        raise InvalidInputError(f"cannot rasterize an empty image ({image.width}x{image.height})")
    width, height = target_size(image.width, image.height, config)
    logger.debug("rasterize: %dx%d -> %dx%d", image.width, image.height, width, height)

    rgba = image.convert('RGBA')
    canvas = rgba.resize((width, height), Image.Resampling.LANCZOS)
    return PixelBuffer.from_image(canvas)

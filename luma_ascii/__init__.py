"""
Image to ASCII Art Converter
============================
Converts raster images to monospace ASCII art.

Pipeline: decode -> resize -> luminance -> normalization -> glyph mapping.
"""

from luma_ascii.config import ConversionConfig, Presets
from luma_ascii.constants import CharacterSet, ContrastMode, GammaTransfer, NormalizationPolicy
from luma_ascii.converter import AsciiArtResult, AsciiConverter, convert_pixels, image_to_ascii
from luma_ascii.errors import AsciiArtError, ConfigError, ImageDecodeError, InvalidInputError
from luma_ascii.formatters import HtmlFormatter
from luma_ascii.luminance import luminance, luminance_array
from luma_ascii.normalizer import LuminanceStats, normalize
from luma_ascii.pipeline import convert_bytes, convert_path, decode_image
from luma_ascii.pixels import PixelBuffer
from luma_ascii.resize import rasterize, target_size

__version__ = "0.1.0"

__all__ = [
    # Main classes
    'AsciiConverter',
    'ConversionConfig',
    'AsciiArtResult',
    'PixelBuffer',
    'LuminanceStats',

    # Enums
    'GammaTransfer',
    'NormalizationPolicy',
    'ContrastMode',

    # Character sets and presets
    'CharacterSet',
    'Presets',

    # Errors
    'AsciiArtError',
    'InvalidInputError',
    'ConfigError',
    'ImageDecodeError',

    # Formatters
    'HtmlFormatter',

    # Functions
    'convert_pixels',
    'image_to_ascii',
    'luminance',
    'luminance_array',
    'normalize',
    'rasterize',
    'target_size',
    'convert_bytes',
    'convert_path',
    'decode_image',
]

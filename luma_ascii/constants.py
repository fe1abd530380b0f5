#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Constants
========================================
Enums, character ramps and fixed numeric constants shared by the pipeline.
"""

from dataclasses import dataclass
from enum import Enum, auto

from luma_ascii.errors import ConfigError


# =============================================================================
# ENUMS
# =============================================================================

class GammaTransfer(Enum):
    """Transfer function applied to each channel before weighting."""
    PIECEWISE = auto()    # sRGB curve with a linear toe
    DIRECT = auto()       # plain power law


class NormalizationPolicy(Enum):
    """How the luminance range is stretched to [0, 1]."""
    MINMAX = auto()       # raw min / max of the image
    ADAPTIVE = auto()     # mean +/- k standard deviations


class ContrastMode(Enum):
    """Exponent used for the contrast curve."""
    FIXED_EXPONENT = auto()
    VARIANCE_SCALED = auto()


# =============================================================================
# CHARACTER SETS
# =============================================================================

@dataclass
class CharacterSet:
    """Predefined glyph ramps, densest glyph first."""

    DETAILED: str = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`. "
    STANDARD: str = "@%#*+=-:. "
    SIMPLE: str = "@Oo. "
    BLOCKS: str = "█▓▒░ "
    BINARY: str = "█ "

    @classmethod
    def names(cls):
        return ['detailed', 'standard', 'simple', 'blocks', 'binary']

    @classmethod
    def get_preset(cls, name: str) -> str:
        """Get character set by name."""
        presets = {
            'detailed': cls.DETAILED,
            'standard': cls.STANDARD,
            'simple': cls.SIMPLE,
            'blocks': cls.BLOCKS,
            'binary': cls.BINARY,
        }
        try:
            return presets[name.lower()]
        except KeyError:
            raise ConfigError(f"Unknown character set: {name!r}") from None


# =============================================================================
# NUMERIC CONSTANTS
# =============================================================================

# Rec. 709 / sRGB relative luminance weights
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)

SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055

STANDARD_GAMMA = 2.2
DARK_GAMMA = 1.6

DEFAULT_CONTRAST_EXPONENT = 1.8
DEFAULT_CONTRAST_K = 2.0
DEFAULT_ADAPTIVE_SIGMA = 2.0

# Fraction of the ramp length skipped by the darkness bias
DARKNESS_BIAS_FRACTION = 0.1

DEFAULT_LANDSCAPE_WIDTH = 400
DEFAULT_PORTRAIT_HEIGHT = 200
DEFAULT_CHAR_ASPECT_RATIO = 0.7

BYTES_PER_PIXEL = 4


# =============================================================================
# SERVER
# =============================================================================

SERVER_HOST = '127.0.0.1'
SERVER_PORT = 8000
MAX_UPLOAD_BYTES = 20 * 1024 * 1024

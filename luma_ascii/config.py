#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Configuration
============================================
Conversion settings and the named presets that reproduce each historical
revision of the converter.
"""

import dataclasses
from dataclasses import dataclass
from typing import Dict, Callable

from luma_ascii.constants import (
    CharacterSet,
    ContrastMode,
    GammaTransfer,
    NormalizationPolicy,
    DARK_GAMMA,
    DEFAULT_ADAPTIVE_SIGMA,
    DEFAULT_CHAR_ASPECT_RATIO,
    DEFAULT_CONTRAST_EXPONENT,
    DEFAULT_CONTRAST_K,
    DEFAULT_LANDSCAPE_WIDTH,
    DEFAULT_PORTRAIT_HEIGHT,
    STANDARD_GAMMA,
)
from luma_ascii.errors import ConfigError


@dataclass(frozen=True)
class ConversionConfig:
    """Configuration for ASCII art conversion."""

    # Luminance
    gamma: float = STANDARD_GAMMA
    gamma_transfer: GammaTransfer = GammaTransfer.PIECEWISE

    # Normalization
    normalization: NormalizationPolicy = NormalizationPolicy.ADAPTIVE
    adaptive_sigma: float = DEFAULT_ADAPTIVE_SIGMA    # bound width in std devs

    # Contrast curve
    contrast_mode: ContrastMode = ContrastMode.VARIANCE_SCALED
    contrast_exponent: float = DEFAULT_CONTRAST_EXPONENT
    contrast_k: float = DEFAULT_CONTRAST_K            # exponent = 1 + k * std

    # Character mapping
    darkness_bias: bool = False
    charset: str = CharacterSet.DETAILED
    spacer: str = ' '

    # Canvas size
    landscape_width: int = DEFAULT_LANDSCAPE_WIDTH
    portrait_height: int = DEFAULT_PORTRAIT_HEIGHT
    char_aspect_ratio: float = DEFAULT_CHAR_ASPECT_RATIO

    def __post_init__(self):
        if not self.charset:
            raise ConfigError("charset must contain at least one glyph")
        if self.gamma <= 0:
            raise ConfigError(f"gamma must be positive, got {self.gamma}")
        if self.adaptive_sigma <= 0:
            raise ConfigError(f"adaptive_sigma must be positive, got {self.adaptive_sigma}")
        if self.contrast_exponent <= 0:
            raise ConfigError(f"contrast_exponent must be positive, got {self.contrast_exponent}")
        if self.contrast_k < 0:
            raise ConfigError(f"contrast_k must not be negative, got {self.contrast_k}")
        if self.landscape_width < 1 or self.portrait_height < 1:
            raise ConfigError("target dimensions must be at least 1")
        if self.char_aspect_ratio <= 0:
            raise ConfigError(f"char_aspect_ratio must be positive, got {self.char_aspect_ratio}")

    def replace(self, **changes) -> 'ConversionConfig':
        """Return a copy with the given fields changed; None values are ignored."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return dataclasses.replace(self, **changes)


# =============================================================================
# PRESET CONFIGURATIONS
# =============================================================================

class Presets:
    """Named configurations, one per historical revision."""

    @staticmethod
    def adaptive() -> ConversionConfig:
        """Mean +/- 2 std range with a variance-scaled curve. The default."""
        return ConversionConfig()

    @staticmethod
    def classic() -> ConversionConfig:
        """Plain min/max stretch with a fixed 1.8 curve."""
        return ConversionConfig(
            normalization=NormalizationPolicy.MINMAX,
            contrast_mode=ContrastMode.FIXED_EXPONENT,
        )

    @staticmethod
    def dark() -> ConversionConfig:
        """Lowered gamma plus the ramp offset, for a darker rendering."""
        return ConversionConfig(
            gamma=DARK_GAMMA,
            normalization=NormalizationPolicy.MINMAX,
            contrast_mode=ContrastMode.FIXED_EXPONENT,
            darkness_bias=True,
        )

    @staticmethod
    def fast() -> ConversionConfig:
        """Direct power transfer without the sRGB linear segment."""
        return ConversionConfig(
            gamma_transfer=GammaTransfer.DIRECT,
            normalization=NormalizationPolicy.MINMAX,
            contrast_mode=ContrastMode.FIXED_EXPONENT,
        )

    @classmethod
    def all(cls) -> Dict[str, Callable[[], ConversionConfig]]:
        return {
            'adaptive': cls.adaptive,
            'classic': cls.classic,
            'dark': cls.dark,
            'fast': cls.fast,
        }

    @classmethod
    def get(cls, name: str) -> ConversionConfig:
        """Get a preset configuration by name."""
        factory = cls.all().get(name.lower())
        if factory is None:
            raise ConfigError(f"Unknown preset: {name!r}")
        return factory()

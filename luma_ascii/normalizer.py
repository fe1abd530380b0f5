#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Normalization
============================================
Stretches a luminance array to [0, 1] and applies the contrast curve.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from luma_ascii.config import ConversionConfig
from luma_ascii.constants import ContrastMode, NormalizationPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LuminanceStats:
    """Summary of a luminance array."""
    min: float
    max: float
    mean: float
    std: float

    @classmethod
    def from_array(cls, lum: np.ndarray) -> 'LuminanceStats':
        """Compute statistics over all values. Uses the population std."""
        return cls(
            min=float(np.min(lum)),
            max=float(np.max(lum)),
            mean=float(np.mean(lum)),
            std=float(np.std(lum)),
        )

    def adaptive_bounds(self, sigma: float = 2.0):
        """Return (lower, upper) for mean +/- sigma std, kept inside [min, max]."""
        lower = max(self.mean - sigma * self.std, self.min)
        upper = min(self.mean + sigma * self.std, self.max)
        return lower, upper


def _constant(lum: np.ndarray, value: float) -> np.ndarray:
    # A flat image keeps its absolute brightness: black stays 0, white stays 1.
    return np.full(lum.shape, min(1.0, max(0.0, value)), dtype=np.float64)


def normalize_minmax(lum: np.ndarray, stats: LuminanceStats) -> np.ndarray:
    """Map [min, max] linearly onto [0, 1]."""
    span = stats.max - stats.min
    if span <= 0:
        return _constant(lum, stats.min)
    return np.clip((lum - stats.min) / span, 0.0, 1.0)


def normalize_adaptive(lum: np.ndarray, stats: LuminanceStats, sigma: float = 2.0) -> np.ndarray:
    """
    Map mean +/- sigma std onto [0, 1].

    Values at or below the lower bound become 0, values at or above the upper
    bound become 1, the rest interpolate linearly. A handful of very bright or
    very dark pixels therefore cannot flatten the rest of the image.
    """
    lower, upper = stats.adaptive_bounds(sigma)
    if upper <= lower:
        return _constant(lum, stats.mean)
    return np.clip((lum - lower) / (upper - lower), 0.0, 1.0)


def contrast_exponent(stats: LuminanceStats, config: ConversionConfig) -> float:
    """Exponent of the contrast curve for this image."""
    if config.contrast_mode is ContrastMode.VARIANCE_SCALED:
        return 1.0 + config.contrast_k * stats.std
    return config.contrast_exponent


def apply_contrast(normalized: np.ndarray, exponent: float) -> np.ndarray:
    """Raise normalized values to the exponent. Exponents above 1 darken midtones."""
    return np.power(np.clip(normalized, 0.0, 1.0), exponent)


def normalize(lum: np.ndarray, config: ConversionConfig, stats: Optional[LuminanceStats] = None) -> np.ndarray:
    """
    Run the configured normalization policy and contrast curve.

    Args:
        lum: Luminance array
        config: Conversion settings
        stats: Precomputed statistics for lum, if available

    Returns:
        Array of the same shape with every value in [0, 1]
    """
    if stats is None:
        stats = LuminanceStats.from_array(lum)

    if config.normalization is NormalizationPolicy.ADAPTIVE:
        normalized = normalize_adaptive(lum, stats, config.adaptive_sigma)
    else:
        normalized = normalize_minmax(lum, stats)

    exponent = contrast_exponent(stats, config)
    logger.debug("normalize: policy=%s stats=%s exponent=%.3f",
                 config.normalization.name, stats, exponent)
    return apply_contrast(normalized, exponent)

#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Luminance
========================================
Per-pixel perceptual brightness.

Each 8-bit channel is scaled to [0, 1], passed through a transfer function and
the three channels are combined with the Rec. 709 weights. Two transfer
functions are supported:

- PIECEWISE: the sRGB curve. Values at or below 0.03928 are divided by 12.92,
  the rest follow ((v + 0.055) / 1.055) ** gamma.
- DIRECT: v ** gamma, without the linear toe. Cheaper, and slightly brighter
  in the deep shadows.

The usual gamma is 2.2. One revision used 1.6, which lifts every channel and
so changes where the shadows sit after normalization.
"""

import numpy as np

from luma_ascii.constants import (
    GammaTransfer,
    LUMA_WEIGHTS,
    SRGB_LINEAR_SLOPE,
    SRGB_LINEAR_THRESHOLD,
    SRGB_OFFSET,
    STANDARD_GAMMA,
)
from luma_ascii.pixels import PixelBuffer


def transfer(values, gamma: float = STANDARD_GAMMA,
             mode: GammaTransfer = GammaTransfer.PIECEWISE) -> np.ndarray:
    """
    Apply the transfer function to channel values already scaled to [0, 1].

    Args:
        values: Scalar or array of channel values
        gamma: Exponent of the power segment
        mode: PIECEWISE (sRGB) or DIRECT

    Returns:
        Float array of the same shape
    """
    values = np.asarray(values, dtype=np.float64)
    if mode is GammaTransfer.DIRECT:
        return np.power(values, gamma)
    return np.where(
        values <= SRGB_LINEAR_THRESHOLD,
        values / SRGB_LINEAR_SLOPE,
        np.power((values + SRGB_OFFSET) / (1.0 + SRGB_OFFSET), gamma),
    )


def luminance(r: int, g: int, b: int, gamma: float = STANDARD_GAMMA,
              mode: GammaTransfer = GammaTransfer.PIECEWISE) -> float:
    """Luminance of a single pixel given 0-255 channel values."""
    channels = transfer(np.array([r, g, b], dtype=np.float64) / 255.0, gamma, mode)
    wr, wg, wb = LUMA_WEIGHTS
    return float(wr * channels[0] + wg * channels[1] + wb * channels[2])


def luminance_array(buffer: PixelBuffer, gamma: float = STANDARD_GAMMA,
                    mode: GammaTransfer = GammaTransfer.PIECEWISE) -> np.ndarray:
    """
    Luminance of every pixel in a buffer.

    Args:
        buffer: RGBA pixel buffer
        gamma: Exponent of the power segment
        mode: Transfer function

    Returns:
        (height, width) float64 array in row-major order
    """
    rgb = buffer.to_array()[:, :, :3].astype(np.float64) / 255.0
    linear = transfer(rgb, gamma, mode)
    return linear @ np.array(LUMA_WEIGHTS, dtype=np.float64)

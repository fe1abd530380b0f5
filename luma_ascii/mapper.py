#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Character Mapping
================================================
Quantizes normalized brightness to glyph indices and assembles the text.

Ramps are ordered densest glyph first. Bright pixels (normalized 1.0) land on
index 0 and dark pixels on the last index, which on the light-on-dark page
reads as a bright glyph for a bright pixel.
"""

from typing import List

import numpy as np

from luma_ascii.constants import DARKNESS_BIAS_FRACTION


def darkness_offset(ramp_length: int) -> int:
    """Number of ramp positions the darkness bias shifts by."""
    return int(ramp_length * DARKNESS_BIAS_FRACTION)


def glyph_indices(normalized: np.ndarray, ramp_length: int,
                  darkness_bias: bool = False) -> np.ndarray:
    """
    Convert normalized values to ramp indices.

    Args:
        normalized: Array of values, clamped to [0, 1] here; NaN counts as 0
        ramp_length: Number of glyphs in the ramp
        darkness_bias: Shift every index toward the end of the ramp

    Returns:
        Integer array of indices in [0, ramp_length - 1]
    """
    values = np.clip(np.nan_to_num(np.asarray(normalized, dtype=np.float64), nan=0.0), 0.0, 1.0)
    indices = np.floor((1.0 - values) * (ramp_length - 1)).astype(np.intp)
    if darkness_bias:
        indices = indices + darkness_offset(ramp_length)
    return np.clip(indices, 0, ramp_length - 1)


def glyph_for(normalized: float, ramp: str, darkness_bias: bool = False) -> str:
    """Glyph for a single normalized value."""
    return ramp[int(glyph_indices(np.array([normalized]), len(ramp), darkness_bias)[0])]


def render_lines(indices: np.ndarray, ramp: str, spacer: str = ' ') -> List[str]:
    """Render a 2D index grid to one string per row, each glyph followed by the spacer."""
    glyphs = np.asarray(list(ramp))
    grid = glyphs[indices]
    return [spacer.join(row) + spacer for row in grid]


def join_lines(lines: List[str]) -> str:
    """Join rows with every row, including the last, newline-terminated."""
    return ''.join(line + '\n' for line in lines)

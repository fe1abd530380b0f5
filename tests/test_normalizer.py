import numpy as np
import pytest

from luma_ascii.config import ConversionConfig, Presets
from luma_ascii.constants import ContrastMode, NormalizationPolicy
from luma_ascii.normalizer import (
    LuminanceStats,
    apply_contrast,
    contrast_exponent,
    normalize,
    normalize_adaptive,
    normalize_minmax,
)


@pytest.fixture
def outlier_lum():
    # Mostly mid-grey with one black and one white outlier
    return np.array([0.5] * 20 + [0.45, 0.55, 0.0, 1.0])


def test_stats_use_population_std():
    lum = np.array([0.0, 1.0])
    stats = LuminanceStats.from_array(lum)
    assert stats.min == 0.0
    assert stats.max == 1.0
    assert stats.mean == 0.5
    assert stats.std == pytest.approx(0.5)


def test_minmax_stretches_to_unit_range():
    lum = np.array([[0.2, 0.4], [0.6, 0.3]])
    out = normalize_minmax(lum, LuminanceStats.from_array(lum))
    assert out.min() == 0.0
    assert out.max() == 1.0
    assert out[1, 1] == pytest.approx(0.25)


@pytest.mark.parametrize('value', [0.0, 0.3, 1.0])
def test_minmax_uniform_image_keeps_absolute_value(value):
    lum = np.full((3, 4), value)
    out = normalize_minmax(lum, LuminanceStats.from_array(lum))
    assert not np.isnan(out).any()
    assert np.all(out == value)


def test_adaptive_clamps_outliers_and_interpolates(outlier_lum):
    stats = LuminanceStats.from_array(outlier_lum)
    lower, upper = stats.adaptive_bounds(2.0)
    assert stats.min < lower < upper < stats.max

    out = normalize_adaptive(outlier_lum, stats, 2.0)

    assert out[-2] == 0.0
    assert out[-1] == 1.0
    assert out[20] == pytest.approx((0.45 - lower) / (upper - lower))
    assert out[21] == pytest.approx((0.55 - lower) / (upper - lower))


def test_adaptive_bounds_never_leave_data_range():
    lum = np.array([0.0, 1.0])
    lower, upper = LuminanceStats.from_array(lum).adaptive_bounds(2.0)
    assert (lower, upper) == (0.0, 1.0)


def test_adaptive_uniform_image_is_constant():
    lum = np.full(10, 0.8)
    out = normalize_adaptive(lum, LuminanceStats.from_array(lum))
    assert np.allclose(out, 0.8)


def test_fixed_contrast_exponent():
    stats = LuminanceStats(0.0, 1.0, 0.5, 0.2)
    config = Presets.classic()
    assert contrast_exponent(stats, config) == 1.8


def test_variance_scaled_contrast_exponent():
    stats = LuminanceStats(0.0, 1.0, 0.5, 0.2)
    config = ConversionConfig(contrast_mode=ContrastMode.VARIANCE_SCALED, contrast_k=2.0)
    assert contrast_exponent(stats, config) == pytest.approx(1.4)


def test_apply_contrast_keeps_endpoints_and_darkens_midtones():
    out = apply_contrast(np.array([0.0, 0.5, 1.0]), 1.8)
    assert out[0] == 0.0
    assert out[1] < 0.5
    assert out[2] == 1.0


@pytest.mark.parametrize('policy', list(NormalizationPolicy))
def test_normalize_output_in_unit_range(policy, outlier_lum):
    config = ConversionConfig(normalization=policy)
    out = normalize(outlier_lum, config)
    assert out.shape == outlier_lum.shape
    assert out.min() >= 0.0
    assert out.max() <= 1.0

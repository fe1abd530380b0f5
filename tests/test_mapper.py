import numpy as np
import pytest

from luma_ascii.constants import CharacterSet
from luma_ascii.mapper import darkness_offset, glyph_for, glyph_indices, join_lines, render_lines

RAMP = CharacterSet.DETAILED


def test_endpoints():
    idx = glyph_indices(np.array([1.0, 0.0]), len(RAMP))
    assert idx.tolist() == [0, len(RAMP) - 1]


def test_out_of_range_values_are_clamped():
    idx = glyph_indices(np.array([-0.5, 1.5, np.nan, np.inf]), len(RAMP))
    assert idx.tolist() == [len(RAMP) - 1, 0, len(RAMP) - 1, 0]


def test_indices_always_within_ramp():
    values = np.linspace(-1.0, 2.0, 301)
    for bias in (False, True):
        idx = glyph_indices(values, len(RAMP), bias)
        assert idx.min() >= 0
        assert idx.max() <= len(RAMP) - 1


def test_monotonic_in_brightness():
    idx = glyph_indices(np.linspace(0.0, 1.0, 500), len(RAMP))
    assert np.all(np.diff(idx) <= 0)


def test_darkness_bias_shifts_uniformly_and_clamps():
    offset = darkness_offset(len(RAMP))
    assert offset == int(len(RAMP) * 0.1)
    assert glyph_indices(np.array([1.0]), len(RAMP), darkness_bias=True)[0] == offset
    assert glyph_indices(np.array([0.0]), len(RAMP), darkness_bias=True)[0] == len(RAMP) - 1


def test_single_glyph_ramp():
    assert glyph_indices(np.array([0.0, 0.5, 1.0]), 1, True).tolist() == [0, 0, 0]


def test_glyph_for():
    assert glyph_for(1.0, "#. ") == '#'
    assert glyph_for(0.0, "#. ") == ' '
    assert glyph_for(0.5, "#. ") == '.'


def test_render_lines_adds_spacer_after_every_glyph():
    lines = render_lines(np.array([[0, 1], [2, 2]]), "#. ", spacer='_')
    assert lines == ['#_._', ' _ _']


def test_render_lines_without_spacer():
    assert render_lines(np.array([[2, 0]]), "#. ", spacer='') == [' #']


def test_join_lines_terminates_every_row():
    assert join_lines(['ab', 'cd']) == 'ab\ncd\n'
    assert join_lines([]) == ''


@pytest.mark.parametrize('name', CharacterSet.names())
def test_preset_ramps_render(name):
    ramp = CharacterSet.get_preset(name)
    idx = glyph_indices(np.linspace(0, 1, 10).reshape(2, 5), len(ramp))
    lines = render_lines(idx, ramp, ' ')
    assert len(lines) == 2
    assert all(len(line) == 10 for line in lines)

"""Unit tests for vectorised gradient sampling."""

import math

import numpy as np
import pytest

from huewheel.core.gradient import sample_angles, sample_bar, sample_wheel, to_argb_words
from huewheel.core.wheel_math import angle_to_color
from huewheel.models import HSV
from huewheel.picker import ChannelBar


class TestSampleWheel:
    """Test wheel sampling."""

    @pytest.mark.unit
    def test_six_steps_are_the_anchors(self):
        words = to_argb_words(sample_wheel(6))
        assert [int(w) for w in words] == [
            0xFFFF0000,
            0xFFFF00FF,
            0xFF0000FF,
            0xFF00FFFF,
            0xFF00FF00,
            0xFFFFFF00,
        ]

    @pytest.mark.unit
    def test_twelve_steps_include_half_way_colors(self):
        words = to_argb_words(sample_wheel(12))
        assert int(words[1]) == 0xFFFF0080

    @pytest.mark.unit
    def test_shape_and_dtype(self):
        samples = sample_wheel(10)
        assert samples.shape == (10, 4)
        assert samples.dtype == np.uint8

    @pytest.mark.unit
    @pytest.mark.parametrize("steps", [0, -3])
    def test_rejects_non_positive_steps(self, steps):
        with pytest.raises(ValueError):
            sample_wheel(steps)

    @pytest.mark.unit
    def test_matches_scalar_math(self):
        angles = np.array([-1.2, 0.0, 0.3, 1.0, 2.5, math.pi, 4.2, math.nextafter(2 * math.pi, 0.0)])
        samples = sample_angles(angles)
        for angle, row in zip(angles, samples):
            color = angle_to_color(float(angle))
            assert tuple(int(v) for v in row) == (color.a, color.r, color.g, color.b)

    @pytest.mark.unit
    def test_non_finite_angles_give_red(self):
        words = to_argb_words(sample_angles(np.array([math.nan, math.inf, -math.inf, 0.0])))
        assert [int(w) for w in words] == [0xFFFF0000] * 4


class TestSampleBar:
    """Test bar sampling."""

    @pytest.mark.unit
    def test_opacity_bar_runs_transparent_to_opaque(self):
        bar = ChannelBar.opacity(length=240, margin=0)
        bar.set_base(HSV(hue=240.0, saturation=1.0, value=1.0), 255)

        words = to_argb_words(sample_bar(bar, 3))
        assert [int(w) for w in words] == [0x000000FF, 0x800000FF, 0xFF0000FF]

    @pytest.mark.unit
    def test_matches_color_at(self):
        bar = ChannelBar.saturation_value(length=100, margin=0)
        samples = sample_bar(bar, 5)
        for x, row in zip([0.0, 25.0, 50.0, 75.0, 100.0], samples):
            color = bar.color_at(x)
            assert tuple(int(v) for v in row) == (color.a, color.r, color.g, color.b)

    @pytest.mark.unit
    def test_rejects_single_step(self):
        with pytest.raises(ValueError):
            sample_bar(ChannelBar.value(), 1)

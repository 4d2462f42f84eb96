"""Tests for SRT transforms and color decoding"""

import math

import numpy as np
import pytest

from spinelib.core.color import decode_color
from spinelib.core.errors import ColorDecodeError
from spinelib.core.transform import SRT


def test_srt_defaults_to_identity():
    """A default SRT leaves points unchanged"""
    srt = SRT()
    assert srt == SRT.identity()
    assert srt.transform((3.0, -2.0)) == pytest.approx((3.0, -2.0))


def test_srt_from_degrees():
    """Document units are converted and omitted fields filled"""
    srt = SRT.from_degrees(rotation=90.0, x=2.0)
    assert srt.rotation == pytest.approx(math.pi / 2.0)
    assert srt.scale == (1.0, 1.0)
    assert srt.position == (2.0, 0.0)


def test_srt_transform_order():
    """Points are scaled, then rotated, then translated"""
    srt = SRT(scale_x=2.0, scale_y=3.0, rotation=math.pi / 2.0, x=10.0, y=20.0)
    x, y = srt.transform((1.0, 1.0))
    # scale -> (2, 3), rotate 90 -> (-3, 2), translate -> (7, 22)
    assert (x, y) == pytest.approx((7.0, 22.0))


def test_srt_transform_points_matches_transform():
    """Vectorized transform agrees with the single point transform"""
    srt = SRT(scale_x=1.5, scale_y=0.5, rotation=0.7, x=-3.0, y=4.0)
    points = np.array([[0.0, 0.0], [1.0, 2.0], [-4.0, 0.5]])
    expected = np.array([srt.transform(p) for p in points])
    assert np.allclose(srt.transform_points(points), expected)


def test_srt_compose():
    """Composition adds translation and rotation and multiplies scale"""
    a = SRT(scale_x=2.0, scale_y=3.0, rotation=0.5, x=1.0, y=2.0)
    b = SRT(scale_x=0.5, scale_y=2.0, rotation=0.25, x=-1.0, y=5.0)
    c = a.compose(b)
    assert (c.scale_x, c.scale_y) == (1.0, 6.0)
    assert c.rotation == 0.75
    assert (c.x, c.y) == (0.0, 7.0)
    assert c.cos == pytest.approx(math.cos(0.75))


def test_srt_is_immutable():
    """SRT values cannot be modified in place"""
    srt = SRT()
    with pytest.raises(AttributeError):
        srt.rotation = 1.0


def test_decode_color():
    """RRGGBBAA strings decode to byte tuples"""
    assert decode_color("FF000080") == (255, 0, 0, 128)
    assert decode_color("00ff00ff") == (0, 255, 0, 255)


def test_decode_color_default():
    """A missing color decodes to opaque white"""
    assert decode_color(None) == (255, 255, 255, 255)


@pytest.mark.parametrize("value", ["red", "FFFFFF", "FFFFFFFFFF", "GG000000", 42, "FF FF FF FF", " ffffff80\n", "FFFF FFFF"])
def test_decode_color_rejects_malformed(value):
    """Malformed colors raise ColorDecodeError"""
    with pytest.raises(ColorDecodeError):
        decode_color(value)

import pytest

from hexconv.core import conversions as conv
from hexconv.core.errors import DecodeError, InvalidLength


forest_green = (34, 139, 34)


def test_rgb_to_hex_forest_green():
    assert conv.rgb_to_hex(*forest_green) == "228B22"


def test_rgb_to_hex_zero_pads():
    assert conv.rgb_to_hex(0, 10, 255) == "000AFF"


def test_rgb_to_hsl_forest_green():
    h, s, l = conv.rgb_to_hsl(*forest_green)
    assert h == 120
    assert s == pytest.approx(60.7)
    assert l == pytest.approx(33.9)


def test_rgb_to_hsv_forest_green():
    assert conv.rgb_to_hsv(*forest_green) == (120, pytest.approx(75.5), pytest.approx(54.5))


def test_rgb_to_cmyk_forest_green():
    assert conv.rgb_to_cmyk(*forest_green) == (76, 0, 76, 45)


@pytest.mark.parametrize("rgb, hue", [
    ((255, 0, 0), 0),
    ((255, 255, 0), 60),
    ((0, 255, 0), 120),
    ((0, 255, 255), 180),
    ((0, 0, 255), 240),
    ((255, 0, 255), 300),
    ((255, 0, 1), 0),
])
def test_hue_sectors(rgb, hue):
    assert conv.rgb_to_hsl(*rgb)[0] == hue
    assert conv.rgb_to_hsv(*rgb)[0] == hue


@pytest.mark.parametrize("v", [0, 1, 77, 128, 254, 255])
def test_achromatic_has_no_hue_or_saturation(v):
    h, s, _ = conv.rgb_to_hsl(v, v, v)
    assert (h, s) == (0, 0.0)
    h, s, _ = conv.rgb_to_hsv(v, v, v)
    assert (h, s) == (0, 0.0)


def test_hsl_lightness_of_extremes():
    assert conv.rgb_to_hsl(0, 0, 0)[2] == 0.0
    assert conv.rgb_to_hsl(255, 255, 255)[2] == 100.0
    assert conv.rgb_to_hsv(255, 255, 255)[2] == 100.0


def test_cmyk_black_and_white():
    assert conv.rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)
    assert conv.rgb_to_cmyk(255, 255, 255) == (0, 0, 0, 0)


def test_cmyk_to_rgb_forest_green():
    r, g, b = conv.cmyk_to_rgb(76, 0, 76, 45)
    for got, want in zip((r, g, b), forest_green):
        assert abs(got - want) <= 1


def test_cmyk_to_rgb_extremes():
    assert conv.cmyk_to_rgb(0, 0, 0, 0) == (255, 255, 255)
    assert conv.cmyk_to_rgb(0, 0, 0, 100) == (0, 0, 0)
    assert conv.cmyk_to_rgb(100, 100, 100, 0) == (0, 0, 0)


def test_hex_to_rgb():
    assert conv.hex_to_rgb("228B22") == forest_green
    assert conv.hex_to_rgb("ff0000") == (255, 0, 0)


@pytest.mark.parametrize("bad", ["228B2", "GG0000", "12 456"])
def test_hex_to_rgb_decode_errors(bad):
    with pytest.raises(DecodeError):
        conv.hex_to_rgb(bad)


@pytest.mark.parametrize("bad", ["", "FFFF", "FFFFFFFF"])
def test_hex_to_rgb_wrong_byte_count(bad):
    with pytest.raises(InvalidLength):
        conv.hex_to_rgb(bad)


def test_round_helpers():
    assert conv.round_half_up(0.5) == 1
    assert conv.round_half_up(2.5) == 3
    assert conv.round_half_up(2.49) == 2
    assert conv.round1(33.92) == 33.9
    assert conv.round1(60.75) == pytest.approx(60.8)

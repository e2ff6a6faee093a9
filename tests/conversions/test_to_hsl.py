import numpy as np

from chromaconv.conversions.to_hsl import rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from chromaconv.types.color_types import HSL
from samples import samples_rgb_hsl, samples_hsv_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = rgb_to_hsl((r, g, b))

        assert abs(h_out - h_exp) < 1e-3
        assert abs(s_out - s_exp) < 1e-3
        assert abs(l_out - l_exp) < 1e-3


def test_rgb_to_hsl_red_is_exact():
    assert rgb_to_hsl((255, 0, 0)) == HSL(0, 1, 0.5)


def test_rgb_to_hsl_returns_value_type():
    hsl = rgb_to_hsl((10, 20, 30))
    assert isinstance(hsl, HSL)
    assert hsl.h == hsl[0]


def test_rgb_to_hsl_achromatic_has_no_hue_or_saturation():
    for level in (0, 1, 127, 128, 254, 255):
        h, s, l = rgb_to_hsl((level, level, level))
        assert h == 0
        assert s == 0
        assert abs(l - level / 255) < 1e-12


def test_rgb_to_hsl_hue_stays_below_360(rgb_grid):
    for rgb in rgb_grid:
        h, _, _ = rgb_to_hsl(tuple(int(c) for c in rgb))
        assert 0 <= h < 360


def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    result = np_rgb_to_hsl(the_matrix)
    assert result.shape == the_matrix.shape
    assert np.allclose(result, expected, atol=1e-3)


def test_rgb_to_hsl_numpy_matches_scalar(rgb_grid):
    result = np_rgb_to_hsl(rgb_grid)
    expected = np.array([rgb_to_hsl(tuple(int(c) for c in rgb)) for rgb in rgb_grid])
    assert np.allclose(result, expected, atol=1e-9)


def test_rgb_to_hsl_numpy_single_color():
    result = np_rgb_to_hsl(np.array([255, 0, 0]))
    assert result.shape == (3,)
    assert np.allclose(result, [0, 1, 0.5])


def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl((h, s, v))

        assert h_out == h_exp
        assert abs(s_out - s_exp) < 1e-9
        assert abs(l_out - l_exp) < 1e-9


def test_hsv_to_hsl_white_and_black_have_zero_saturation():
    assert hsv_to_hsl((90.0, 0.0, 1.0)).s == 0
    assert hsv_to_hsl((90.0, 0.5, 0.0)).s == 0


def test_hsv_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsv_hsl.keys()))
    expected = np.array(list(samples_hsv_hsl.values()))
    result = np_hsv_to_hsl(the_matrix)
    assert np.allclose(result, expected, atol=1e-9)
    assert not np.any(np.isnan(result))

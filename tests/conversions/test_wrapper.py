import warnings

import numpy as np
import pytest

from chromaconv.conversions import convert, np_convert, InvalidColorWarning
from chromaconv.types.color_types import RGB, RGBA, HSL, HSV, CMYK


def test_convert_direct_pairs():
    assert convert((255, 0, 0), "rgb", "hsl") == HSL(0, 1, 0.5)
    assert convert((0, 1, 0.5), "hsl", "rgb") == RGB(255, 0, 0)
    assert convert(0xFFFFFF, "hex", "rgb") == RGB(255, 255, 255)
    assert convert((255, 255, 255), "rgb", "hex") == 0xFFFFFF
    assert convert((0, 0, 0), "rgb", "cmyk") == CMYK(0, 0, 0, 1)
    assert convert((1, 2, 3), "rgb", "rgba") == RGBA(1, 2, 3, 255)
    assert convert((1, 2, 3, 4), "rgba", "rgb") == RGB(1, 2, 3)


def test_convert_is_case_insensitive():
    assert convert((255, 0, 0), "RGB", "Hsv") == HSV(0, 1, 1)


def test_convert_routes_through_rgb():
    assert convert(0xFF0000, "hex", "hsl") == HSL(0, 1, 0.5)
    assert convert((0, 1, 1, 0), "cmyk", "hex") == 0xFF0000
    assert convert((120, 1, 1), "hsv", "rgba") == RGBA(0, 255, 0, 255)


def test_convert_hsl_hsv_skips_rgb():
    # A lossless path keeps precision that an 8-bit detour would drop
    h, s, v = convert((210.0, 0.5, 0.25), "hsl", "hsv")
    assert h == 210.0
    assert abs(s - 2 / 3) < 1e-12
    assert abs(v - 0.375) < 1e-12


def test_convert_same_space_returns_value_type():
    assert convert((1, 2, 3), "rgb", "rgb") == RGB(1, 2, 3)
    assert isinstance(convert((1, 2, 3), "rgb", "rgb"), RGB)


def test_convert_unknown_space():
    with pytest.raises(ValueError, match="Unknown space"):
        convert((1, 2, 3), "rgb", "lab")


def test_convert_wrong_channel_count():
    with pytest.raises(ValueError):
        convert((1, 2), "rgb", "hsl")
    with pytest.raises(ValueError):
        convert((1, 2, 3), "hex", "rgb")


def test_convert_warns_on_invalid_input():
    with pytest.warns(InvalidColorWarning):
        result = convert((400.0, 0.5, 0.5), "hsl", "rgb", warn_invalid=True)
    assert result == convert((400.0, 0.5, 0.5), "hsl", "rgb")


def test_convert_valid_input_is_silent():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        convert((10.0, 0.5, 0.5), "hsl", "rgb", warn_invalid=True)
        convert((400.0, 0.5, 0.5), "hsl", "rgb")


def test_np_convert():
    rgb = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 0]], dtype=np.uint8)
    hsl = np_convert(rgb, "rgb", "hsl")
    assert np.allclose(hsl, [[0, 1, 0.5], [120, 1, 0.5], [0, 0, 0]])

    codes = np_convert(rgb, "rgb", "hex")
    assert codes.tolist() == [0xFF0000, 0x00FF00, 0]

    back = np_convert(codes, "hex", "hsv")
    assert np.allclose(back, [[0, 1, 1], [120, 1, 1], [0, 0, 0]])


def test_np_convert_alpha():
    rgb = np.zeros((2, 2, 3), dtype=np.uint8)
    rgba = np_convert(rgb, "rgb", "rgba")
    assert rgba.shape == (2, 2, 4)
    assert np.all(rgba[..., 3] == 255)
    assert np_convert(rgba, "rgba", "rgb").shape == (2, 2, 3)


def test_np_convert_shape_mismatch():
    with pytest.raises(ValueError, match="last dimension"):
        np_convert(np.zeros((4, 4)), "rgb", "hsl")


def test_np_convert_rejects_rgb_image_as_hex():
    rgb = np.zeros((4, 3), dtype=np.uint8)
    with pytest.raises(TypeError, match="hex expects"):
        np_convert(rgb, "hex", "rgb")
    with pytest.raises(TypeError):
        np_convert(np.array([0.5, 1.5]), "hex", "hsl")


def test_np_convert_hex_keeps_shape():
    codes = np.array([[0xFF0000, 0x00FF00, 0x0000FF]], dtype=np.int32)
    assert np_convert(codes, "hex", "rgb").shape == (1, 3, 3)

import numpy as np

from chromaconv.operations.websafe import hex_websafe, rgb_websafe, np_hex_websafe, snap_byte
from chromaconv.types.color_types import RGB
from chromaconv.types.limits import WEBSAFE_LEVELS
from samples import samples_websafe


def test_hex_websafe():
    for code, expected in samples_websafe.items():
        assert hex_websafe(code) == expected


def test_hex_websafe_example():
    assert hex_websafe(0x112233) == 0x003333


def test_snap_byte_thresholds():
    boundaries = {
        0x00: 0x00, 0x19: 0x00, 0x1A: 0x33,
        0x4C: 0x33, 0x4D: 0x66,
        0x7F: 0x66, 0x80: 0x99,
        0xB2: 0x99, 0xB3: 0xCC,
        0xE5: 0xCC, 0xE6: 0xFF, 0xFF: 0xFF,
    }
    for value, expected in boundaries.items():
        assert snap_byte(value) == expected


def test_snap_byte_lands_on_palette(all_bytes):
    for value in all_bytes:
        snapped = snap_byte(int(value))
        assert snapped in WEBSAFE_LEVELS
        assert snap_byte(snapped) == snapped


def test_hex_websafe_is_idempotent(all_bytes):
    for value in all_bytes:
        value = int(value)
        code = (value << 16) | ((255 - value) << 8) | (value ^ 0x5A)
        once = hex_websafe(code)
        assert hex_websafe(once) == once


def test_rgb_websafe():
    assert rgb_websafe((0x11, 0x22, 0x33)) == RGB(0x00, 0x33, 0x33)


def test_np_hex_websafe_matches_scalar():
    codes = np.arange(0, 0x1000000, 0x010203, dtype=np.int64)
    result = np_hex_websafe(codes)
    assert result.tolist() == [hex_websafe(int(c)) for c in codes]


def test_np_hex_websafe_samples():
    codes = np.array(list(samples_websafe.keys()), dtype=np.int64)
    assert np_hex_websafe(codes).tolist() == list(samples_websafe.values())

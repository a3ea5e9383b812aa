import struct
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from mtklogo.color import ColorMode
from mtklogo.errors import MalformedPixelData
from mtklogo.pixels import (device_to_rgba, infer_height, rgb565_to_rgba, rgba_to_device,
                            rgba_to_rgb565, strip_alpha)

from conftest import random_rgba

LOSSLESS = [ColorMode.RGBA_BE, ColorMode.RGBA_LE, ColorMode.BGRA_BE, ColorMode.BGRA_LE]
LOSSY = [ColorMode.RGB565_BE, ColorMode.RGB565_LE]


def words(data):
    return list(struct.unpack(f">{len(data) // 4}I", data))


@pytest.mark.parametrize("mode", LOSSLESS)
def test_lossless_modes(mode):
    rgba = random_rgba(8, 5, seed=3)
    device = rgba_to_device(mode, rgba, 8, 5)
    assert len(device) == len(rgba)
    assert device_to_rgba(mode, device, 8, 5) == rgba


@pytest.mark.parametrize("mode", LOSSY)
def test_rgb565_is_lossy(mode):
    rgba = random_rgba(8, 5, seed=4)
    device = rgba_to_device(mode, rgba, 8, 5)
    assert len(device) == len(rgba) // 2
    back = device_to_rgba(mode, device, 8, 5)
    assert words(back) == [(w & 0xF8FCF800) | 0xFF for w in words(rgba)]


def test_rgba_big_endian_is_identity():
    rgba = bytes([1, 2, 3, 4])
    assert rgba_to_device(ColorMode.RGBA_BE, rgba, 1, 1) == rgba


def test_bgra_byte_layout():
    rgba = bytes([0x11, 0x22, 0x33, 0x44])
    assert rgba_to_device(ColorMode.BGRA_BE, rgba, 1, 1) == bytes([0x33, 0x22, 0x11, 0x44])
    assert rgba_to_device(ColorMode.BGRA_LE, rgba, 1, 1) == bytes([0x44, 0x11, 0x22, 0x33])


def test_rgba_little_endian_swaps_red_and_blue():
    rgba = bytes([0x11, 0x22, 0x33, 0x44])
    assert rgba_to_device(ColorMode.RGBA_LE, rgba, 1, 1) == bytes([0x44, 0x11, 0x22, 0x33])


@pytest.mark.parametrize("color32,color16", [
    (0xFFFFFF00, 0xFFFF),
    (0xFF000000, 0xF800),
    (0x00FF0000, 0x07E0),
    (0x0000FF00, 0x001F),
])
def test_rgb565_bitwise(color32, color16):
    assert int(rgba_to_rgb565(np.array([color32], dtype=np.uint32))[0]) == color16
    assert int(rgb565_to_rgba(np.array([color16], dtype=np.uint16))[0]) == (color32 & 0xF8FCF800) | 0xFF


def test_rgb565_endianness():
    red = 0xF80000FF
    assert words(device_to_rgba(ColorMode.RGB565_BE, bytes([0xF8, 0x00]), 1, 1)) == [red]
    assert words(device_to_rgba(ColorMode.RGB565_LE, bytes([0x00, 0xF8]), 1, 1)) == [red]
    assert rgba_to_device(ColorMode.RGB565_LE, struct.pack(">I", red), 1, 1) == bytes([0x00, 0xF8])


@pytest.mark.parametrize("mode", list(ColorMode))
def test_malformed_device_buffer(mode):
    with pytest.raises(MalformedPixelData):
        device_to_rgba(mode, b"\x00" * (mode.bytes_per_pixel * 4 - 1), 2, 2)


def test_malformed_rgba_buffer():
    with pytest.raises(MalformedPixelData):
        rgba_to_device(ColorMode.BGRA_BE, b"\x00" * 15, 2, 2)
    with pytest.raises(MalformedPixelData):
        rgba_to_device(ColorMode.BGRA_BE, b"", 0, 0)


@pytest.mark.parametrize("size,width,mode,expected", [
    (720 * 1280 * 4, 720, ColorMode.RGBA_LE, 1280),
    (720 * 1280 * 4, 720, ColorMode.RGB565_BE, 2560),
    (720 * 1280 * 2, 720, ColorMode.BGRA_BE, 640),
    (100, 720, ColorMode.RGBA_BE, None),
    (720 * 4 + 1, 720, ColorMode.RGBA_BE, None),
    (0, 10, ColorMode.RGB565_LE, None),
    (40, 0, ColorMode.RGB565_LE, None),
])
def test_infer_height(size, width, mode, expected):
    assert infer_height(size, width, mode) == expected


def test_strip_alpha():
    rgba = bytes([1, 2, 3, 4, 5, 6, 7, 8])
    assert strip_alpha(rgba) == bytes([1, 2, 3, 255, 5, 6, 7, 255])
    with pytest.raises(MalformedPixelData):
        strip_alpha(b"\x00" * 5)


def test_parallel_matches_sequential():
    images = [random_rgba(16, 9, seed=s) for s in range(8)]

    def convert(rgba):
        return [rgba_to_device(m, rgba, 16, 9) for m in ColorMode]

    sequential = [convert(i) for i in images]
    with ThreadPoolExecutor(max_workers=4) as pool:
        parallel = list(pool.map(convert, images))
    assert parallel == sequential

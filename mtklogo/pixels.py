"""
Pixel conversion between device colour modes and the RGBA pivot.

The pivot is RGBA8888 stored as one big-endian u32 per pixel, i.e. the
bytes R, G, B, A in that order (what Pillow calls "RGBA"). Every device
mode converts to and from the pivot, never directly to another mode.
"""

from typing import Optional

import numpy as np

from .color import ColorMode, Endian, Layout
from .errors import MalformedPixelData

PIVOT_BPP = 4
OPAQUE = 0xFF

_U32 = {Endian.BIG: ">u4", Endian.LITTLE: "<u4"}
_U16 = {Endian.BIG: ">u2", Endian.LITTLE: "<u2"}


def _check(data, w: int, h: int, bpp: int, what: str) -> None:
    if w <= 0 or h <= 0:
        raise MalformedPixelData(f"invalid dimensions {w}x{h}")
    expected = w * h * bpp
    if len(data) != expected:
        raise MalformedPixelData(
            f"{what}: {len(data)} bytes, expected {w}x{h}x{bpp} = {expected}")


def _words(data, dtype) -> np.ndarray:
    return np.frombuffer(bytes(data), dtype=dtype).astype(np.uint32)


def swap_red_blue(color32: np.ndarray) -> np.ndarray:
    """RGBA <-> BGRA on u32 words (R in bits 31-24, B in bits 15-8)."""
    r = (color32 & 0xFF000000) >> 16
    b = (color32 & 0x0000FF00) << 16
    ga = color32 & 0x00FF00FF
    return (r | b | ga).astype(np.uint32)


def rgba_to_rgb565(color32: np.ndarray) -> np.ndarray:
    r = (color32 & 0xF8000000) >> 16
    g = (color32 & 0x00FC0000) >> 13
    b = (color32 & 0x0000F800) >> 11
    return (r | g | b).astype(np.uint16)


def rgb565_to_rgba(color16: np.ndarray) -> np.ndarray:
    # There is no alpha in rgb565: expanded pixels are fully opaque.
    c = color16.astype(np.uint32)
    r = (c & 0xF800) << 16
    g = (c & 0x07E0) << 13
    b = (c & 0x001F) << 11
    return (r | g | b | OPAQUE).astype(np.uint32)


# One (pivot -> device, device -> pivot) pair per layout.
# RGBA little endian goes through the same R/B swap as BGRA. It looks odd
# for a mode that should only reverse bytes, but captured firmware images
# were produced that way, so keep it bit for bit.

def _rgba_to_device(rgba: bytes, endian: Endian) -> bytes:
    if endian is Endian.BIG:
        return bytes(rgba)
    return swap_red_blue(_words(rgba, ">u4")).astype("<u4").tobytes()


def _rgba_from_device(device: bytes, endian: Endian) -> bytes:
    if endian is Endian.BIG:
        return bytes(device)
    return swap_red_blue(_words(device, "<u4")).astype(">u4").tobytes()


def _bgra_to_device(rgba: bytes, endian: Endian) -> bytes:
    return swap_red_blue(_words(rgba, ">u4")).astype(_U32[endian]).tobytes()


def _bgra_from_device(device: bytes, endian: Endian) -> bytes:
    return swap_red_blue(_words(device, _U32[endian])).astype(">u4").tobytes()


def _rgb565_to_device(rgba: bytes, endian: Endian) -> bytes:
    return rgba_to_rgb565(_words(rgba, ">u4")).astype(_U16[endian]).tobytes()


def _rgb565_from_device(device: bytes, endian: Endian) -> bytes:
    color16 = np.frombuffer(bytes(device), dtype=_U16[endian])
    return rgb565_to_rgba(color16).astype(">u4").tobytes()


_CONVERTERS = {
    Layout.RGBA: (_rgba_to_device, _rgba_from_device),
    Layout.BGRA: (_bgra_to_device, _bgra_from_device),
    Layout.RGB565: (_rgb565_to_device, _rgb565_from_device),
}


def rgba_to_device(mode: ColorMode, rgba, w: int, h: int) -> bytes:
    """Pivot RGBA (w*h*4 bytes) to the device encoding of `mode`."""
    _check(rgba, w, h, PIVOT_BPP, "rgba buffer")
    to_device, _ = _CONVERTERS[mode.layout]
    return to_device(rgba, mode.endian)


def device_to_rgba(mode: ColorMode, device, w: int, h: int) -> bytes:
    """Device bytes (w*h*bpp) to pivot RGBA."""
    _check(device, w, h, mode.bytes_per_pixel, f"{mode} buffer")
    _, from_device = _CONVERTERS[mode.layout]
    return from_device(device, mode.endian)


def infer_height(size: int, width: int, mode: ColorMode) -> Optional[int]:
    """
    Height of a `width` pixels wide image of `size` bytes in `mode`.
    None when no whole, non empty image fits.
    """
    if width <= 0:
        return None
    row = width * mode.bytes_per_pixel
    height = size // row
    if height == 0 or height * row != size:
        return None
    return height


def strip_alpha(rgba) -> bytes:
    """Force every pivot pixel to full opacity (helps deflate a bit)."""
    if len(rgba) % PIVOT_BPP:
        raise MalformedPixelData(f"rgba buffer of {len(rgba)} bytes is not made of whole pixels")
    pixels = np.frombuffer(bytes(rgba), dtype=np.uint8).reshape(-1, PIVOT_BPP).copy()
    pixels[:, 3] = OPAQUE
    return pixels.tobytes()

"""
PNG <-> pivot RGBA through Pillow.

PNG files are always written as 8-bit RGBA. When reading, whatever mode
the editor saved (RGB, P, LA, ...) is converted to RGBA first; sources
without alpha come out fully opaque.
"""

import io

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError, ImageEncodeError
from .pixels import device_to_rgba, rgba_to_device


def png_to_rgba(source):
    """source: path, bytes or binary file object. Returns (rgba, w, h)."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(source))
    try:
        with Image.open(source) as img:
            if img.mode != "RGBA":
                img = img.convert("RGBA")
            return img.tobytes(), img.width, img.height
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"cannot decode png: {e}") from e


def rgba_to_png(dest, rgba, w: int, h: int) -> None:
    """dest: path or binary file object."""
    try:
        img = Image.frombytes("RGBA", (w, h), bytes(rgba))
        img.save(dest, format="PNG")
    except (OSError, ValueError) as e:
        raise ImageEncodeError(f"cannot encode {w}x{h} png: {e}") from e


def read_png(mode, source):
    """PNG -> device bytes in `mode`. Returns (device, w, h)."""
    rgba, w, h = png_to_rgba(source)
    return rgba_to_device(mode, rgba, w, h), w, h


def write_png(mode, dest, device, w: int, h: int) -> None:
    rgba_to_png(dest, device_to_rgba(mode, device, w, h), w, h)

"""Device colour modes and the file names used for extracted slots."""

import enum
import os
from dataclasses import dataclass
from typing import Optional

from .errors import NamingError, UnknownColorMode


class Endian(enum.Enum):
    BIG = "be"
    LITTLE = "le"


class Layout(enum.Enum):
    RGBA = ("rgba", 4)
    BGRA = ("bgra", 4)
    RGB565 = ("rgb565", 2)

    def __init__(self, token, bpp):
        self.token = token
        self.bpp = bpp


class ColorMode(enum.Enum):
    """How the display controller expects pixels to be encoded."""
    RGBA_BE = (Layout.RGBA, Endian.BIG)
    RGBA_LE = (Layout.RGBA, Endian.LITTLE)
    BGRA_BE = (Layout.BGRA, Endian.BIG)
    BGRA_LE = (Layout.BGRA, Endian.LITTLE)
    RGB565_BE = (Layout.RGB565, Endian.BIG)
    RGB565_LE = (Layout.RGB565, Endian.LITTLE)

    def __init__(self, layout, endian):
        self.layout = layout
        self.endian = endian

    @property
    def bytes_per_pixel(self) -> int:
        return self.layout.bpp

    @property
    def canonical_name(self) -> str:
        return self.layout.token + self.endian.value

    def __str__(self):
        return self.canonical_name

    @classmethod
    def enumerate(cls):
        return list(cls)

    @classmethod
    def by_name(cls, name: str) -> "ColorMode":
        token = str(name).strip().lower()
        for mode in cls:
            if mode.canonical_name == token:
                return mode
        known = ", ".join(m.canonical_name for m in cls)
        raise UnknownColorMode(f"unknown color mode '{name}' (known: {known})")

    @classmethod
    def from_filename_suffix(cls, name: str) -> Optional["ColorMode"]:
        # Longest names first so that "rgb565le.png" never hits a shorter token.
        for mode in sorted(cls, key=lambda m: -len(m.canonical_name)):
            if name.endswith(f"{mode.canonical_name}.png"):
                return mode
        return None


RAW_SUFFIX = "raw.z"


@dataclass(frozen=True)
class ContentType:
    """Either a plain zlib blob (mode is None) or a PNG meant for `mode`."""
    mode: Optional[ColorMode] = None

    @property
    def is_zip(self) -> bool:
        return self.mode is None

    @classmethod
    def z(cls) -> "ContentType":
        return cls(None)

    @classmethod
    def png(cls, mode: ColorMode) -> "ContentType":
        return cls(mode)

    @classmethod
    def from_name(cls, name: str) -> Optional["ContentType"]:
        mode = ColorMode.from_filename_suffix(name)
        if mode is not None:
            return cls.png(mode)
        if name.endswith(RAW_SUFFIX):
            return cls.z()
        return None

    def __str__(self):
        return "raw z" if self.is_zip else str(self.mode)


@dataclass(frozen=True)
class FileInfo:
    id: int
    content_type: ContentType

    def filename(self) -> str:
        if self.content_type.is_zip:
            return f"logo_{self.id:03d}_{RAW_SUFFIX}"
        return f"logo_{self.id:03d}_{self.content_type.mode}.png"

    @classmethod
    def from_info(cls, id: int, zip: bool, mode: ColorMode) -> "FileInfo":
        return cls(id, ContentType.z() if zip else ContentType.png(mode))

    @classmethod
    def from_name(cls, name) -> "FileInfo":
        """Parse "xxx_<id>_<suffix>", only the base name of a path counts."""
        base = os.path.basename(os.fspath(name))
        tokens = base.split("_")
        if len(tokens) < 3:
            raise NamingError(f"cannot find '_id_' token in file name '{base}'")
        try:
            slot = int(tokens[1], 10)
        except ValueError:
            raise NamingError(f"cannot parse '_id_' token in file name '{base}'") from None
        if slot < 0:
            raise NamingError(f"negative slot id in file name '{base}'")
        content_type = ContentType.from_name(base)
        if content_type is None:
            raise NamingError(f"file name '{base}' does not look like a .z or a supported png format")
        return cls(slot, content_type)

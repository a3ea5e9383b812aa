"""Unpack and repack MTK logo.bin images."""

__version__ = "0.1.0"

from .color import ColorMode, ContentType, Endian, FileInfo
from .errors import (BadMagic, BadPadding, CodecError, FormatError, MalformedPixelData,
                     MtkLogoError, NamingError, NotALogo, SizeMismatch, UnknownColorMode,
                     UnknownType)
from .header import FILL, HEADER_SIZE, MAGIC, MtkHeader, MtkType
from .logo import LogoImage, LogoTable
from .pixels import device_to_rgba, infer_height, rgba_to_device

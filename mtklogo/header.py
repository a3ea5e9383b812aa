"""
MTK image header: the fixed 512-byte preamble of logo.bin (and friends).

  offset 0   magic   u32 BE  0x88168858
  offset 4   size    u32 LE
  offset 8   type    32 bytes ASCII, "LOGO", "KERNEL", ...
  offset 40  padding 472 bytes, usually 0xFF
"""

import enum
import struct
from dataclasses import dataclass
from typing import BinaryIO

from .errors import BadMagic, BadPadding, TruncatedData, UnknownType

MAGIC = 0x88168858
HEADER_SIZE = 512
FILL = 0xFF
TYPE_SIZE = 32
PADDING_SIZE = HEADER_SIZE - 8 - TYPE_SIZE  # 472


class MtkType(enum.Enum):
    RECOVERY = "RECOVERY"
    ROOTFS = "ROOTFS"
    KERNEL = "KERNEL"
    LOGO = "LOGO"

    @classmethod
    def from_bytes(cls, raw: bytes):
        """Match the type field by prefix, ignoring case. None if unknown."""
        upper = bytes(raw).upper()
        for t in cls:
            if upper.startswith(t.value.encode("ascii")):
                return t
        return None


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedData(f"{what}: expected {size} bytes, got {len(data)}")
    return data


@dataclass(frozen=True)
class MtkHeader:
    size: int
    mtk_type: MtkType = MtkType.LOGO

    @classmethod
    def read(cls, stream: BinaryIO, strict_padding: bool = False) -> "MtkHeader":
        (magic,) = struct.unpack(">I", read_exact(stream, 4, "magic"))
        if magic != MAGIC:
            raise BadMagic(f"missing magic number (got 0x{magic:08X}, expected 0x{MAGIC:08X})")
        (size,) = struct.unpack("<I", read_exact(stream, 4, "header size"))
        raw_type = read_exact(stream, TYPE_SIZE, "header type")
        mtk_type = MtkType.from_bytes(raw_type)
        if mtk_type is None:
            label = raw_type.split(b"\x00", 1)[0][:TYPE_SIZE]
            raise UnknownType(f"unknown MTK header type {label!r}")
        padding = read_exact(stream, PADDING_SIZE, "header padding")
        # Padding is not always 0xFF on real devices, only check on demand.
        if strict_padding and padding != bytes([FILL]) * PADDING_SIZE:
            raise BadPadding(f"header padding is not filled with 0x{FILL:02X}")
        return cls(size=size, mtk_type=mtk_type)

    def to_bytes(self) -> bytes:
        label = self.mtk_type.value.encode("ascii").ljust(TYPE_SIZE, b"\x00")
        return (struct.pack(">I", MAGIC)
                + struct.pack("<I", self.size)
                + label
                + bytes([FILL]) * PADDING_SIZE)

    def write(self, stream: BinaryIO) -> None:
        stream.write(self.to_bytes())

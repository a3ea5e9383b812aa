"""
logo.bin layout, right after the 512-byte MTK header:

  +512        logo_count  u32 LE
  +516        block_size  u32 LE   (same as the header size field)
  +520        offsets     logo_count * u32 LE, relative to +512
  +520+4N     blobs       zlib streams, back to back

Slot i spans [512+offsets[i], 512+offsets[i+1]), the last one ends at
512+block_size.
"""

import io
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Sequence, Tuple

from .errors import BadOffsets, NotALogo, SizeMismatch
from .header import HEADER_SIZE, MtkHeader, MtkType, read_exact

TABLE_WORDS = 2  # logo_count + block_size


def first_offset(logo_count: int) -> int:
    """First blob starts just after the offsets table."""
    return (TABLE_WORDS + logo_count) * 4


@dataclass
class LogoTable:
    header: MtkHeader
    logo_count: int
    block_size: int
    offsets: List[int] = field(default_factory=list)

    @classmethod
    def read(cls, stream: BinaryIO, strict_padding: bool = False) -> "LogoTable":
        header = MtkHeader.read(stream, strict_padding=strict_padding)
        if header.mtk_type is not MtkType.LOGO:
            raise NotALogo(f"MTK image is a {header.mtk_type.value}, not a LOGO")
        logo_count, block_size = struct.unpack("<II", read_exact(stream, 8, "logo table"))
        if block_size != header.size:
            raise SizeMismatch(
                f"MTK header size 0x{header.size:x} does not match block size 0x{block_size:x}")
        raw = read_exact(stream, logo_count * 4, "logo offsets")
        offsets = list(struct.unpack(f"<{logo_count}I", raw))
        return cls(header=header, logo_count=logo_count, block_size=block_size, offsets=offsets)

    def write(self, stream: BinaryIO) -> None:
        # No checks here, LogoImage.from_blobs is responsible for consistency.
        self.header.write(stream)
        stream.write(struct.pack("<II", self.logo_count, self.block_size))
        stream.write(struct.pack(f"<{len(self.offsets)}I", *self.offsets))

    def blob_range(self, i: int) -> Tuple[int, int]:
        if not 0 <= i < self.logo_count:
            raise IndexError(f"slot {i} out of range (0..{self.logo_count - 1})")
        start = self.offsets[i]
        end = self.offsets[i + 1] if i < self.logo_count - 1 else self.block_size
        if start < first_offset(self.logo_count) or end < start:
            raise BadOffsets(
                f"slot {i} spans 0x{start:x}..0x{end:x}, offsets table is corrupted")
        return start, end

    def read_blob(self, stream: BinaryIO, i: int) -> bytes:
        start, end = self.blob_range(i)
        stream.seek(HEADER_SIZE + start)
        return read_exact(stream, end - start, f"slot {i}")

    def read_blobs(self, stream: BinaryIO) -> List[bytes]:
        return [self.read_blob(stream, i) for i in range(self.logo_count)]


@dataclass
class LogoImage:
    """Table + the raw (still deflated) blob of every slot."""
    table: LogoTable
    blobs: List[bytes]

    @classmethod
    def read(cls, stream: BinaryIO, strict_padding: bool = False) -> "LogoImage":
        table = LogoTable.read(stream, strict_padding=strict_padding)
        return cls(table=table, blobs=table.read_blobs(stream))

    @classmethod
    def from_file(cls, path, strict_padding: bool = False) -> "LogoImage":
        with Path(path).open("rb") as f:
            return cls.read(f, strict_padding=strict_padding)

    @classmethod
    def from_bytes(cls, data: bytes, strict_padding: bool = False) -> "LogoImage":
        return cls.read(io.BytesIO(data), strict_padding=strict_padding)

    @classmethod
    def from_blobs(cls, blobs: Sequence[bytes]) -> "LogoImage":
        if not blobs:
            raise ValueError("a logo image needs at least one blob")
        blobs = [bytes(b) for b in blobs]
        for i, blob in enumerate(blobs):
            if not blob:
                raise BadOffsets(f"slot {i} is empty, offsets must be strictly increasing")
        offsets = []
        offset = first_offset(len(blobs))
        for blob in blobs:
            offsets.append(offset)
            offset += len(blob)
        block_size = offset
        header = MtkHeader(size=block_size, mtk_type=MtkType.LOGO)
        table = LogoTable(header=header, logo_count=len(blobs), block_size=block_size, offsets=offsets)
        return cls(table=table, blobs=blobs)

    def write(self, stream: BinaryIO) -> None:
        self.table.write(stream)
        for blob in self.blobs:
            stream.write(blob)

    def to_bytes(self) -> bytes:
        out = io.BytesIO()
        self.write(out)
        return out.getvalue()

    def save(self, path) -> None:
        Path(path).write_bytes(self.to_bytes())

import io
import struct

import pytest

from mtklogo.errors import BadMagic, BadPadding, TruncatedData, UnknownType
from mtklogo.header import FILL, HEADER_SIZE, MAGIC, MtkHeader, MtkType


def raw_header(magic=MAGIC, size=0x1234, label=b"LOGO", fill=FILL):
    return (struct.pack(">I", magic) + struct.pack("<I", size)
            + label.ljust(32, b"\x00") + bytes([fill]) * 472)


@pytest.mark.parametrize("mtk_type", list(MtkType))
def test_header_round_trip(mtk_type):
    h = MtkHeader(size=123456, mtk_type=mtk_type)
    data = h.to_bytes()
    assert len(data) == HEADER_SIZE
    assert MtkHeader.read(io.BytesIO(data)) == h


def test_header_layout():
    data = MtkHeader(size=0x01020304).to_bytes()
    assert data[:4] == bytes.fromhex("88168858")
    assert data[4:8] == bytes([4, 3, 2, 1])
    assert data[8:40] == b"LOGO" + b"\x00" * 28
    assert data[40:] == b"\xff" * 472


def test_write_to_stream():
    out = io.BytesIO()
    MtkHeader(size=7).write(out)
    assert out.getvalue() == MtkHeader(size=7).to_bytes()


def test_bad_magic():
    with pytest.raises(BadMagic):
        MtkHeader.read(io.BytesIO(raw_header(magic=0x12345678)))


def test_type_is_case_insensitive_prefix():
    h = MtkHeader.read(io.BytesIO(raw_header(label=b"logo_v2")))
    assert h.mtk_type is MtkType.LOGO
    h = MtkHeader.read(io.BytesIO(raw_header(label=b"Recovery")))
    assert h.mtk_type is MtkType.RECOVERY


def test_unknown_type():
    with pytest.raises(UnknownType):
        MtkHeader.read(io.BytesIO(raw_header(label=b"BOOTIMG")))


def test_padding_is_not_checked_by_default():
    h = MtkHeader.read(io.BytesIO(raw_header(fill=0x00)))
    assert h.size == 0x1234


def test_strict_padding():
    with pytest.raises(BadPadding):
        MtkHeader.read(io.BytesIO(raw_header(fill=0x00)), strict_padding=True)
    assert MtkHeader.read(io.BytesIO(raw_header()), strict_padding=True).size == 0x1234


def test_truncated_header():
    with pytest.raises(TruncatedData):
        MtkHeader.read(io.BytesIO(raw_header()[:100]))

"""Thin wrapper around zlib, slots are plain zlib streams."""

import zlib

from .errors import CodecError

BEST = 9


def inflate(data: bytes) -> bytes:
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise CodecError(f"cannot inflate {len(data)} bytes: {e}") from e


def deflate(data: bytes, level: int = BEST) -> bytes:
    try:
        return zlib.compress(data, level)
    except (zlib.error, ValueError) as e:
        raise CodecError(f"cannot deflate {len(data)} bytes: {e}") from e

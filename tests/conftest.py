import binascii
import struct
import zlib
from pathlib import Path
from typing import Sequence

import pytest

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

COLOR_TYPE_GRAY = 0
COLOR_TYPE_RGB = 2
COLOR_TYPE_INDEXED = 3

_CHANNELS = {COLOR_TYPE_GRAY: 1, COLOR_TYPE_RGB: 3, COLOR_TYPE_INDEXED: 1}


def chunk(chunk_type: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", binascii.crc32(chunk_type + data) & 0xFFFFFFFF)
    )


def make_png_bytes(
    width: int = 2,
    height: int = 2,
    color_type: int = COLOR_TYPE_INDEXED,
    palette: Sequence[int] | None = None,
    trns: bytes | None = None,
    truncate_idat: bool = False,
) -> bytes:
    """Build an 8-bit PNG from raw chunks so every field can be controlled."""

    row_size = width * _CHANNELS[color_type]
    raw = b"".join(b"\x00" + bytes((x + y) % 2 for x in range(row_size)) for y in range(height))
    compressed = zlib.compress(raw)

    data = PNG_SIGNATURE
    data += chunk(b"IHDR", struct.pack(">IIBBBBB", width, height, 8, color_type, 0, 0, 0))
    if palette is not None:
        data += chunk(b"PLTE", bytes(palette))
    if trns is not None:
        data += chunk(b"tRNS", trns)

    if truncate_idat:
        # Declare the full IDAT length but stop the file a few bytes in.
        return data + struct.pack(">I", len(compressed)) + b"IDAT" + compressed[:4]

    data += chunk(b"IDAT", compressed)
    data += chunk(b"IEND", b"")
    return data


FOUR_COLOR_PALETTE = [10, 20, 30, 40, 50, 60, 70, 80, 90, 0, 0, 0]


@pytest.fixture
def write_png(tmp_path: Path):
    def _write(name: str = "sprite.png", **kwargs) -> Path:
        path = tmp_path / name
        path.write_bytes(make_png_bytes(**kwargs))
        return path

    return _write


@pytest.fixture
def four_color_png(write_png) -> Path:
    return write_png("sprite.png", palette=FOUR_COLOR_PALETTE)

"""JASC-PAL text format.

A JASC-PAL document (as written by Paint Shop Pro and read by most sprite
editors) looks like::

    JASC-PAL
    0100
    4
    10 20 30
    40 50 60
    70 80 90
    0 0 0

The third line is the decimal entry count; each following line holds one
``R G B`` triple in decimal.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

from .errors import PaletteFormatError, ReadError

Color = Tuple[int, int, int]

JASC_HEADER = "JASC-PAL"
JASC_VERSION = "0100"
PAL_EXTENSION = ".pal"


def format_jasc_pal(palette: Sequence[Color]) -> str:
    for index, color in enumerate(palette):
        if len(color) != 3 or any(not (0 <= c <= 255) for c in color):
            raise ValueError(f"Palette entry {index} is not an 8-bit RGB triple: {color}")

    lines = [JASC_HEADER, JASC_VERSION, str(len(palette))]
    lines.extend(f"{r} {g} {b}" for r, g, b in palette)
    return "\n".join(lines) + "\n"


def pal_path_for(path: str | Path) -> Path:
    """Return ``path`` with its extension replaced by ``.pal``.

    ``sprite.png`` becomes ``sprite.pal`` and ``/a/b/tile.PNG`` becomes
    ``/a/b/tile.pal``. A path without an extension gains one.
    """

    return Path(path).with_suffix(PAL_EXTENSION)


def parse_jasc_pal(text: str) -> List[Color]:
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 3:
        raise PaletteFormatError("JASC-PAL document is missing its header lines")
    if lines[0].strip() != JASC_HEADER:
        raise PaletteFormatError(f"Expected '{JASC_HEADER}' header, got {lines[0]!r}")
    if lines[1].strip() != JASC_VERSION:
        raise PaletteFormatError(f"Unsupported JASC-PAL version: {lines[1]!r}")

    try:
        count = int(lines[2].strip())
    except ValueError as exc:
        raise PaletteFormatError(f"Invalid color count: {lines[2]!r}") from exc

    entries = lines[3:]
    if count != len(entries):
        raise PaletteFormatError(
            f"Color count {count} does not match {len(entries)} color lines"
        )

    palette: List[Color] = []
    for line_no, line in enumerate(entries, start=4):
        parts = line.split()
        if len(parts) != 3:
            raise PaletteFormatError(f"Line {line_no}: expected 'R G B', got {line!r}")
        try:
            values = [int(part) for part in parts]
        except ValueError as exc:
            raise PaletteFormatError(f"Line {line_no}: invalid color value in {line!r}") from exc
        if any(not (0 <= v <= 255) for v in values):
            raise PaletteFormatError(f"Line {line_no}: color values must be between 0 and 255")
        palette.append((values[0], values[1], values[2]))
    return palette


def read_jasc_pal(path: str | Path) -> List[Color]:
    path = Path(path)
    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise PaletteFormatError(f"Palette file is not ASCII text: {path}") from exc
    except OSError as exc:
        raise ReadError(f"Failed to read palette: {path}") from exc
    return parse_jasc_pal(text)

"""Core conversion logic: indexed PNG in, JASC-PAL out."""

# Reference: PNG chunks involved
# Chunk | Notes
# ------|---------------------------------------------------------------
# IHDR  | width, height, bit depth, color type (3 = indexed/palette)
# PLTE  | 1-256 RGB triples, 3 bytes each; required for color type 3
# tRNS  | optional alpha per palette entry; not representable in JASC-PAL
# IDAT  | zlib-compressed pixel rows; decoded and discarded here

from __future__ import annotations

import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import (
    DecodeError,
    InvalidPaletteLengthError,
    NoPaletteError,
    NotIndexedError,
    ReadError,
    SizeUnknownError,
    WriteError,
)
from .jasc import Color, format_jasc_pal, pal_path_for

INDEXED_MODE = "P"


@dataclass(frozen=True)
class ImageMetadata:
    """Header information captured before the pixel stream is read."""

    color_mode: str
    palette: bytes | None
    width: int
    height: int
    has_transparency: bool = False

    @property
    def is_indexed(self) -> bool:
        return self.color_mode == INDEXED_MODE


@dataclass(frozen=True)
class ConversionResult:
    source: Path
    output: Path
    palette: List[Color]

    @property
    def color_count(self) -> int:
        return len(self.palette)


def _read_metadata(img: Image.Image) -> ImageMetadata:
    palette: bytes | None = None
    if img.mode == INDEXED_MODE and img.palette is not None:
        # Raw PLTE bytes as stored in the file; Pillow rewrites the palette on load().
        _rawmode, data = img.palette.getdata()
        palette = bytes(data)
    width, height = img.size
    return ImageMetadata(
        color_mode=img.mode,
        palette=palette,
        width=width,
        height=height,
        has_transparency=img.info.get("transparency") is not None,
    )


def _check_frame_size(img: Image.Image) -> None:
    width, height = img.size
    try:
        bands = len(img.getbands())
    except (KeyError, ValueError) as exc:
        raise SizeUnknownError(f"Cannot determine PNG buffer size for mode {img.mode!r}") from exc
    if width * height * bands <= 0:
        raise SizeUnknownError(f"Cannot determine PNG buffer size for {width}x{height} image")


def load_png(path: str | Path, decode_pixels: bool = True) -> Tuple[ImageMetadata, bytes]:
    """Open ``path`` as a PNG and return its metadata and decoded pixels.

    The metadata is captured before any pixel data is read. When
    ``decode_pixels`` is false the pixel stream is left untouched and empty
    bytes are returned; the full decode is otherwise what catches truncated
    or corrupt image data.
    """

    path = Path(path)
    try:
        fp = path.open("rb")
    except OSError as exc:
        raise ReadError(f"Failed to open PNG: {path} ({exc.strerror or exc})") from exc

    with fp:
        try:
            with Image.open(fp, formats=["PNG"]) as img:
                metadata = _read_metadata(img)
                _check_frame_size(img)
                if not decode_pixels:
                    return metadata, b""
                pixels = img.tobytes()
        except Image.DecompressionBombError as exc:
            raise SizeUnknownError(f"Cannot size PNG frame buffer: {path} ({exc})") from exc
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Not a readable PNG file: {path}") from exc
        except (OSError, SyntaxError, ValueError, EOFError) as exc:
            raise DecodeError(f"Failed to decode PNG: {path} ({exc})") from exc

    return metadata, pixels


def ensure_indexed(metadata: ImageMetadata) -> None:
    if not metadata.is_indexed:
        raise NotIndexedError(f"PNG is not indexed. (color mode: {metadata.color_mode})")


def extract_palette(metadata: ImageMetadata) -> List[Color]:
    table = metadata.palette
    if not table:
        raise NoPaletteError("No palette found.")
    if len(table) % 3 != 0:
        raise InvalidPaletteLengthError(
            f"Invalid palette length. ({len(table)} bytes is not a multiple of 3)"
        )

    if metadata.has_transparency:
        warnings.warn(
            "Palette transparency (tRNS) is not stored in JASC-PAL and was dropped",
            stacklevel=2,
        )

    return [(table[i], table[i + 1], table[i + 2]) for i in range(0, len(table), 3)]


def save_pal(png_path: str | Path, palette: Sequence[Color]) -> Path:
    """Write ``palette`` next to ``png_path`` with a ``.pal`` extension."""

    document = format_jasc_pal(palette)
    target = pal_path_for(png_path)
    try:
        target.write_bytes(document.encode("ascii"))
    except OSError as exc:
        raise WriteError(f"Failed to write palette: {target} ({exc.strerror or exc})") from exc
    return target


def convert_png_to_pal(path: str | Path) -> ConversionResult:
    path = Path(path)
    metadata, _pixels = load_png(path)
    ensure_indexed(metadata)
    palette = extract_palette(metadata)
    output = save_pal(path, palette)
    return ConversionResult(source=path, output=output, palette=palette)

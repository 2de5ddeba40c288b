"""Indexed PNG to JASC-PAL palette converter.

This module extracts the PLTE table of a palette-indexed PNG and writes it as
a JASC-PAL text file next to the input. It can be invoked through the CLI
(``python -m png2pal``), the Tk window (``png2pal-gui``), or imported to
convert a single file.
"""

__version__ = "0.1.0"

from .converter import (
    ConversionResult,
    ImageMetadata,
    convert_png_to_pal,
    ensure_indexed,
    extract_palette,
    load_png,
    save_pal,
)
from .errors import (
    ConversionError,
    DecodeError,
    ErrorKind,
    InvalidPaletteLengthError,
    NoPaletteError,
    NoSelectionError,
    NotIndexedError,
    PaletteFormatError,
    ReadError,
    SizeUnknownError,
    WriteError,
)
from .jasc import format_jasc_pal, pal_path_for, parse_jasc_pal, read_jasc_pal

__all__ = [
    "ConversionError",
    "ConversionResult",
    "DecodeError",
    "ErrorKind",
    "ImageMetadata",
    "InvalidPaletteLengthError",
    "NoPaletteError",
    "NoSelectionError",
    "NotIndexedError",
    "PaletteFormatError",
    "ReadError",
    "SizeUnknownError",
    "WriteError",
    "convert_png_to_pal",
    "ensure_indexed",
    "extract_palette",
    "format_jasc_pal",
    "load_png",
    "pal_path_for",
    "parse_jasc_pal",
    "read_jasc_pal",
    "save_pal",
]

"""Exceptions raised while converting a PNG palette."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    NO_SELECTION = "no_selection"
    IO = "io"
    DECODE = "decode"
    SIZE_UNKNOWN = "size_unknown"
    NOT_INDEXED = "not_indexed"
    NO_PALETTE = "no_palette"
    INVALID_PALETTE_LENGTH = "invalid_palette_length"
    WRITE = "write"
    PALETTE_FORMAT = "palette_format"


class ConversionError(Exception):
    """Base exception for conversion errors.

    Every subclass carries a ``kind`` tag so front-ends can report failures
    uniformly with a single ``except ConversionError`` clause.
    """

    kind: ErrorKind


class NoSelectionError(ConversionError):
    """The file dialog was dismissed without choosing a file."""

    kind = ErrorKind.NO_SELECTION


class ReadError(ConversionError):
    """The input file could not be opened or read."""

    kind = ErrorKind.IO


class DecodeError(ConversionError):
    """The input is not a well-formed PNG stream."""

    kind = ErrorKind.DECODE


class SizeUnknownError(ConversionError):
    """The decoder could not size the frame buffer."""

    kind = ErrorKind.SIZE_UNKNOWN


class NotIndexedError(ConversionError):
    kind = ErrorKind.NOT_INDEXED


class NoPaletteError(ConversionError):
    kind = ErrorKind.NO_PALETTE


class InvalidPaletteLengthError(ConversionError):
    kind = ErrorKind.INVALID_PALETTE_LENGTH


class WriteError(ConversionError):
    """The .pal output could not be written."""

    kind = ErrorKind.WRITE


class PaletteFormatError(ConversionError):
    """A JASC-PAL document is malformed."""

    kind = ErrorKind.PALETTE_FORMAT

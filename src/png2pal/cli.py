"""Command line interface for png2pal."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

from . import __version__
from .converter import ConversionResult, convert_png_to_pal
from .dialogs import FilePicker, pick_png_file, require_selection
from .errors import ConversionError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="png2pal",
        description=(
            "Extract the palette of an indexed-color PNG into a JASC-PAL (.pal) file.\n"
            "The .pal file is written next to the input with the same base name.\n"
            "Without INPUT a file dialog is shown."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Indexed PNG to convert (omit to pick one in a dialog)",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the graphical converter window instead",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(path: Path) -> ConversionResult:
    print(f"Selected: {path}")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = convert_png_to_pal(path)
    for warning in caught:
        print(f"Warning: {warning.message}")
    print(f"Extracted {result.color_count} colors")
    print(f"Saved palette to {result.output}")
    return result


def main(argv: list[str] | None = None, picker: FilePicker = pick_png_file) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.gui:
        if args.input:
            parser.error("--gui does not take an INPUT path")
        from .gui import main as gui_main

        return gui_main()

    try:
        path = Path(args.input) if args.input is not None else require_selection(picker)
        run(path)
        return 0
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

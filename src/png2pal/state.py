"""State transitions for the graphical front-end.

The window owns a single :class:`AppState` and passes it to these functions
for every button press, then re-renders from it. Nothing here touches Tk,
so the behaviour can be exercised without a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .converter import ConversionResult, convert_png_to_pal
from .dialogs import FilePicker
from .errors import ConversionError

NO_FILE_SELECTED = "No file selected."

Converter = Callable[[Path], ConversionResult]


@dataclass
class AppState:
    selected_path: Optional[Path] = None
    status: str = ""


def success_message(result: ConversionResult) -> str:
    return f"Saved {result.color_count} colors to {result.output}"


def select_file(state: AppState, picker: FilePicker) -> AppState:
    path = picker()
    if path is not None:
        state.selected_path = Path(path)
        state.status = ""
    elif state.selected_path is None:
        state.status = NO_FILE_SELECTED
    return state


def convert_selected(state: AppState, converter: Converter = convert_png_to_pal) -> AppState:
    if state.selected_path is None:
        state.status = NO_FILE_SELECTED
        return state

    try:
        result = converter(state.selected_path)
    except ConversionError as exc:
        state.status = str(exc)
    else:
        state.status = success_message(result)
    return state

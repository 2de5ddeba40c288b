"""Native file selection shared by the console and graphical front-ends."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol

from .errors import NoSelectionError

PNG_FILETYPES = [("PNG images", ("*.png", "*.PNG"))]


class FilePicker(Protocol):
    def __call__(self) -> Optional[Path]:
        ...


def pick_png_file(parent=None) -> Optional[Path]:
    """Show the native open dialog filtered to PNG files.

    Returns ``None`` when the dialog is dismissed. Without a ``parent``
    window a hidden Tk root is created for the duration of the dialog.
    """

    import tkinter as tk
    from tkinter import filedialog

    root = None
    if parent is None:
        root = tk.Tk()
        root.withdraw()
    try:
        selected = filedialog.askopenfilename(
            parent=parent or root,
            title="Select PNG File",
            filetypes=PNG_FILETYPES,
        )
    finally:
        if root is not None:
            root.destroy()

    if not selected:
        return None
    return Path(selected)


def require_selection(picker: FilePicker) -> Path:
    path = picker()
    if path is None:
        raise NoSelectionError("No file selected.")
    return Path(path)

"""Minimal Tk front-end: pick a PNG, convert it, show the outcome."""

from __future__ import annotations

import tkinter as tk
from pathlib import Path
from typing import Optional

from .dialogs import pick_png_file
from .state import AppState, convert_selected, select_file

WINDOW_TITLE = "PNG to JASC-PAL"


class ConverterWindow:
    def __init__(self, root: tk.Tk, state: AppState | None = None):
        self.root = root
        self.root.title(WINDOW_TITLE)
        self.state = state or AppState()

        self.path_label = tk.Label(self.root, text="", anchor="w")
        self.path_label.pack(fill=tk.X, padx=8, pady=(8, 4))

        buttons = tk.Frame(self.root)
        buttons.pack(padx=8, pady=4)
        self.select_button = tk.Button(buttons, text="Select PNG File", command=self.on_select)
        self.select_button.pack(side=tk.LEFT, padx=(0, 6))
        self.convert_button = tk.Button(buttons, text="Convert to .pal", command=self.on_convert)
        self.convert_button.pack(side=tk.LEFT)

        self.status_label = tk.Label(self.root, text="", anchor="w", justify=tk.LEFT, wraplength=420)
        self.status_label.pack(fill=tk.X, padx=8, pady=(4, 8))

        self.render()

    def _pick(self) -> Optional[Path]:
        return pick_png_file(parent=self.root)

    def on_select(self) -> None:
        select_file(self.state, self._pick)
        self.render()

    def on_convert(self) -> None:
        convert_selected(self.state)
        self.render()

    def render(self) -> None:
        selected = self.state.selected_path
        self.path_label.config(text=f"File: {selected}" if selected else "File: (none)")
        self.status_label.config(text=self.state.status)


def main() -> int:
    root = tk.Tk()
    ConverterWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

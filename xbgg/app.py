"""Tk user interface for adjusting monitor brightness and gamma through xrandr."""

from __future__ import annotations

import argparse
import sys
import tkinter as tk
from collections.abc import Iterable
from dataclasses import dataclass, field
from tkinter import ttk

from xbgg import xrandr
from xbgg.controls import (
    BrightnessControl,
    GammaControl,
    GammaRegistry,
    GroupControl,
)

WINDOW_TITLE = "XBGG: xrandr Brightness GUI for GTK4"
WINDOW_SIZE = "600x300"
ALL_MONITORS = "All monitors"
WARNING_TITLE = "WARNING: X11 IS NOT YOUR COMPOSITING MANAGER"
WARNING_MESSAGE = (
    "The XDG_SESSION_TYPE value on your system is not X11. If you want to use "
    "xrandr-brightness, please change your compositing manager. The program will "
    "not work otherwise. "
)
GAMMA_NOTE = (
    "The display of gamma values will not be updated due to problems involving "
    "xrandr and video drivers."
)
PAGE_PADDING = 20
SPACING = 10


class ScaleRow:
    """A named horizontal slider bound to a control, with a label showing its value."""

    def __init__(self, parent, name: str, control) -> None:
        self.name = name
        self.control = control
        self.frame = ttk.Frame(parent)
        self._variable = tk.DoubleVar(master=self.frame, value=control.value)
        self._text = tk.StringVar(master=self.frame, value=control.label)

        ttk.Label(self.frame, text=name, width=10).pack(side=tk.LEFT, padx=(0, SPACING))
        self.scale = ttk.Scale(
            self.frame,
            from_=0.0,
            to=100.0,
            orient=tk.HORIZONTAL,
            variable=self._variable,
            command=self._on_scale,
        )
        self.scale.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(0, SPACING))
        ttk.Label(self.frame, textvariable=self._text, width=3).pack(side=tk.LEFT)
        self.frame.pack(fill=tk.X, pady=(0, SPACING))

    @property
    def value(self) -> float:
        return self.control.value

    @property
    def label(self) -> str:
        return self.control.label

    def set_value(self, value: float) -> None:
        """Move the slider and its control to ``value``."""
        self.control.set_value(value)
        self._variable.set(self.control.value)
        self._text.set(self.control.label)

    def _on_scale(self, raw: str) -> None:
        self.control.set_value(float(raw))
        self._text.set(self.control.label)


@dataclass
class _Page:
    frame: object
    rows: list[ScaleRow] = field(default_factory=list)
    group: ScaleRow | None = None


def create_warning_window(master, title: str, message: str):
    """Show a dialog whose Close button ends the program."""
    window = tk.Toplevel(master)
    window.title(title)
    window.minsize(500, 0)

    content = ttk.Frame(window, padding=PAGE_PADDING)
    content.pack(fill=tk.BOTH, expand=True)
    ttk.Label(content, text=message, wraplength=450, justify=tk.LEFT).pack(fill=tk.X)
    ttk.Button(content, text="Close", command=lambda: sys.exit(0)).pack(pady=(15, 0))
    return window


def _build_page(parent, rows_for, group_value: float) -> _Page:
    frame = ttk.Frame(parent, padding=PAGE_PADDING)
    page = _Page(frame=frame)
    page.rows = rows_for(frame)
    ttk.Separator(frame, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=(0, SPACING))
    page.group = ScaleRow(frame, ALL_MONITORS, GroupControl(page.rows, group_value))
    return page


def build_brightness_page(parent, monitors: Iterable[str], registry: GammaRegistry) -> _Page:
    """Build one brightness slider per monitor plus one for all of them."""
    monitors = list(monitors)
    return _build_page(
        parent,
        lambda frame: [ScaleRow(frame, name, BrightnessControl(name, registry)) for name in monitors],
        100.0,
    )


def build_gamma_page(parent, monitors: Iterable[str], registry: GammaRegistry) -> _Page:
    """Build one warmth slider per monitor plus one for all of them."""
    monitors = list(monitors)
    page = _build_page(
        parent,
        lambda frame: [ScaleRow(frame, name, GammaControl(name, registry)) for name in monitors],
        100.0,
    )
    ttk.Label(page.frame, text=GAMMA_NOTE, wraplength=540, justify=tk.LEFT).pack(fill=tk.X)
    return page


def build_ui(root) -> tuple[_Page, _Page]:
    """Lay out the main window on ``root`` and return the brightness and gamma pages."""
    if not xrandr.is_xorg_session():
        create_warning_window(root, WARNING_TITLE, WARNING_MESSAGE)

    root.title(WINDOW_TITLE)
    root.geometry(WINDOW_SIZE)

    notebook = ttk.Notebook(root)
    registry = GammaRegistry()
    gamma_page = build_gamma_page(notebook, xrandr.list_enabled_monitors(), registry)
    brightness_page = build_brightness_page(notebook, xrandr.list_enabled_monitors(), registry)
    notebook.add(brightness_page.frame, text="Brightness")
    notebook.add(gamma_page.frame, text="Gamma")
    notebook.pack(fill=tk.BOTH, expand=True)
    return brightness_page, gamma_page


def main(argv: list[str] | None = None) -> int:
    """Start the application and run until its window is closed."""
    parser = argparse.ArgumentParser(prog="xbgg", description=WINDOW_TITLE)
    parser.parse_args(argv)
    root = tk.Tk(className="xbgg")
    build_ui(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
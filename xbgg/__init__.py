"""Brightness and gamma control for X11 displays through xrandr, with a Tk window."""

__version__ = "1.1.0"
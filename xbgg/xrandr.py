"""Thin wrappers around the ``xrandr`` command line tool."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping

XRANDR = "xrandr"


class XrandrError(RuntimeError):
    """Raised when xrandr cannot be run or its output cannot be understood."""


def is_xorg_session(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the session type names X11."""
    env = os.environ if environ is None else environ
    return "x11" in env.get("XDG_SESSION_TYPE", "")


def _run(*args: str) -> str:
    try:
        completed = subprocess.run([XRANDR, *args], capture_output=True, check=False)
    except OSError as exc:
        raise XrandrError(f"failed to execute {XRANDR}: {exc}") from exc
    try:
        return completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise XrandrError(f"invalid UTF-8 sequence: {exc}") from exc


def _lines(text: str) -> list[str]:
    """Split text into lines the way a line iterator does: on newlines, dropping a final empty line."""
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def parse_active_monitors(text: str) -> list[str]:
    """Extract monitor names from ``xrandr --listactivemonitors`` output."""
    monitors = []
    for line in text.split("\n"):
        if "+" not in line:
            continue
        pos = line.rfind(" ")
        if pos != -1:
            monitors.append(line[pos:].strip())
    return monitors


def list_enabled_monitors() -> list[str]:
    """Return the names of the active monitors."""
    return parse_active_monitors(_run("--listactivemonitors"))


def set_brightness(monitor: str, value: str | float) -> None:
    """Set the software brightness of a monitor."""
    _run("--output", monitor, "--brightness", str(value))


def set_gamma(monitor: str, brightness, r, g, b) -> None:
    """Set brightness and red:green:blue gamma of a monitor."""
    _run("--output", monitor, "--brightness", str(brightness), "--gamma", f"{r}:{g}:{b}")


def _monitor_line(lines: list[str], monitor: str, offset: int) -> str:
    index = next((i for i, line in enumerate(lines) if monitor in line), len(lines))
    try:
        return lines[index + offset]
    except IndexError:
        raise XrandrError(f"no verbose information for monitor {monitor!r}") from None


def parse_brightness(verbose: str, monitor: str) -> float:
    """Read a monitor's brightness from ``xrandr --verbose`` output."""
    line = _monitor_line(_lines(verbose), monitor, 5)
    fields = line.split(":")
    if len(fields) < 2:
        raise XrandrError(f"unexpected brightness line: {line!r}")
    try:
        return float(fields[1].strip())
    except ValueError as exc:
        raise XrandrError(f"unexpected brightness value: {fields[1]!r}") from exc


def parse_gamma(verbose: str, monitor: str) -> tuple[float, float, float]:
    """Read a monitor's red, green and blue gamma from ``xrandr --verbose`` output."""
    line = _monitor_line(_lines(verbose), monitor, 4)
    sections = line.split(":      ")
    if len(sections) < 2:
        raise XrandrError(f"unexpected gamma line: {line!r}")
    channels = sections[1].split(":")
    if len(channels) < 3:
        raise XrandrError(f"unexpected gamma value: {sections[1]!r}")
    try:
        red, green, blue = (float(channel) for channel in channels[:3])
    except ValueError as exc:
        raise XrandrError(f"unexpected gamma value: {sections[1]!r}") from exc
    return red, green, blue


def get_brightness(monitor: str) -> float:
    """Query the current brightness of a monitor."""
    return parse_brightness(_run("--verbose"), monitor)


def get_gamma(monitor: str) -> tuple[float, float, float]:
    """Query the current gamma of a monitor."""
    return parse_gamma(_run("--verbose"), monitor)
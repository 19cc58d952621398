"""Brightness and gamma slider models that drive xrandr."""

from __future__ import annotations

import math
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal

from xbgg import xrandr

LOWER = 0.0
UPPER = 100.0


def format_float(value: float) -> str:
    """Format a float as its shortest exact decimal, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _clamp(value: float) -> float:
    return min(max(float(value), LOWER), UPPER)


@dataclass(frozen=True)
class GammaSettings:
    """The red, green and blue gamma last applied to a monitor, as passed to xrandr."""

    red: str
    green: str
    blue: str


def gamma_channels(value: float, brightness: float) -> GammaSettings:
    """Compute gamma channels for a warmth slider position (0-100) and a brightness."""
    fraction = _round(value) / 100.0
    red = format_float(brightness)
    if red == "inf":
        red = "1.0"
    return GammaSettings(
        red=red,
        green=format_float(1.0 - fraction * 0.4),
        blue=format_float(1.0 - fraction * 0.8),
    )


class GammaRegistry:
    """Thread-safe record of the gamma settings applied to each monitor."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._settings: dict[str, GammaSettings] = {}

    def get(self, monitor: str) -> GammaSettings | None:
        with self._lock:
            return self._settings.get(monitor)

    def set(self, monitor: str, settings: GammaSettings) -> None:
        with self._lock:
            self._settings[monitor] = settings


class _Slider:
    """A value in [0, 100] with a label; changes are applied only when the value moves."""

    def __init__(self, value: float) -> None:
        self.value = _clamp(value)
        self.label = format_float(self.value)

    def set_value(self, value: float) -> None:
        value = _clamp(value)
        if value == self.value:
            return
        self.value = value
        rounded = _round(value)
        self.label = format_float(rounded)
        self._changed(rounded)

    def _changed(self, rounded: float) -> None:
        raise NotImplementedError


class BrightnessControl(_Slider):
    """Brightness slider for one monitor."""

    def __init__(
        self,
        monitor: str,
        registry: GammaRegistry,
        value: float | None = None,
        *,
        apply_brightness: Callable[[str, str], None] = xrandr.set_brightness,
        apply_gamma: Callable[[str, str, str, str, str], None] = xrandr.set_gamma,
        read_brightness: Callable[[str], float] = xrandr.get_brightness,
    ) -> None:
        self.monitor = monitor
        self.registry = registry
        self._apply_brightness = apply_brightness
        self._apply_gamma = apply_gamma
        if value is None:
            value = read_brightness(monitor) * 100.0
        super().__init__(value)

    def set_value(self, value: float) -> None:
        super().set_value(value)

    def _changed(self, rounded: float) -> None:
        brightness = format_float(rounded / 100.0)
        settings = self.registry.get(self.monitor)
        if settings is not None:
            self._apply_gamma(self.monitor, brightness, brightness, settings.green, settings.blue)
        else:
            self._apply_brightness(self.monitor, brightness)


class GammaControl(_Slider):
    """Warmth slider for one monitor; 0 is neutral, 100 is warmest."""

    def __init__(
        self,
        monitor: str,
        registry: GammaRegistry,
        value: float = 0.0,
        *,
        apply_gamma: Callable[[str, str, str, str, str], None] = xrandr.set_gamma,
        read_brightness: Callable[[str], float] = xrandr.get_brightness,
    ) -> None:
        self.monitor = monitor
        self.registry = registry
        self._apply_gamma = apply_gamma
        self._read_brightness = read_brightness
        super().__init__(value)

    def set_value(self, value: float) -> None:
        super().set_value(value)

    def _changed(self, rounded: float) -> None:
        settings = gamma_channels(rounded, self._read_brightness(self.monitor))
        self._apply_gamma(self.monitor, settings.red, settings.red, settings.green, settings.blue)
        self.registry.set(self.monitor, settings)


class GroupControl(_Slider):
    """A slider that moves every control in a group to its own value."""

    def __init__(self, controls: Iterable[_Slider], value: float = 100.0) -> None:
        self.controls = list(controls)
        super().__init__(value)

    def set_value(self, value: float) -> None:
        super().set_value(value)

    def _changed(self, rounded: float) -> None:
        for control in self.controls:
            control.set_value(rounded)
# xbgg

A small desktop tool for adjusting the brightness and gamma of your
monitors on an X11 (Xorg) session. It drives the `xrandr` command and
shows a Tk window with one slider per active monitor, plus an
"All monitors" slider that moves every monitor's slider at once.

## Requirements

- Linux with an X11 session. The session counts as X11 when
  `XDG_SESSION_TYPE` contains `x11`. On any other session, Wayland for
  example, the program opens a warning dialog. Its Close button ends
  the program.
- The `xrandr` program on your `PATH`.
- Python 3.10 or later with Tk support (`tkinter`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Start the window with:

```
xbgg
```

The window has two tabs.

**Brightness** has one slider per active monitor, running from 0 to
100. Each slider starts at the monitor's current brightness, which is
read from `xrandr --verbose`. Moving a slider runs:

```
xrandr --output <monitor> --brightness <value>
```

If a gamma has already been chosen for that monitor on the Gamma tab,
the command instead sets the new brightness together with the stored
green and blue channels. The red channel is set to the same value as
the brightness.

**Gamma** has one warmth slider per active monitor, running from 0 to
100 and starting at 0. Higher values warm the picture by lowering the
green channel by up to 40 % and the blue channel by up to 80 %. The red
channel follows the monitor's current brightness. The settings are
applied with:

```
xrandr --output <monitor> --brightness <r> --gamma <r>:<g>:<b>
```

On both tabs the "All monitors" slider starts at 100. Moving it sets
every monitor's slider on that tab to the same value.

## Using it from Python

The `xbgg.xrandr` module wraps the `xrandr` calls:

```python
from xbgg import xrandr

if xrandr.is_xorg_session():
    for monitor in xrandr.list_enabled_monitors():
        print(monitor, xrandr.get_brightness(monitor), xrandr.get_gamma(monitor))
        xrandr.set_brightness(monitor, 0.8)
```

The module has these functions:

- `is_xorg_session`
- `list_enabled_monitors`
- `get_brightness`
- `get_gamma`
- `set_brightness`
- `set_gamma`

Parsing is also available on its own, so you can inspect captured
`xrandr` output without running the command. The functions are
`parse_active_monitors`, `parse_brightness` and `parse_gamma`.

`XrandrError` is raised in three cases:

- `xrandr` cannot be started.
- Its output is not valid UTF-8.
- The verbose output does not have the expected shape.

A non-zero exit status from `xrandr` is not checked.

The `xbgg.controls` module holds the slider logic without any GUI:

- `BrightnessControl`, `GammaControl` and `GroupControl` hold a value
  clamped to 0–100, together with a text label.
- Their `set_value` method applies a change only when the value
  actually moves.
- `BrightnessControl` and `GammaControl` share the gamma chosen for
  each monitor through a `GammaRegistry`, which stores `GammaSettings`.
- `gamma_channels` computes the channels for a warmth value.

The callables that apply or read settings can be passed in, so the
controls can be used without a display.

## What it does not do

- The Gamma tab does not read back the gamma already set on a monitor,
  because some video drivers report it unreliably.
- Settings are not saved. Brightness and gamma chosen in the window
  last only as long as the X session keeps them.
- There are no command-line options for setting values directly. Use
  the window or the `xbgg.xrandr` functions.
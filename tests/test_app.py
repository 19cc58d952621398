import subprocess
from unittest import mock

import pytest

from xbgg import app
from xbgg.controls import GammaRegistry

VERBOSE = "\n".join(
    [
        "Screen 0: minimum 8 x 8, current 3840 x 1080",
        "HDMI-0 connected primary 1920x1080+0+0",
        "\tIdentifier: 0x1b8",
        "\tTimestamp:  1",
        "\tSubpixel:   unknown",
        "\tGamma:      1.0:1.0:1.0",
        "\tBrightness: 1.0",
        "DP-1 connected 1920x1080+1920+0",
        "\tIdentifier: 0x1b9",
        "\tTimestamp:  1",
        "\tSubpixel:   unknown",
        "\tGamma:      1.0:1.0:1.0",
        "\tBrightness: 0.5",
        "",
    ]
)

MONITORS_LIST = "Monitors: 2\n 0: +*HDMI-0 1920/527x1080/296+0+0  HDMI-0\n 1: +DP-1 1920/527x1080/296+1920+0  DP-1\n"


@pytest.fixture
def calls():
    recorded = []

    def fake_run(args, **kwargs):
        recorded.append(list(args))
        if "--verbose" in args:
            out = VERBOSE.encode()
        elif "--listactivemonitors" in args:
            out = MONITORS_LIST.encode()
        else:
            out = b""
        return subprocess.CompletedProcess(args, 0, out, b"")

    with mock.patch("subprocess.run", side_effect=fake_run):
        yield recorded


@pytest.fixture
def fake_tk():
    with mock.patch.object(app, "tk") as tk_mock, mock.patch.object(app, "ttk") as ttk_mock:
        yield tk_mock, ttk_mock


def _setting_calls(calls):
    return [c for c in calls if "--output" in c]


def test_brightness_rows_start_from_xrandr_values(calls, fake_tk):
    page = app.build_brightness_page(object(), ["HDMI-0", "DP-1"], GammaRegistry())
    assert [row.name for row in page.rows] == ["HDMI-0", "DP-1"]
    assert [row.value for row in page.rows] == [100.0, 50.0]
    assert page.group.name == app.ALL_MONITORS
    assert page.group.value == 100.0


def test_brightness_row_sets_brightness(calls, fake_tk):
    page = app.build_brightness_page(object(), ["HDMI-0"], GammaRegistry())
    page.rows[0].set_value(50)
    assert _setting_calls(calls) == [["xrandr", "--output", "HDMI-0", "--brightness", "0.5"]]
    assert page.rows[0].label == "50"


def test_brightness_uses_recorded_gamma(calls, fake_tk):
    registry = GammaRegistry()
    gamma = app.build_gamma_page(object(), ["HDMI-0"], registry)
    brightness = app.build_brightness_page(object(), ["HDMI-0"], registry)
    gamma.rows[0].set_value(40)
    settings = registry.get("HDMI-0")
    assert settings is not None
    calls.clear()
    brightness.rows[0].set_value(50)
    assert _setting_calls(calls) == [
        [
            "xrandr",
            "--output",
            "HDMI-0",
            "--brightness",
            "0.5",
            "--gamma",
            f"0.5:{settings.green}:{settings.blue}",
        ]
    ]


def test_gamma_row_records_settings(calls, fake_tk):
    registry = GammaRegistry()
    page = app.build_gamma_page(object(), ["DP-1"], registry)
    assert page.rows[0].value == 0.0
    page.rows[0].set_value(25)
    settings = registry.get("DP-1")
    applied = _setting_calls(calls)
    assert applied[-1] == [
        "xrandr",
        "--output",
        "DP-1",
        "--brightness",
        settings.red,
        "--gamma",
        f"{settings.red}:{settings.green}:{settings.blue}",
    ]
    assert settings.red == "0.5"


def test_group_row_moves_every_row(calls, fake_tk):
    page = app.build_brightness_page(object(), ["HDMI-0", "DP-1"], GammaRegistry())
    page.group.set_value(30)
    assert [row.value for row in page.rows] == [30.0, 30.0]
    assert [row.label for row in page.rows] == ["30", "30"]
    monitors = [c[2] for c in _setting_calls(calls)]
    assert monitors == ["HDMI-0", "DP-1"]


def test_row_clamps_to_range(calls, fake_tk):
    page = app.build_gamma_page(object(), ["HDMI-0"], GammaRegistry())
    page.rows[0].set_value(250)
    assert page.rows[0].value == 100.0
    page.rows[0].set_value(-5)
    assert page.rows[0].value == 0.0


def test_setting_same_value_does_nothing(calls, fake_tk):
    page = app.build_brightness_page(object(), ["HDMI-0"], GammaRegistry())
    page.rows[0].set_value(100)
    assert page.rows[0].value == 100.0
    assert _setting_calls(calls) == []


def test_warning_window_close_exits(fake_tk):
    tk_mock, ttk_mock = fake_tk
    window = app.create_warning_window(object(), "Title", "Message")
    assert window is tk_mock.Toplevel.return_value
    window.title.assert_called_once_with("Title")
    buttons = [c for c in ttk_mock.Button.call_args_list if c.kwargs.get("text") == "Close"]
    assert len(buttons) == 1
    with pytest.raises(SystemExit) as excinfo:
        buttons[0].kwargs["command"]()
    assert excinfo.value.code == 0


def test_build_ui_warns_outside_x11(calls, fake_tk):
    tk_mock, ttk_mock = fake_tk
    root = mock.MagicMock()
    with mock.patch.dict("os.environ", {"XDG_SESSION_TYPE": "wayland"}):
        brightness, gamma = app.build_ui(root)
    root.title.assert_called_once_with(app.WINDOW_TITLE)
    tk_mock.Toplevel.assert_called_once_with(root)
    assert [row.name for row in brightness.rows] == ["HDMI-0", "DP-1"]
    assert [row.name for row in gamma.rows] == ["HDMI-0", "DP-1"]
    tabs = [c.kwargs["text"] for c in ttk_mock.Notebook.return_value.add.call_args_list]
    assert tabs == ["Brightness", "Gamma"]


def test_build_ui_no_warning_on_x11(calls, fake_tk):
    tk_mock, _ = fake_tk
    with mock.patch.dict("os.environ", {"XDG_SESSION_TYPE": "x11"}):
        brightness, gamma = app.build_ui(mock.MagicMock())
    assert tk_mock.Toplevel.call_count == 0
    assert [row.name for row in brightness.rows] == ["HDMI-0", "DP-1"]
    assert [row.name for row in gamma.rows] == ["HDMI-0", "DP-1"]


def test_main_runs_mainloop(calls, fake_tk):
    tk_mock, _ = fake_tk
    with mock.patch.dict("os.environ", {"XDG_SESSION_TYPE": "x11"}):
        assert app.main([]) == 0
    tk_mock.Tk.return_value.mainloop.assert_called_once_with()
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xbgg"
version = "1.1.0"
description = "Brightness and gamma sliders for X11 displays, driven by xrandr"
requires-python = ">=3.10"
dependencies = []
keywords = ["xrandr", "brightness", "gamma", "x11", "xorg", "display", "monitor", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xbgg = "xbgg.app:main"

[tool.hatch.build.targets.wheel]
packages = ["xbgg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

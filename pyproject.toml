[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termcraft"
version = "0.1.0"
description = "Terminal styling and control: ANSI colors, text attributes, styled content, screen commands, raw mode and terminal size."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "color", "escape-codes", "tty", "raw-mode", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termcraft"]

[tool.pytest.ini_options]
addopts = "-ra"

"""Foreground, background and underline colors as SGR parameters."""

from __future__ import annotations

import os
import re
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from termcraft.color import AnsiValue, AnyColor, Color, Rgb, parse_ansi_values

_U8 = re.compile(r"\+?[0-9]+", re.ASCII)

# Palette index used when writing each named color as ``5;<n>``.
_PALETTE_INDEX = {
    Color.BLACK: 0,
    Color.DARK_RED: 1,
    Color.DARK_GREEN: 2,
    Color.DARK_YELLOW: 3,
    Color.DARK_BLUE: 4,
    Color.DARK_MAGENTA: 5,
    Color.DARK_CYAN: 6,
    Color.GREY: 7,
    Color.DARK_GREY: 8,
    Color.RED: 9,
    Color.GREEN: 10,
    Color.YELLOW: 11,
    Color.BLUE: 12,
    Color.MAGENTA: 13,
    Color.CYAN: 14,
    Color.WHITE: 15,
}


class ColorTarget(Enum):
    """What a color applies to, valued by its SGR selector."""

    FOREGROUND = 38
    BACKGROUND = 48
    UNDERLINE = 58

    @property
    def reset_code(self) -> int:
        """The SGR code that resets this target to the default color."""
        return self.value + 1


_TARGET_BY_SET = {target.value: target for target in ColorTarget}
_TARGET_BY_RESET = {target.reset_code: target for target in ColorTarget}


def _next_u8(values: Iterator[str]) -> Optional[int]:
    text = next(values, None)
    if text is None or not _U8.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


@dataclass(frozen=True)
class Colored:
    """A color together with what it applies to."""

    target: ColorTarget
    color: AnyColor

    @staticmethod
    def parse_ansi(ansi: str) -> Optional[Colored]:
        """Parse the text found inside ``ESC [ <text> m``, e.g. ``"38;5;26"``.

        Returns ``None`` for anything that is not exactly one color;
        3/4 bit color values are not supported.
        """
        values = iter(ansi.split(";"))
        code = _next_u8(values)
        if code is None:
            return None
        if code in _TARGET_BY_SET:
            color = parse_ansi_values(values)
            return None if color is None else Colored(_TARGET_BY_SET[code], color)
        if code in _TARGET_BY_RESET:
            if next(values, None) is not None:
                return None
            return Colored(_TARGET_BY_RESET[code], Color.RESET)
        return None

    def __str__(self) -> str:
        if ansi_color_disabled_memoized():
            return ""
        color = self.color
        if color is Color.RESET:
            return str(self.target.reset_code)
        prefix = f"{self.target.value};"
        if isinstance(color, Rgb):
            return f"{prefix}2;{color.r};{color.g};{color.b}"
        if isinstance(color, AnsiValue):
            return f"{prefix}5;{color.value}"
        return f"{prefix}5;{_PALETTE_INDEX[color]}"


_lock = threading.Lock()
_disabled: Optional[bool] = None


def ansi_color_disabled() -> bool:
    """Return whether a non-empty ``NO_COLOR`` is set in the environment."""
    return bool(os.environ.get("NO_COLOR", ""))


def ansi_color_disabled_memoized() -> bool:
    """Like ``ansi_color_disabled`` but read once, unless overridden."""
    global _disabled
    with _lock:
        if _disabled is None:
            _disabled = ansi_color_disabled()
        return _disabled


def set_ansi_color_disabled(value: bool) -> None:
    """Force color output off (``True``) or on (``False``) globally."""
    global _disabled
    with _lock:
        _disabled = bool(value)
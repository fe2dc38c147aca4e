"""Terminal colors: named colors, 24-bit RGB and 8-bit ANSI values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Union

_DECIMAL_U8 = re.compile(r"\+?[0-9]+", re.ASCII)
_HEX_U8 = re.compile(r"\+?[0-9a-fA-F]+", re.ASCII)


class Color(Enum):
    """One of the named colors, or the terminal's default color (``RESET``)."""

    RESET = "reset"
    BLACK = "black"
    DARK_GREY = "dark_grey"
    RED = "red"
    DARK_RED = "dark_red"
    GREEN = "green"
    DARK_GREEN = "dark_green"
    YELLOW = "yellow"
    DARK_YELLOW = "dark_yellow"
    BLUE = "blue"
    DARK_BLUE = "dark_blue"
    MAGENTA = "magenta"
    DARK_MAGENTA = "dark_magenta"
    CYAN = "cyan"
    DARK_CYAN = "dark_cyan"
    WHITE = "white"
    GREY = "grey"


def _check_u8(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..=255, got {value}")


@dataclass(frozen=True)
class Rgb:
    """A 24-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_u8("r", self.r)
        _check_u8("g", self.g)
        _check_u8("b", self.b)


@dataclass(frozen=True)
class AnsiValue:
    """An 8-bit (256 color palette) color."""

    value: int

    def __post_init__(self) -> None:
        _check_u8("value", self.value)


AnyColor = Union[Color, Rgb, AnsiValue]

# Palette indices 0..=15 map onto the named colors.
_PALETTE = (
    Color.BLACK,
    Color.DARK_RED,
    Color.DARK_GREEN,
    Color.DARK_YELLOW,
    Color.DARK_BLUE,
    Color.DARK_MAGENTA,
    Color.DARK_CYAN,
    Color.GREY,
    Color.DARK_GREY,
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.MAGENTA,
    Color.CYAN,
    Color.WHITE,
)


def _parse_u8(text: str, base: int = 10) -> Optional[int]:
    pattern = _DECIMAL_U8 if base == 10 else _HEX_U8
    if not pattern.fullmatch(text):
        return None
    value = int(text, base)
    return value if value <= 255 else None


def _next_u8(values: Iterator[str]) -> Optional[int]:
    text = next(values, None)
    if text is None:
        return None
    return _parse_u8(text)


def parse_ansi_values(values: Iterable[str]) -> Optional[AnyColor]:
    """Parse the terms of a color sequence (``5;<n>`` or ``2;<r>;<g>;<b>``).

    Returns ``None`` if the terms do not form exactly one color.
    """
    terms = iter(values)
    kind = _next_u8(terms)
    if kind == 5:
        n = _next_u8(terms)
        if n is None:
            return None
        color: AnyColor = _PALETTE[n] if n < len(_PALETTE) else AnsiValue(n)
    elif kind == 2:
        r = _next_u8(terms)
        if r is None:
            return None
        g = _next_u8(terms)
        if g is None:
            return None
        b = _next_u8(terms)
        if b is None:
            return None
        color = Rgb(r, g, b)
    else:
        return None
    if next(terms, None) is not None:
        return None
    return color


def parse_color_ansi(ansi: str) -> Optional[AnyColor]:
    """Parse an ANSI color such as ``"5;26"`` or ``"2;50;60;70"``.

    3/4 bit color values are not supported and give ``None``.
    """
    return parse_ansi_values(ansi.split(";"))


def color_from_name(name: str) -> Color:
    """Return the named color, matched case-insensitively.

    Raises ``ValueError`` for an unknown name.
    """
    try:
        return Color(name.lower())
    except ValueError:
        raise ValueError(f"unknown color name: {name!r}") from None


def parse_color(name: str) -> Color:
    """Return the named color, or ``Color.WHITE`` for an unknown name."""
    try:
        return color_from_name(name)
    except ValueError:
        return Color.WHITE


def color_to_str(color: AnyColor) -> str:
    """Serialize a color: a name, ``ansi_(n)`` or ``rgb_(r,g,b)``."""
    if isinstance(color, Color):
        return color.value
    if isinstance(color, AnsiValue):
        return f"ansi_({color.value})"
    if isinstance(color, Rgb):
        return f"rgb_({color.r},{color.g},{color.b})"
    raise TypeError(f"could not serialize {type(color).__name__} as a color")


def color_from_str(value: str) -> AnyColor:
    """Deserialize a color name, ``ansi_(n)``, ``rgb_(r,g,b)`` or ``#rrggbb``.

    Raises ``ValueError`` when the text is none of these.
    """
    try:
        return color_from_name(value)
    except ValueError:
        pass

    if "ansi" in value:
        inner = value.replace("ansi_(", "").replace(")", "")
        n = _parse_u8(inner)
        if n is not None:
            return AnsiValue(n)
    elif "rgb" in value:
        parts = value.replace("rgb_(", "").replace(")", "").split(",")
        if len(parts) == 3:
            r, g, b = (_parse_u8(part) for part in parts)
            if r is not None and g is not None and b is not None:
                return Rgb(r, g, b)
    elif value.startswith("#"):
        hex_digits = value[1:]
        if hex_digits.isascii() and len(hex_digits) == 6:
            r = _parse_u8(hex_digits[0:2], 16)
            g = _parse_u8(hex_digits[2:4], 16)
            b = _parse_u8(hex_digits[4:6], 16)
            if r is not None and g is not None and b is not None:
                return Rgb(r, g, b)

    raise ValueError(
        f"invalid color {value!r}: expected a color name, "
        "`ansi_(value)`, `rgb_(r,g,b)` or `#rgbhex`"
    )
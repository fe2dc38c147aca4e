"""Styles, styled content and the commands that apply colors and attributes."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional

from termcraft.attributes import Attribute, Attributes
from termcraft.color import AnyColor, Color
from termcraft.colored import ColorTarget, Colored, set_ansi_color_disabled
from termcraft.colors import Colors
from termcraft.command import CSI, Command
from termcraft.stylize import Stylize

TRUE_COLOR_COUNT = 0xFFFF
_DEFAULT_COLOR_COUNT = 8


@dataclass
class ContentStyle(Stylize):
    """Colors and attributes that can be put on content."""

    foreground_color: Optional[AnyColor] = None
    background_color: Optional[AnyColor] = None
    underline_color: Optional[AnyColor] = None
    attributes: Attributes = field(default_factory=Attributes)

    @property
    def content_style(self) -> ContentStyle:
        """The style itself, so that ``Stylize`` methods can modify it."""
        return self

    def apply(self, val: Any) -> StyledContent:
        """Return ``val`` styled with a copy of this style."""
        return StyledContent(self.stylize(), val)

    def stylize(self) -> ContentStyle:
        """Return an independent copy of this style."""
        return ContentStyle(
            foreground_color=self.foreground_color,
            background_color=self.background_color,
            underline_color=self.underline_color,
            attributes=Attributes(self.attributes.bits),
        )


@dataclass
class StyledContent(Stylize):
    """Content together with the style to print it in."""

    content_style: ContentStyle
    content: Any

    def stylize(self) -> StyledContent:
        """Return a copy whose style can be changed independently."""
        return StyledContent(self.content_style.stylize(), self.content)

    def __str__(self) -> str:
        return PrintStyledContent(self).ansi()


def style(val: Any) -> StyledContent:
    """Wrap ``val`` in a ``StyledContent`` with an empty style."""
    return ContentStyle().apply(val)


def available_color_count() -> int:
    """Guess how many colors the terminal supports from the environment.

    ``COLORTERM`` is consulted first, ``TERM`` only if it is unset.
    """
    value = os.environ.get("COLORTERM")
    if value is None:
        value = os.environ.get("TERM")
    if value is None:
        return _DEFAULT_COLOR_COUNT
    if "24bit" in value or "truecolor" in value:
        return TRUE_COLOR_COUNT
    if "256" in value:
        return 256
    return _DEFAULT_COLOR_COUNT


def force_color_output(enabled: bool) -> None:
    """Force colored output on or off globally, overriding ``NO_COLOR``."""
    set_ansi_color_disabled(not enabled)


@dataclass(frozen=True)
class SetForegroundColor(Command):
    """Set the foreground color."""

    color: AnyColor

    def ansi(self) -> str:
        return f"{CSI}{Colored(ColorTarget.FOREGROUND, self.color)}m"


@dataclass(frozen=True)
class SetBackgroundColor(Command):
    """Set the background color."""

    color: AnyColor

    def ansi(self) -> str:
        return f"{CSI}{Colored(ColorTarget.BACKGROUND, self.color)}m"


@dataclass(frozen=True)
class SetUnderlineColor(Command):
    """Set the underline color."""

    color: AnyColor

    def ansi(self) -> str:
        return f"{CSI}{Colored(ColorTarget.UNDERLINE, self.color)}m"


@dataclass(frozen=True)
class SetColors(Command):
    """Set the foreground and/or background color in one sequence."""

    colors: Colors

    def ansi(self) -> str:
        parts = []
        if self.colors.foreground is not None:
            parts.append(str(Colored(ColorTarget.FOREGROUND, self.colors.foreground)))
        if self.colors.background is not None:
            parts.append(str(Colored(ColorTarget.BACKGROUND, self.colors.background)))
        if not parts:
            return ""
        return f"{CSI}{';'.join(parts)}m"


@dataclass(frozen=True)
class SetAttribute(Command):
    """Set one attribute."""

    attribute: Attribute

    def ansi(self) -> str:
        return f"{CSI}{self.attribute.sgr()}m"


@dataclass(frozen=True)
class SetAttributes(Command):
    """Set every attribute in a set, in definition order."""

    attributes: Attributes

    def ansi(self) -> str:
        return "".join(
            SetAttribute(attr).ansi() for attr in Attribute if self.attributes.has(attr)
        )


@dataclass(frozen=True)
class SetStyle(Command):
    """Set the colors and attributes of a style."""

    content_style: ContentStyle

    def ansi(self) -> str:
        s = self.content_style
        parts = []
        if s.background_color is not None:
            parts.append(SetBackgroundColor(s.background_color).ansi())
        if s.foreground_color is not None:
            parts.append(SetForegroundColor(s.foreground_color).ansi())
        if s.underline_color is not None:
            parts.append(SetUnderlineColor(s.underline_color).ansi())
        if not s.attributes.is_empty():
            parts.append(SetAttributes(s.attributes).ansi())
        return "".join(parts)


@dataclass(frozen=True)
class PrintStyledContent(Command):
    """Print styled content and undo its style afterwards."""

    styled: StyledContent

    def ansi(self) -> str:
        s = self.styled.content_style
        parts = []
        reset_background = reset_foreground = reset_all = False

        if s.background_color is not None:
            parts.append(SetBackgroundColor(s.background_color).ansi())
            reset_background = True
        if s.foreground_color is not None:
            parts.append(SetForegroundColor(s.foreground_color).ansi())
            reset_foreground = True
        if s.underline_color is not None:
            parts.append(SetUnderlineColor(s.underline_color).ansi())
            reset_foreground = True
        if not s.attributes.is_empty():
            parts.append(SetAttributes(s.attributes).ansi())
            reset_all = True

        parts.append(str(self.styled.content))

        if reset_all:
            # A full reset also clears colors, so no separate color reset is needed.
            parts.append(ResetColor().ansi())
        else:
            if reset_background:
                parts.append(SetBackgroundColor(Color.RESET).ansi())
            if reset_foreground:
                parts.append(SetForegroundColor(Color.RESET).ansi())
        return "".join(parts)


@dataclass(frozen=True)
class ResetColor(Command):
    """Reset colors and attributes to the terminal defaults."""

    def ansi(self) -> str:
        return f"{CSI}0m"


@dataclass(frozen=True)
class Print(Command):
    """Print any value as text."""

    value: Any

    def ansi(self) -> str:
        return str(self.value)
"""A mixin of shorthand methods that set colors and attributes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from termcraft.attributes import Attribute
from termcraft.color import AnyColor, Color


class Stylize(ABC):
    """Methods that return a styled copy with a color or attribute applied.

    ``stylize`` must return a new styled value whose ``content_style``
    exposes ``foreground_color``, ``background_color``, ``underline_color``
    and ``attributes``.
    """

    @abstractmethod
    def stylize(self) -> Stylize:
        """Return a styled copy of this value."""

    def with_(self, color: AnyColor) -> Stylize:
        """Set the foreground color."""
        styled = self.stylize()
        styled.content_style.foreground_color = color
        return styled

    def on(self, color: AnyColor) -> Stylize:
        """Set the background color."""
        styled = self.stylize()
        styled.content_style.background_color = color
        return styled

    def underline(self, color: AnyColor) -> Stylize:
        """Set the underline color."""
        styled = self.stylize()
        styled.content_style.underline_color = color
        return styled

    def attribute(self, attr: Attribute) -> Stylize:
        """Add an attribute."""
        styled = self.stylize()
        target = styled.content_style
        target.attributes = target.attributes.with_(attr)
        return styled

    def reset(self) -> Stylize:
        """Apply the RESET attribute."""
        return self.attribute(Attribute.RESET)

    def bold(self) -> Stylize:
        """Apply the BOLD attribute."""
        return self.attribute(Attribute.BOLD)

    def underlined(self) -> Stylize:
        """Apply the UNDERLINED attribute."""
        return self.attribute(Attribute.UNDERLINED)

    def reverse(self) -> Stylize:
        """Apply the REVERSE attribute."""
        return self.attribute(Attribute.REVERSE)

    def dim(self) -> Stylize:
        """Apply the DIM attribute."""
        return self.attribute(Attribute.DIM)

    def italic(self) -> Stylize:
        """Apply the ITALIC attribute."""
        return self.attribute(Attribute.ITALIC)

    def negative(self) -> Stylize:
        """Apply the REVERSE attribute."""
        return self.attribute(Attribute.REVERSE)

    def slow_blink(self) -> Stylize:
        """Apply the SLOW_BLINK attribute."""
        return self.attribute(Attribute.SLOW_BLINK)

    def rapid_blink(self) -> Stylize:
        """Apply the RAPID_BLINK attribute."""
        return self.attribute(Attribute.RAPID_BLINK)

    def hidden(self) -> Stylize:
        """Apply the HIDDEN attribute."""
        return self.attribute(Attribute.HIDDEN)

    def crossed_out(self) -> Stylize:
        """Apply the CROSSED_OUT attribute."""
        return self.attribute(Attribute.CROSSED_OUT)

    def black(self) -> Stylize:
        """Set the foreground color to black."""
        return self.with_(Color.BLACK)

    def on_black(self) -> Stylize:
        """Set the background color to black."""
        return self.on(Color.BLACK)

    def underline_black(self) -> Stylize:
        """Set the underline color to black."""
        return self.underline(Color.BLACK)

    def dark_grey(self) -> Stylize:
        """Set the foreground color to dark grey."""
        return self.with_(Color.DARK_GREY)

    def on_dark_grey(self) -> Stylize:
        """Set the background color to dark grey."""
        return self.on(Color.DARK_GREY)

    def underline_dark_grey(self) -> Stylize:
        """Set the underline color to dark grey."""
        return self.underline(Color.DARK_GREY)

    def red(self) -> Stylize:
        """Set the foreground color to red."""
        return self.with_(Color.RED)

    def on_red(self) -> Stylize:
        """Set the background color to red."""
        return self.on(Color.RED)

    def underline_red(self) -> Stylize:
        """Set the underline color to red."""
        return self.underline(Color.RED)

    def dark_red(self) -> Stylize:
        """Set the foreground color to dark red."""
        return self.with_(Color.DARK_RED)

    def on_dark_red(self) -> Stylize:
        """Set the background color to dark red."""
        return self.on(Color.DARK_RED)

    def underline_dark_red(self) -> Stylize:
        """Set the underline color to dark red."""
        return self.underline(Color.DARK_RED)

    def green(self) -> Stylize:
        """Set the foreground color to green."""
        return self.with_(Color.GREEN)

    def on_green(self) -> Stylize:
        """Set the background color to green."""
        return self.on(Color.GREEN)

    def underline_green(self) -> Stylize:
        """Set the underline color to green."""
        return self.underline(Color.GREEN)

    def dark_green(self) -> Stylize:
        """Set the foreground color to dark green."""
        return self.with_(Color.DARK_GREEN)

    def on_dark_green(self) -> Stylize:
        """Set the background color to dark green."""
        return self.on(Color.DARK_GREEN)

    def underline_dark_green(self) -> Stylize:
        """Set the underline color to dark green."""
        return self.underline(Color.DARK_GREEN)

    def yellow(self) -> Stylize:
        """Set the foreground color to yellow."""
        return self.with_(Color.YELLOW)

    def on_yellow(self) -> Stylize:
        """Set the background color to yellow."""
        return self.on(Color.YELLOW)

    def underline_yellow(self) -> Stylize:
        """Set the underline color to yellow."""
        return self.underline(Color.YELLOW)

    def dark_yellow(self) -> Stylize:
        """Set the foreground color to dark yellow."""
        return self.with_(Color.DARK_YELLOW)

    def on_dark_yellow(self) -> Stylize:
        """Set the background color to dark yellow."""
        return self.on(Color.DARK_YELLOW)

    def underline_dark_yellow(self) -> Stylize:
        """Set the underline color to dark yellow."""
        return self.underline(Color.DARK_YELLOW)

    def blue(self) -> Stylize:
        """Set the foreground color to blue."""
        return self.with_(Color.BLUE)

    def on_blue(self) -> Stylize:
        """Set the background color to blue."""
        return self.on(Color.BLUE)

    def underline_blue(self) -> Stylize:
        """Set the underline color to blue."""
        return self.underline(Color.BLUE)

    def dark_blue(self) -> Stylize:
        """Set the foreground color to dark blue."""
        return self.with_(Color.DARK_BLUE)

    def on_dark_blue(self) -> Stylize:
        """Set the background color to dark blue."""
        return self.on(Color.DARK_BLUE)

    def underline_dark_blue(self) -> Stylize:
        """Set the underline color to dark blue."""
        return self.underline(Color.DARK_BLUE)

    def magenta(self) -> Stylize:
        """Set the foreground color to magenta."""
        return self.with_(Color.MAGENTA)

    def on_magenta(self) -> Stylize:
        """Set the background color to magenta."""
        return self.on(Color.MAGENTA)

    def underline_magenta(self) -> Stylize:
        """Set the underline color to magenta."""
        return self.underline(Color.MAGENTA)

    def dark_magenta(self) -> Stylize:
        """Set the foreground color to dark magenta."""
        return self.with_(Color.DARK_MAGENTA)

    def on_dark_magenta(self) -> Stylize:
        """Set the background color to dark magenta."""
        return self.on(Color.DARK_MAGENTA)

    def underline_dark_magenta(self) -> Stylize:
        """Set the underline color to dark magenta."""
        return self.underline(Color.DARK_MAGENTA)

    def cyan(self) -> Stylize:
        """Set the foreground color to cyan."""
        return self.with_(Color.CYAN)

    def on_cyan(self) -> Stylize:
        """Set the background color to cyan."""
        return self.on(Color.CYAN)

    def underline_cyan(self) -> Stylize:
        """Set the underline color to cyan."""
        return self.underline(Color.CYAN)

    def dark_cyan(self) -> Stylize:
        """Set the foreground color to dark cyan."""
        return self.with_(Color.DARK_CYAN)

    def on_dark_cyan(self) -> Stylize:
        """Set the background color to dark cyan."""
        return self.on(Color.DARK_CYAN)

    def underline_dark_cyan(self) -> Stylize:
        """Set the underline color to dark cyan."""
        return self.underline(Color.DARK_CYAN)

    def white(self) -> Stylize:
        """Set the foreground color to white."""
        return self.with_(Color.WHITE)

    def on_white(self) -> Stylize:
        """Set the background color to white."""
        return self.on(Color.WHITE)

    def underline_white(self) -> Stylize:
        """Set the underline color to white."""
        return self.underline(Color.WHITE)

    def grey(self) -> Stylize:
        """Set the foreground color to grey."""
        return self.with_(Color.GREY)

    def on_grey(self) -> Stylize:
        """Set the background color to grey."""
        return self.on(Color.GREY)

    def underline_grey(self) -> Stylize:
        """Set the underline color to grey."""
        return self.underline(Color.GREY)
import io

import pytest

from termcraft.attributes import Attribute, Attributes
from termcraft.color import AnsiValue, Color, Rgb
from termcraft.colored import set_ansi_color_disabled
from termcraft.colors import Colors
from termcraft.command import execute
from termcraft.styling import (
    ContentStyle,
    Print,
    PrintStyledContent,
    ResetColor,
    SetAttribute,
    SetAttributes,
    SetBackgroundColor,
    SetColors,
    SetForegroundColor,
    SetStyle,
    SetUnderlineColor,
    StyledContent,
    available_color_count,
    force_color_output,
    style,
)


@pytest.fixture(autouse=True)
def colors_enabled():
    set_ansi_color_disabled(False)
    yield
    set_ansi_color_disabled(False)


# Color count from the environment


def test_colorterm_overrides_term(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    monkeypatch.setenv("TERM", "xterm-256color")
    assert available_color_count() == 65535


def test_term_24bits(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.setenv("TERM", "xterm-24bits")
    assert available_color_count() == 65535


def test_term_256color(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    assert available_color_count() == 256


def test_default_color_count(monkeypatch):
    monkeypatch.delenv("COLORTERM", raising=False)
    monkeypatch.delenv("TERM", raising=False)
    assert available_color_count() == 8


def test_unsupported_term_colorterm_values(monkeypatch):
    monkeypatch.setenv("COLORTERM", "gibberish")
    monkeypatch.setenv("TERM", "gibberish")
    assert available_color_count() == 8


# Stylize on styles and styled content


def test_set_fg_bg_add_attr():
    s = ContentStyle().with_(Color.BLUE).on(Color.RED).attribute(Attribute.BOLD)
    assert s.foreground_color == Color.BLUE
    assert s.background_color == Color.RED
    assert s.attributes.has(Attribute.BOLD)

    styled = s.apply("test")
    styled = styled.with_(Color.GREEN).on(Color.MAGENTA).attribute(Attribute.NO_ITALIC)
    result = styled.content_style
    assert result.foreground_color == Color.GREEN
    assert result.background_color == Color.MAGENTA
    assert result.attributes.has(Attribute.BOLD)
    assert result.attributes.has(Attribute.NO_ITALIC)


def test_stylize_does_not_modify_original():
    base = ContentStyle()
    red = base.red().bold()
    assert base.foreground_color is None
    assert base.attributes.is_empty()
    assert red.foreground_color == Color.RED
    assert red.attributes.has(Attribute.BOLD)


def test_style_wraps_value_with_empty_style():
    styled = style("hello")
    assert styled.content == "hello"
    assert styled.content_style == ContentStyle()


def test_underline_color_shorthand():
    styled = style("x").underline_cyan().on_dark_blue()
    assert styled.content_style.underline_color == Color.CYAN
    assert styled.content_style.background_color == Color.DARK_BLUE


# Commands


def test_set_foreground_color():
    assert SetForegroundColor(Color.BLUE).ansi() == "\x1b[38;5;12m"


def test_set_background_color_rgb():
    assert SetBackgroundColor(Rgb(1, 2, 3)).ansi() == "\x1b[48;2;1;2;3m"


def test_set_underline_color_ansi_value():
    assert SetUnderlineColor(AnsiValue(200)).ansi() == "\x1b[58;5;200m"


def test_set_colors_both():
    assert SetColors(Colors(Color.GREEN, Color.BLACK)).ansi() == "\x1b[38;5;10;48;5;0m"


def test_set_colors_foreground_only():
    assert SetColors(Colors(foreground=Color.RED)).ansi() == "\x1b[38;5;9m"


def test_set_colors_background_only():
    assert SetColors(Colors(background=Color.RESET)).ansi() == "\x1b[49m"


def test_set_colors_none():
    assert SetColors(Colors()).ansi() == ""


def test_set_attribute():
    assert SetAttribute(Attribute.BOLD).ansi() == "\x1b[1m"
    assert SetAttribute(Attribute.DOUBLE_UNDERLINED).ansi() == "\x1b[4:2m"


def test_set_attributes_in_definition_order():
    attrs = Attributes.from_iterable([Attribute.ITALIC, Attribute.BOLD])
    assert SetAttributes(attrs).ansi() == "\x1b[1m\x1b[3m"


def test_set_style_order():
    s = ContentStyle(
        foreground_color=Color.RED,
        background_color=Color.BLUE,
        underline_color=Color.GREEN,
        attributes=Attributes.none().with_(Attribute.BOLD),
    )
    assert SetStyle(s).ansi() == (
        "\x1b[48;5;12m\x1b[38;5;9m\x1b[58;5;10m\x1b[1m"
    )


def test_print_styled_content_colors_only():
    styled = style("x").red().on_blue()
    assert PrintStyledContent(styled).ansi() == (
        "\x1b[48;5;12m\x1b[38;5;9mx\x1b[49m\x1b[39m"
    )


def test_print_styled_content_with_attribute_resets_all():
    styled = style("x").red().bold()
    assert str(styled) == "\x1b[38;5;9m\x1b[1mx\x1b[0m"


def test_print_styled_content_underline_resets_foreground():
    styled = style("x").underline_red()
    assert str(styled) == "\x1b[58;5;9mx\x1b[39m"


def test_print_styled_content_plain():
    assert str(style(42)) == "42"


def test_reset_color():
    assert ResetColor().ansi() == "\x1b[0m"
    assert str(ResetColor()) == "\x1b[0m"


def test_print():
    assert Print(42).ansi() == "42"
    assert str(Print("text")) == "text"


def test_force_color_output_off_and_on():
    force_color_output(False)
    assert SetForegroundColor(Color.RED).ansi() == "\x1b[m"
    force_color_output(True)
    assert SetForegroundColor(Color.RED).ansi() == "\x1b[38;5;9m"


def test_execute_styled_commands():
    out = io.StringIO()
    execute(out, SetForegroundColor(Color.BLUE), Print("hi"), ResetColor())
    assert out.getvalue() == "\x1b[38;5;12mhi\x1b[0m"


def test_styled_content_stylize_is_independent():
    original = StyledContent(ContentStyle(), "a")
    changed = original.green()
    assert original.content_style.foreground_color is None
    assert changed.content_style.foreground_color == Color.GREEN
    assert changed.content == "a"
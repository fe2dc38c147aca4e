# termcraft

Styled text and terminal control through ANSI escape sequences.

termcraft provides:

- **Colors and attributes** (`termcraft.color`, `termcraft.attributes`):
  `Color`, `Rgb`, `AnsiValue`, `Attribute`, `Attributes`
- **Colored values** (`termcraft.colored`, `termcraft.colors`): `Colored`,
  `ColorTarget`, `Colors`
- **Styled content** (`termcraft.styling`, `termcraft.stylize`): build a
  `ContentStyle`, apply it, and print the result
- **Commands** (`termcraft.command`, `termcraft.styling`, `termcraft.terminal`):
  objects that render to escape sequences and are written with `queue`
  (written only) or `execute` (written, then flushed)
- **Terminal helpers** (`termcraft.console`): raw mode, terminal size, TTY
  detection

It has no dependencies outside the standard library.

## Installation

```
pip install termcraft
```

## Styling text

```python
from termcraft.styling import style, ContentStyle
from termcraft.color import Color, Rgb
from termcraft.attributes import Attribute

text = style("Blue on yellow").with_(Color.BLUE).on(Color.YELLOW)
print(text)

print(style("Bold").bold())
print(style("Red on blue").red().on_blue())
print(style("Struck out").attribute(Attribute.CROSSED_OUT))

warning = ContentStyle(foreground_color=Rgb(255, 128, 0)).underlined()
print(warning.apply("custom style"))
```

Every `Stylize` method (`with_`, `on`, `underline`, `attribute`, `bold`,
`red`, `on_red`, `underline_red`, ...) returns a new styled copy and leaves
the original untouched.

Printing a `StyledContent` writes its colors and attributes, the content, and
then undoes the style: a full reset (`ESC[0m`) when attributes were set,
otherwise a reset of just the colors that were set.

## Commands

Commands are written to any object that has `write` and `flush`, such as
`sys.stdout`.

```python
import sys
from termcraft.command import queue, execute
from termcraft.styling import SetForegroundColor, Print, ResetColor
from termcraft.terminal import Clear, ClearType, SetTitle
from termcraft.color import Color

execute(
    sys.stdout,
    SetTitle("demo"),
    Clear(ClearType.ALL),
    SetForegroundColor(Color.GREEN),
    Print("Hello\n"),
    ResetColor(),
)

queue(sys.stdout, Print("written, flushed later"))
sys.stdout.flush()
```

A command's `ansi()` gives the escape sequence it writes, and `str(command)`
gives the same string. Errors raised by the writer propagate.

Style commands in `termcraft.styling`: `SetForegroundColor`,
`SetBackgroundColor`, `SetUnderlineColor`, `SetColors`, `SetAttribute`,
`SetAttributes`, `SetStyle`, `PrintStyledContent`, `ResetColor`, `Print`.

Screen commands in `termcraft.terminal`: `DisableLineWrap`, `EnableLineWrap`,
`EnterAlternateScreen`, `LeaveAlternateScreen`, `ScrollUp`, `ScrollDown`
(zero rows writes nothing), `Clear` with a `ClearType`, `SetSize(columns,
rows)`, `SetTitle`, `BeginSynchronizedUpdate`, `EndSynchronizedUpdate`.

## Parsing and serializing colors

```python
from termcraft.color import parse_color_ansi, parse_color, color_from_str, color_to_str, Rgb
from termcraft.colored import Colored
from termcraft.colors import Colors

parse_color_ansi("2;50;60;70")   # Rgb(r=50, g=60, b=70)
parse_color_ansi("5;26")         # AnsiValue(value=26)
parse_color("dark_red")          # Color.DARK_RED; unknown names give Color.WHITE
Colored.parse_ansi("48;5;26")    # background, AnsiValue(value=26)
Colored.parse_ansi("39")         # foreground, Color.RESET

color_from_str("#ff8000")        # Rgb(r=255, g=128, b=0)
color_from_str("ansi_(200)")     # AnsiValue(value=200)
color_to_str(Rgb(1, 2, 3))       # "rgb_(1,2,3)"
```

Parsing functions return `None` for text that is not exactly one color;
`color_from_name` and `color_from_str` raise `ValueError` instead.
`Colors.then` combines two color pairs, the second taking precedence.

## Color support

`termcraft.styling.available_color_count()` reads `COLORTERM`, or `TERM` if
that is unset, and reports 65535 for true color, 256 for 256-color terminals
and 8 otherwise.

Color sequences are written as empty when `NO_COLOR` is set to a non-empty
value; the variable is read once, on first use. `force_color_output(True)`
or `force_color_output(False)` overrides it.

## Terminal

```python
from termcraft.console import size, window_size, is_tty, enable_raw_mode, disable_raw_mode

columns, rows = size()
print(window_size())     # WindowSize(rows=..., columns=..., width=..., height=...)
print(is_tty(0))

enable_raw_mode()
try:
    ...
finally:
    disable_raw_mode()
```

Raw mode and size lookups need a POSIX terminal with `termios`; elsewhere they
raise `OSError`. When the window size cannot be read, `size()` falls back to
the `tput` program, and raises `OSError` if that fails as well.
`is_raw_mode_enabled()` reports whether this package switched raw mode on.

## What termcraft does not do

termcraft does not read keyboard, mouse or resize events, and has no commands
for moving or hiding the cursor. It writes escape sequences only; it has no
separate code path for consoles that do not understand them.

## Running the tests

```
pip install termcraft[test]
pytest
```
"""Terminal styling and control through ANSI escape sequences: colors,
attributes, styled content, screen commands, raw mode and terminal size."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "color",
    "colored",
    "colors",
    "command",
    "console",
    "styling",
    "stylize",
    "terminal",
]
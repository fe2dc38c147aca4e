"""Commands that control the terminal screen: wrapping, screens, scrolling, clearing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from termcraft.command import CSI, Command

_U16_MAX = 0xFFFF


def _check_u16(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be in 0..={_U16_MAX}, got {value}")


@dataclass(frozen=True)
class DisableLineWrap(Command):
    """Disable line wrapping."""

    def ansi(self) -> str:
        return f"{CSI}?7l"


@dataclass(frozen=True)
class EnableLineWrap(Command):
    """Enable line wrapping."""

    def ansi(self) -> str:
        return f"{CSI}?7h"


@dataclass(frozen=True)
class EnterAlternateScreen(Command):
    """Switch to the alternate screen."""

    def ansi(self) -> str:
        return f"{CSI}?1049h"


@dataclass(frozen=True)
class LeaveAlternateScreen(Command):
    """Switch back to the main screen."""

    def ansi(self) -> str:
        return f"{CSI}?1049l"


class ClearType(Enum):
    """Which part of the terminal buffer to clear."""

    ALL = "all"
    PURGE = "purge"
    FROM_CURSOR_DOWN = "from_cursor_down"
    FROM_CURSOR_UP = "from_cursor_up"
    CURRENT_LINE = "current_line"
    UNTIL_NEW_LINE = "until_new_line"


_CLEAR_CODES = {
    ClearType.ALL: "2J",
    ClearType.PURGE: "3J",
    ClearType.FROM_CURSOR_DOWN: "J",
    ClearType.FROM_CURSOR_UP: "1J",
    ClearType.CURRENT_LINE: "2K",
    ClearType.UNTIL_NEW_LINE: "K",
}


@dataclass(frozen=True)
class ScrollUp(Command):
    """Scroll the screen up by ``rows`` rows; zero rows writes nothing."""

    rows: int

    def __post_init__(self) -> None:
        _check_u16("rows", self.rows)

    def ansi(self) -> str:
        return f"{CSI}{self.rows}S" if self.rows else ""


@dataclass(frozen=True)
class ScrollDown(Command):
    """Scroll the screen down by ``rows`` rows; zero rows writes nothing."""

    rows: int

    def __post_init__(self) -> None:
        _check_u16("rows", self.rows)

    def ansi(self) -> str:
        return f"{CSI}{self.rows}T" if self.rows else ""


@dataclass(frozen=True)
class Clear(Command):
    """Clear part of the terminal buffer."""

    clear_type: ClearType

    def ansi(self) -> str:
        return f"{CSI}{_CLEAR_CODES[self.clear_type]}"


@dataclass(frozen=True)
class SetSize(Command):
    """Set the terminal size to ``columns`` by ``rows``."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _check_u16("columns", self.columns)
        _check_u16("rows", self.rows)

    def ansi(self) -> str:
        return f"{CSI}8;{self.rows};{self.columns}t"


@dataclass(frozen=True)
class SetTitle(Command):
    """Set the terminal window title."""

    title: Any

    def ansi(self) -> str:
        return f"\x1b]0;{self.title}\x07"


@dataclass(frozen=True)
class BeginSynchronizedUpdate(Command):
    """Ask the terminal to hold rendering until the update ends."""

    def ansi(self) -> str:
        return f"{CSI}?2026h"


@dataclass(frozen=True)
class EndSynchronizedUpdate(Command):
    """End a synchronized update so the terminal renders again."""

    def ansi(self) -> str:
        return f"{CSI}?2026l"
"""Terminal detection, raw mode and terminal size queries."""

from __future__ import annotations

import contextlib
import os
import struct
import subprocess
import threading
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

try:
    import fcntl
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    fcntl = None  # type: ignore[assignment]
    termios = None  # type: ignore[assignment]

_TTY_PATH = "/dev/tty"
_STDIN_FD = 0
_STDOUT_FD = 1
_WINSIZE = struct.Struct("HHHH")


@dataclass(frozen=True)
class WindowSize:
    """Terminal size in cells and, where the terminal reports it, pixels."""

    rows: int
    columns: int
    width: int
    height: int


def _require_termios() -> None:
    if termios is None or fcntl is None:
        raise OSError("terminal control is not available on this platform")


def is_tty(stream: Any) -> bool:
    """Return whether ``stream`` (a file descriptor or file object) is a terminal."""
    if isinstance(stream, int):
        fd = stream
    else:
        try:
            fd = stream.fileno()
        except (AttributeError, OSError, ValueError):
            return False
    return os.isatty(fd)


@contextlib.contextmanager
def open_tty() -> Iterator[int]:
    """Yield a descriptor for standard input if it is a terminal, else ``/dev/tty``.

    A descriptor opened here is closed when the context exits.
    """
    if os.isatty(_STDIN_FD):
        yield _STDIN_FD
        return
    fd = os.open(_TTY_PATH, os.O_RDWR)
    try:
        yield fd
    finally:
        with contextlib.suppress(OSError):
            os.close(fd)


_raw_lock = threading.Lock()
# The terminal mode from before raw mode was enabled; None when not in raw mode.
_mode_before_raw: Optional[List[Any]] = None


def is_raw_mode_enabled() -> bool:
    """Return whether raw mode was enabled by this module and not yet disabled."""
    with _raw_lock:
        return _mode_before_raw is not None


def _make_raw(attrs: List[Any]) -> List[Any]:
    iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
    iflag &= ~(
        termios.IGNBRK
        | termios.BRKINT
        | termios.PARMRK
        | termios.ISTRIP
        | termios.INLCR
        | termios.IGNCR
        | termios.ICRNL
        | termios.IXON
    )
    oflag &= ~termios.OPOST
    lflag &= ~(termios.ECHO | termios.ECHONL | termios.ICANON | termios.ISIG | termios.IEXTEN)
    cflag &= ~(termios.CSIZE | termios.PARENB)
    cflag |= termios.CS8
    cc = list(cc)
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    return [iflag, oflag, cflag, lflag, ispeed, ospeed, cc]


def enable_raw_mode() -> None:
    """Switch the terminal to raw mode; does nothing if it already is."""
    global _mode_before_raw
    _require_termios()
    with _raw_lock:
        if _mode_before_raw is not None:
            return
        with open_tty() as fd:
            original = termios.tcgetattr(fd)
            saved = list(original)
            saved[6] = list(original[6])
            termios.tcsetattr(fd, termios.TCSANOW, _make_raw(original))
        # Only remember the old mode once the switch has succeeded.
        _mode_before_raw = saved


def disable_raw_mode() -> None:
    """Restore the terminal mode from before ``enable_raw_mode``."""
    global _mode_before_raw
    _require_termios()
    with _raw_lock:
        if _mode_before_raw is None:
            return
        with open_tty() as fd:
            termios.tcsetattr(fd, termios.TCSANOW, _mode_before_raw)
        _mode_before_raw = None


def window_size() -> WindowSize:
    """Return the terminal size, queried on ``/dev/tty`` or else standard output.

    Raises ``OSError`` if the size cannot be read.
    """
    _require_termios()
    try:
        fd = os.open(_TTY_PATH, os.O_RDONLY)
        owned = True
    except OSError:
        fd = _STDOUT_FD
        owned = False
    try:
        data = fcntl.ioctl(fd, termios.TIOCGWINSZ, bytes(_WINSIZE.size))
    finally:
        if owned:
            with contextlib.suppress(OSError):
                os.close(fd)
    rows, columns, width, height = _WINSIZE.unpack(data)
    return WindowSize(rows=rows, columns=columns, width=width, height=height)


def _tput_value(arg: str) -> Optional[int]:
    try:
        result = subprocess.run(["tput", arg], capture_output=True, check=False)
    except OSError:
        return None
    value = 0
    for char in result.stdout.decode("latin-1"):
        if "0" <= char <= "9":
            value = (value * 10 + int(char)) & 0xFFFF
    return value if value > 0 else None


def tput_size() -> Optional[Tuple[int, int]]:
    """Return ``(columns, lines)`` as reported by ``tput``, or ``None``."""
    columns = _tput_value("cols")
    lines = _tput_value("lines")
    if columns is None or lines is None:
        return None
    return columns, lines


def size() -> Tuple[int, int]:
    """Return the terminal size as ``(columns, rows)``.

    Falls back to ``tput`` when the size cannot be queried directly, and
    raises ``OSError`` if that fails too.
    """
    try:
        current = window_size()
    except OSError:
        fallback = tput_size()
        if fallback is None:
            raise OSError("could not determine the terminal size") from None
        return fallback
    return current.columns, current.rows
"""Commands that render to ANSI escape sequences, and helpers to write them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

CSI = "\x1b["


class TextWriter(Protocol):
    """Anything with text ``write`` and ``flush`` methods."""

    def write(self, text: str) -> object: ...

    def flush(self) -> object: ...


class Command(ABC):
    """Something that can be written to a terminal as an ANSI sequence."""

    @abstractmethod
    def ansi(self) -> str:
        """Return the ANSI text that carries out this command."""

    def __str__(self) -> str:
        return self.ansi()


def queue(writer: TextWriter, *args: Command) -> None:
    """Write the ANSI text of each command to ``writer`` without flushing.

    Errors raised by the writer propagate; commands after the failing one
    are not written.
    """
    for command in args:
        writer.write(command.ansi())


def execute(writer: TextWriter, *args: Command) -> None:
    """Write each command to ``writer`` and then flush it."""
    queue(writer, *args)
    writer.flush()
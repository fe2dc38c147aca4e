"""An optional foreground and background color pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from termcraft.color import AnyColor
from termcraft.colored import ColorTarget, Colored


@dataclass(frozen=True)
class Colors:
    """Optionally a foreground and/or a background color."""

    foreground: Optional[AnyColor] = None
    background: Optional[AnyColor] = None

    def then(self, other: Colors) -> Colors:
        """Return the colors that applying ``self`` and then ``other`` gives."""
        return Colors(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
        )

    @classmethod
    def from_colored(cls, colored: Colored) -> Colors:
        """Build from a single colored value.

        An underline color is taken as the background.
        """
        if colored.target is ColorTarget.FOREGROUND:
            return cls(foreground=colored.color)
        return cls(background=colored.color)
"""Text attributes (SGR parameters) and a bit set of them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from termcraft.command import CSI


class Attribute(Enum):
    """A text attribute. Iteration order follows the definition order."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINED = 4
    DOUBLE_UNDERLINED = 5
    UNDERCURLED = 6
    UNDERDOTTED = 7
    UNDERDASHED = 8
    SLOW_BLINK = 9
    RAPID_BLINK = 10
    REVERSE = 11
    HIDDEN = 12
    CROSSED_OUT = 13
    FRAKTUR = 14
    NO_BOLD = 15
    NORMAL_INTENSITY = 16
    NO_ITALIC = 17
    NO_UNDERLINE = 18
    NO_BLINK = 19
    NO_REVERSE = 20
    NO_HIDDEN = 21
    NOT_CROSSED_OUT = 22
    FRAMED = 23
    ENCIRCLED = 24
    OVER_LINED = 25
    NOT_FRAMED_OR_ENCIRCLED = 26
    NOT_OVER_LINED = 27

    def bit(self) -> int:
        """Return the single bit representing this attribute in ``Attributes``.

        The shift is offset by one so that ``RESET`` also gets a bit.
        """
        return 1 << (self.value + 1)

    def sgr(self) -> str:
        """Return the SGR parameter text for this attribute."""
        code = _SGR[self.value]
        if 4 < self.value < 9:
            return f"4:{code}"
        return str(code)

    def __str__(self) -> str:
        return f"{CSI}{self.sgr()}m"


_SGR = (
    0, 1, 2, 3, 4,
    2, 3, 4, 5,
    5, 6, 7, 8, 9,
    20, 21, 22, 23, 24, 25, 27, 28, 29,
    51, 52, 53, 54, 55,
)


def _bits_of(value: Union[Attribute, "Attributes"]) -> int:
    if isinstance(value, Attribute):
        return value.bit()
    if isinstance(value, Attributes):
        return value.bits
    raise TypeError(f"expected Attribute or Attributes, got {type(value).__name__}")


@dataclass
class Attributes:
    """A set of attributes stored as a bit field."""

    bits: int = 0

    @classmethod
    def none(cls) -> Attributes:
        """Return the empty set."""
        return cls(0)

    @classmethod
    def from_iterable(cls, attributes: Iterable[Attribute]) -> Attributes:
        """Build a set holding every given attribute."""
        result = cls()
        for attribute in attributes:
            result.set(attribute)
        return result

    def with_(self, attribute: Attribute) -> Attributes:
        """Return a copy with ``attribute`` set."""
        return Attributes(self.bits | attribute.bit())

    def without(self, attribute: Attribute) -> Attributes:
        """Return a copy with ``attribute`` unset."""
        return Attributes(self.bits & ~attribute.bit())

    def set(self, attribute: Attribute) -> None:
        """Set ``attribute`` in place."""
        self.bits |= attribute.bit()

    def unset(self, attribute: Attribute) -> None:
        """Unset ``attribute`` in place."""
        self.bits &= ~attribute.bit()

    def toggle(self, attribute: Attribute) -> None:
        """Flip ``attribute`` in place."""
        self.bits ^= attribute.bit()

    def has(self, attribute: Attribute) -> bool:
        """Return whether ``attribute`` is set."""
        return self.bits & attribute.bit() != 0

    def extend(self, attributes: Attributes) -> None:
        """Set every attribute of ``attributes``; nothing is removed."""
        self.bits |= attributes.bits

    def is_empty(self) -> bool:
        """Return whether no attribute is set."""
        return self.bits == 0

    def __or__(self, other: Union[Attribute, Attributes]) -> Attributes:
        return Attributes(self.bits | _bits_of(other))

    def __and__(self, other: Union[Attribute, Attributes]) -> Attributes:
        return Attributes(self.bits & _bits_of(other))

    def __xor__(self, other: Union[Attribute, Attributes]) -> Attributes:
        return Attributes(self.bits ^ _bits_of(other))
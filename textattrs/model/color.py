"""
Цвет текста: упакованное 32-битное значение ARGB.

EN: Text color packed into a single 32-bit integer. Layout, high byte first:
alpha, red, green, blue. Parsing of CSS-like color strings goes through
Pillow's ImageColor so names, #rgb/#rrggbb/#rrggbbaa and rgb()/hsl()
notations are all accepted.

Module: textattrs/model/color.py
"""

import logging
from dataclasses import dataclass
from typing import Final, Tuple

from PIL import ImageColor

logger: Final = logging.getLogger(__name__)

MAX_CHANNEL: Final[int] = 0xFF
MAX_PACKED: Final[int] = 0xFF_FF_FF_FF


def _check_channel(name: str, value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Channel '{name}' must be int, got {type(value).__name__}")
    if not 0 <= value <= MAX_CHANNEL:
        raise ValueError(f"Channel '{name}' out of range 0..255: {value}")
    return value


@dataclass(frozen=True, slots=True)
class Color:
    """
    Packed ARGB text color.

    Attributes:
        value: Packed 32-bit integer (0xAARRGGBB).

    Example:
        >>> Color.rgb(0x12, 0x34, 0x56).value == 0xFF123456
        True
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Color value must be int, got {type(self.value).__name__}")
        if not 0 <= self.value <= MAX_PACKED:
            raise ValueError(f"Color value out of 32-bit range: {self.value:#x}")

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create an opaque color (alpha = 255)."""
        return cls.rgba(r, g, b, MAX_CHANNEL)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> "Color":
        _check_channel("r", r)
        _check_channel("g", g)
        _check_channel("b", b)
        _check_channel("a", a)
        return cls((a << 24) | (r << 16) | (g << 8) | b)

    @classmethod
    def from_str(cls, spec: str) -> "Color":
        """
        Parse a color string ("red", "#ff000080", "rgb(255, 0, 0)", ...).

        Raises:
            ValueError: If Pillow does not recognise the string.
        """
        if not isinstance(spec, str):
            raise TypeError(f"Color spec must be str, got {type(spec).__name__}")
        channels = ImageColor.getrgb(spec)
        if len(channels) == 3:
            r, g, b = channels
            return cls.rgb(r, g, b)
        r, g, b, a = channels
        return cls.rgba(r, g, b, a)

    @property
    def r(self) -> int:
        return (self.value & 0x00_FF_00_00) >> 16

    @property
    def g(self) -> int:
        return (self.value & 0x00_00_FF_00) >> 8

    @property
    def b(self) -> int:
        return self.value & 0x00_00_00_FF

    @property
    def a(self) -> int:
        return (self.value & 0xFF_00_00_00) >> 24

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Channels in Pillow's RGBA order."""
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        """Format as #rrggbbaa (always with alpha)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def __repr__(self) -> str:
        return f"Color({self.value:#010x})"

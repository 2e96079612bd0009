"""RGBA colours with saturating arithmetic."""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import ClassVar

_MAX_HEX = 0xFFFFFFFF


def _clamp_channel(value: float) -> int:
    return int(min(max(value, 0), 255))


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    CYAN: ClassVar[Color]
    GRAY: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for name, value in zip("rgba", astuple(self)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"channel {name} must be an integer")
            if not 0 <= value <= 255:
                raise ValueError(f"channel {name} out of range: {value}")

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Build a colour from a 0xRRGGBBAA integer."""
        if not 0 <= value <= _MAX_HEX:
            raise ValueError(f"hex colour out of range: {value}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    @classmethod
    def clamped(cls, r: float, g: float, b: float, a: float = 255) -> Color:
        """Build a colour, clamping each channel into 0..255 and truncating."""
        return cls(
            _clamp_channel(r), _clamp_channel(g), _clamp_channel(b), _clamp_channel(a)
        )

    def to_hex(self) -> int:
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def to_grayscale(self) -> Color:
        gray = (299 * self.r + 587 * self.g + 114 * self.b) // 1000
        return Color(gray, gray, gray, self.a)

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.clamped(*(x + y for x, y in zip(astuple(self), astuple(other))))

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color.clamped(*(x - y for x, y in zip(astuple(self), astuple(other))))

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return Color(
                *(x * y // 255 for x, y in zip(astuple(self), astuple(other)))
            )
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return Color.clamped(*(x * other for x in astuple(self)))

    __rmul__ = __mul__

    def __truediv__(self, divider: object) -> Color:
        if isinstance(divider, bool) or not isinstance(divider, (int, float)):
            return NotImplemented
        return Color.clamped(*(x / divider for x in astuple(self)))

    def __str__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.CYAN = Color(0, 255, 255)
Color.GRAY = Color(128, 128, 128)
Color.TRANSPARENT = Color(0, 0, 0, 0)


def mix_colors(first: Color, second: Color) -> Color:
    """Average two colours channel by channel."""
    return Color(*((x + y) // 2 for x, y in zip(astuple(first), astuple(second))))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Interpolate every channel linearly from ``a`` to ``b``."""
    return Color.clamped(*(x + (y - x) * t for x, y in zip(astuple(a), astuple(b))))
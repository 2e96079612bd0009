"""Rendering-context settings with validated fields."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, fields


class Attribute(enum.IntFlag):
    """Context attribute flags."""

    DEFAULT = 0
    CORE = 1 << 0
    DEBUG = 1 << 2


def _to_count(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"{name} must be finite")
    number = int(value)
    if number < 0:
        raise ValueError(f"{name} cannot be negative")
    return number


@dataclass
class ContextSettings:
    """Settings requested for a rendering context."""

    depth_bits: int = 0
    stencil_bits: int = 0
    antialiasing_level: int = 0
    major_version: int = 1
    minor_version: int = 1
    attribute_flags: Attribute = Attribute.DEFAULT
    srgb_capable: bool = False

    def __post_init__(self) -> None:
        for field in fields(self):
            self._assign(field.name, getattr(self, field.name))

    def _assign(self, name: str, value: object) -> None:
        if name == "srgb_capable":
            object.__setattr__(self, name, bool(value))
        elif name == "attribute_flags":
            object.__setattr__(self, name, Attribute(_to_count(name, value)))
        else:
            object.__setattr__(self, name, _to_count(name, value))

    def update(self, **kwargs: object) -> None:
        """Set the named fields, converting numbers to non-negative integers."""
        names = {field.name for field in fields(self)}
        for name, value in kwargs.items():
            if name not in names:
                raise AttributeError(f"Cannot set value for {name}")
            self._assign(name, value)
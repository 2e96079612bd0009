"""Colour gradients and a gradient that keeps drifting to random colours."""

from __future__ import annotations

import bisect
import random
from typing import Optional

from shootergame.color import Color, lerp_color


def random_color(rng: Optional[random.Random] = None) -> Color:
    """Return an opaque colour with random RGB channels."""
    source = rng if rng is not None else random
    return Color(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))


class ColorGradient:
    """A piecewise-linear mapping from time to colour."""

    def __init__(self) -> None:
        self._times: list[float] = []
        self._colors: dict[float, Color] = {}

    def set_key(self, time: float, color: Color) -> None:
        """Place (or replace) the colour at the given time."""
        time = float(time)
        if time not in self._colors:
            bisect.insort(self._times, time)
        self._colors[time] = color

    def __call__(self, time: float) -> Color:
        if not self._times:
            raise ValueError("gradient has no keys")
        index = bisect.bisect_right(self._times, time)
        if index == 0:
            return self._colors[self._times[0]]
        if index == len(self._times):
            return self._colors[self._times[-1]]
        start, end = self._times[index - 1], self._times[index]
        return lerp_color(
            self._colors[start], self._colors[end], (time - start) / (end - start)
        )


class MovingGradient:
    """A gradient that, every period, starts from its last colour towards a new random one."""

    def __init__(self, period: float, rng: Optional[random.Random] = None) -> None:
        if period <= 0:
            raise ValueError("gradient period must be positive")
        self._period = float(period)
        self._rng = rng
        self._timer = 0.0
        self._gradient = ColorGradient()
        self._gradient.set_key(0, random_color(rng))
        self._gradient.set_key(self._period, random_color(rng))

    @property
    def period(self) -> float:
        return self._period

    @property
    def timer(self) -> float:
        return self._timer

    @property
    def gradient(self) -> ColorGradient:
        return self._gradient

    def update(self, delta_time: float) -> None:
        self._timer += delta_time
        if self._timer >= self._period:
            self._timer = 0.0
            self._gradient.set_key(0, self._gradient(self._period))
            self._gradient.set_key(self._period, random_color(self._rng))

    def current_color(self) -> Color:
        return self._gradient(self._timer)
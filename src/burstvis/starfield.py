from typing import NamedTuple

import numpy as np

from burstvis.constants import (
    SKY_GRADIENT,
    STAR_BRIGHTNESS_MAX,
    STAR_BRIGHTNESS_MIN,
    STAR_COLOR,
    STAR_COUNT,
    STAR_SIZE_MAX,
)


class Star(NamedTuple):
    x: float
    y: float
    size: float
    brightness: float


class Starfield:
    """
    Static background stars over a vertical sky gradient.
    Stars are never moved; a new viewport size throws them away and
    scatters a fresh set.
    """

    def __init__(self, width, height, count=STAR_COUNT, rng=None):
        self.count = count
        self.rng = rng if rng is not None else np.random.default_rng()
        self.stars = []
        self.rebuild(width, height)

    def rebuild(self, width, height):
        """Scatter `count` stars uniformly over [0, width) x [0, height)."""
        self.width = width
        self.height = height

        xs = self.rng.uniform(0, width, self.count)
        ys = self.rng.uniform(0, height, self.count)
        sizes = self.rng.uniform(0, STAR_SIZE_MAX, self.count)
        brightness = self.rng.uniform(STAR_BRIGHTNESS_MIN, STAR_BRIGHTNESS_MAX, self.count)

        self.stars = [
            Star(float(x), float(y), float(s), float(b))
            for x, y, s, b in zip(xs, ys, sizes, brightness)
        ]

    def render(self, surface):
        """Paint the sky gradient, then every star at its own brightness."""
        surface.global_alpha = 1.0
        surface.fill_gradient(SKY_GRADIENT)

        surface.fill_style = STAR_COLOR
        for star in self.stars:
            surface.global_alpha = star.brightness
            surface.fill_circle(star.x, star.y, star.size)
        surface.global_alpha = 1.0

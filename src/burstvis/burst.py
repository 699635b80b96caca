import numpy as np

from burstvis.constants import (
    PALETTE,
    PARTICLE_DECAY_MAX,
    PARTICLE_DECAY_MIN,
    PARTICLE_SIZE_MAX,
    PARTICLE_SIZE_MIN,
    PARTICLE_SPEED_MAX,
    PARTICLE_SPEED_MIN,
    PARTICLES_PER_BURST,
)
from burstvis.particle import Particle


class Burst:
    """
    One explosion: a set of particles flying out of a single origin.
    The burst is only ever mutated by its own `advance` call.
    """

    def __init__(self, x, y, color=None, rng=None, particle_count=PARTICLES_PER_BURST):
        self.x = x
        self.y = y
        self.rng = rng if rng is not None else np.random.default_rng()
        self.color = color if color is not None else self.random_color()
        self.particles = []
        self._create_particles(particle_count)

    def random_color(self):
        """Pick a colour uniformly from the fixed palette."""
        return PALETTE[int(self.rng.integers(len(PALETTE)))]

    def _create_particles(self, count):
        """
        Scatter `count` particles in random directions.
        All random draws are done up front as arrays.
        """
        angles = self.rng.uniform(0, 2 * np.pi, count)
        speeds = self.rng.uniform(PARTICLE_SPEED_MIN, PARTICLE_SPEED_MAX, count)
        sizes = self.rng.uniform(PARTICLE_SIZE_MIN, PARTICLE_SIZE_MAX, count)
        decays = self.rng.uniform(PARTICLE_DECAY_MIN, PARTICLE_DECAY_MAX, count)

        vxs = np.cos(angles) * speeds
        vys = np.sin(angles) * speeds

        for vx, vy, size, decay in zip(vxs, vys, sizes, decays):
            self.particles.append(
                Particle(self.x, self.y, float(vx), float(vy), float(size), float(decay), self.color)
            )

    def advance(self):
        """Move every particle one frame forward and drop the faded ones."""
        for particle in self.particles:
            particle.update()
        self.particles = [p for p in self.particles if p.is_alive()]

    def render(self, surface):
        """Draw every particle as a filled circle at its current opacity."""
        for particle in self.particles:
            surface.global_alpha = particle.alpha
            surface.fill_style = particle.color
            surface.fill_circle(particle.x, particle.y, particle.size)
        surface.global_alpha = 1.0

    def is_exhausted(self):
        return len(self.particles) == 0

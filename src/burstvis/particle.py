from burstvis.constants import (
    ALPHA_FADE,
    MIN_ALPHA,
    MIN_SIZE,
    PARTICLE_GRAVITY,
    SIZE_SHRINK,
)


class Particle:
    """Represents a single spark thrown out by a burst."""

    def __init__(self, x, y, vx, vy, size, decay, color, gravity=PARTICLE_GRAVITY, alpha=1.0):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.size = size
        self.decay = decay
        self.gravity = gravity
        self.alpha = alpha
        self.color = color

    def update(self):
        """Advance the particle by one frame."""
        self.x += self.vx
        self.y += self.vy
        self.vy += self.gravity
        self.vx *= self.decay
        self.vy *= self.decay
        self.alpha *= ALPHA_FADE
        self.size *= SIZE_SHRINK

    def is_alive(self):
        """Check if particle is still visible enough to be drawn."""
        return self.alpha > MIN_ALPHA and self.size > MIN_SIZE

import numpy as np
import pytest

from burstvis.timers import FrameScheduler, ManualClock


class RecordingSurface:
    """Drawing surface that remembers what was drawn instead of drawing it."""

    def __init__(self, width=800, height=600):
        self.global_alpha = 1.0
        self.fill_style = "#000000"
        self.circles = []
        self.gradients = 0
        self.fades = []
        self.resize(width, height)

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.frame = np.zeros((height, width, 3), dtype=np.uint8)

    def fill_rect(self, x, y, w, h):
        pass

    def fill_gradient(self, stops):
        self.gradients += 1

    def fill_circle(self, x, y, radius):
        self.circles.append((x, y, radius, self.global_alpha, self.fill_style))

    def fade_to(self, image, alpha, snap=0):
        self.fades.append(alpha)

    def snapshot(self):
        return self.frame.copy()


class FailingTone:
    def __init__(self):
        self.calls = 0

    def play(self):
        self.calls += 1
        raise OSError("no default output device")


class CountingTone:
    def __init__(self):
        self.calls = 0

    def play(self):
        self.calls += 1


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def scheduler(clock):
    return FrameScheduler(clock)

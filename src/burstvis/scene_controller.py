import logging

import numpy as np

from burstvis.burst import Burst
from burstvis.constants import (
    AUTO_FIRE_PERIOD,
    BURSTS_PER_SPAWN,
    LAUNCH_MARGIN,
    SPAWN_JITTER,
    TRAIL_FILL_ALPHA,
    TRAIL_SNAP,
    WELCOME_COUNT,
    WELCOME_DELAY,
    WELCOME_STAGGER,
)
from burstvis.starfield import Starfield

logger = logging.getLogger(__name__)


class SceneController:
    """
    Owns the live bursts and the starfield, and runs the per-frame update.
    Input, timers and frames all arrive on one thread; nothing here blocks.
    """

    def __init__(self, canvas, scheduler, tone=None, rng=None):
        self.canvas = canvas
        self.scheduler = scheduler
        self.tone = tone
        self.rng = rng if rng is not None else np.random.default_rng()

        self.w = canvas.width
        self.h = canvas.height

        # Live bursts, oldest first
        self.bursts = []
        self.starfield = Starfield(self.w, self.h, rng=self.rng)
        self.background = None

        # Auto-fire state
        self.is_auto_firing = False
        self.auto_fire_timer = None
        self.auto_fire_listeners = []

        self.frame_count = 0

    def initialize(self):
        """
        Paint the first background and queue the welcome show.
        """
        logger.info(f"[+] Starting scene: {self.w}x{self.h}")
        self._repaint_background()
        self.scheduler.call_later(WELCOME_DELAY, self._launch_welcome)

    def _launch_welcome(self):
        for i in range(WELCOME_COUNT):
            self.scheduler.call_later(i * WELCOME_STAGGER, self.launch_random)

    def _repaint_background(self):
        """Render sky and stars once and keep the image as the trail fill."""
        self.starfield.render(self.canvas)
        self.background = self.canvas.snapshot()

    def spawn_burst(self, x, y, color=None):
        """
        Explode a burst near (x, y). The origin is jittered a little so
        repeated clicks on one spot don't stack perfectly.
        """
        for _ in range(BURSTS_PER_SPAWN):
            offset_x, offset_y = self.rng.uniform(-SPAWN_JITTER, SPAWN_JITTER, 2)
            self.bursts.append(Burst(x + offset_x, y + offset_y, color, rng=self.rng))

        self._play_cue()

    def _play_cue(self):
        if self.tone is None:
            return
        try:
            self.tone.play()
        except Exception as e:
            logger.debug(f"[i] Audio not supported: {e}")

    def launch_point(self):
        """Random point inside the viewport, inset by LAUNCH_MARGIN."""
        margin_x = min(LAUNCH_MARGIN, self.w / 2)
        margin_y = min(LAUNCH_MARGIN, self.h / 2)
        x = self.rng.uniform(margin_x, self.w - margin_x)
        y = self.rng.uniform(margin_y, self.h - margin_y)
        return float(x), float(y)

    def launch_random(self):
        self.spawn_burst(*self.launch_point())

    # --- Auto-fire ---

    def toggle_auto_fire(self):
        if self.is_auto_firing:
            self.stop_auto_fire()
        else:
            self.start_auto_fire()

    def start_auto_fire(self):
        if self.is_auto_firing:
            return
        self.auto_fire_timer = self.scheduler.call_every(AUTO_FIRE_PERIOD, self.launch_random)
        self.is_auto_firing = True
        logger.info("[+] Auto-fire on")
        self._notify_auto_fire()

    def stop_auto_fire(self):
        if not self.is_auto_firing:
            return
        self.auto_fire_timer.cancel()
        self.auto_fire_timer = None
        self.is_auto_firing = False
        logger.info("[+] Auto-fire off")
        self._notify_auto_fire()

    def _notify_auto_fire(self):
        for listener in self.auto_fire_listeners:
            listener(self.is_auto_firing)

    def clear_all(self):
        self.bursts = []

    # --- Frame loop ---

    def render_frame(self):
        """
        Draw one frame: fade the last frame towards the sky, then advance
        and draw every burst, dropping those with no particles left.
        """
        if self.background is None:
            raise RuntimeError("initialize() must be called before rendering")

        # 1. Trail effect: the old frame shows through the fill
        self.canvas.fade_to(self.background, TRAIL_FILL_ALPHA, snap=TRAIL_SNAP)

        # 2. Update and draw bursts in the order they were created
        alive = []
        for burst in self.bursts:
            burst.advance()
            burst.render(self.canvas)
            if not burst.is_exhausted():
                alive.append(burst)
        self.bursts = alive

        self.frame_count += 1

    def tick(self):
        """One display refresh: fire due timers, then draw."""
        self.scheduler.run_pending()
        self.render_frame()

    def resize_viewport(self, width, height):
        """Match a new viewport size; stars are scattered afresh."""
        logger.info(f"[i] Viewport resized to {width}x{height}")
        self.w = width
        self.h = height
        self.canvas.resize(width, height)
        self.starfield.rebuild(width, height)
        self._repaint_background()

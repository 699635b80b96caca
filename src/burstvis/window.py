import logging

import cv2

from burstvis.constants import AUTO_FIRE, CLEAR_SCREEN, QUIT_KEYS, STOP_FIRE, WINDOW_NAME
from burstvis.controls import ControlPanel

logger = logging.getLogger(__name__)


class FireworksWindow:
    """
    OpenCV window around a SceneController.
    Routes mouse clicks, key presses and window resizes into the scene and
    drives one `scene.tick()` per frame until stopped or closed.
    """

    def __init__(self, scene, fps, name=WINDOW_NAME):
        self.scene = scene
        self.name = name
        self.frame_delay = max(1, int(1000 / fps))
        self.controls = ControlPanel(scene.w, scene.h)
        self.running = False

        scene.auto_fire_listeners.append(self.controls.set_auto_firing)

    def open(self):
        cv2.namedWindow(self.name, cv2.WINDOW_NORMAL)
        cv2.resizeWindow(self.name, self.scene.w, self.scene.h)
        cv2.setMouseCallback(self.name, self._on_mouse)
        self.scene.initialize()

    def _on_mouse(self, event, x, y, flags, param):
        if event != cv2.EVENT_LBUTTONDOWN:
            return
        control_id = self.controls.hit_test(x, y)
        if control_id is not None:
            self.activate(control_id)
        else:
            self.scene.spawn_burst(x, y)

    def activate(self, control_id):
        """Dispatch one of the three UI controls to the scene."""
        logger.debug(f"[i] Control: {control_id}")
        if control_id == AUTO_FIRE:
            self.scene.toggle_auto_fire()
        elif control_id == STOP_FIRE:
            self.scene.stop_auto_fire()
        elif control_id == CLEAR_SCREEN:
            self.scene.clear_all()

    def _on_key(self, key):
        if key in QUIT_KEYS:
            self.stop()
            return
        control_id = self.controls.control_for_key(key)
        if control_id is not None:
            self.activate(control_id)

    def _check_resize(self):
        _, _, width, height = cv2.getWindowImageRect(self.name)
        if width <= 0 or height <= 0:
            return
        if (width, height) != (self.scene.w, self.scene.h):
            self.scene.resize_viewport(width, height)
            self.controls.layout(width, height)

    def _is_closed(self):
        return cv2.getWindowProperty(self.name, cv2.WND_PROP_VISIBLE) < 1

    def run(self):
        """Frame loop. Returns when `stop` is called or the window is closed."""
        self.running = True
        logger.info("[+] Click to launch fireworks. Keys: a auto-fire, s stop, c clear, q quit")
        while self.running:
            self._check_resize()
            self.scene.tick()

            # Buttons go on a copy so they don't smear into the trails
            display = self.controls.draw(self.scene.canvas.snapshot())
            cv2.imshow(self.name, display)

            key = cv2.waitKey(self.frame_delay) & 0xFF
            if key != 0xFF:
                self._on_key(key)
            if self.running and self._is_closed():
                self.stop()

    def stop(self):
        self.running = False

    def close(self):
        self.scene.stop_auto_fire()
        cv2.destroyWindow(self.name)

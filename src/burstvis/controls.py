import cv2

from burstvis.constants import (
    AUTO_FIRE,
    BUTTON_ACTIVE_COLOR,
    BUTTON_BOTTOM_OFFSET,
    BUTTON_CLEAR_COLOR,
    BUTTON_GAP,
    BUTTON_HEIGHT,
    BUTTON_IDLE_COLOR,
    BUTTON_STOP_COLOR,
    BUTTON_TEXT_COLOR,
    BUTTON_WIDTH,
    CLEAR_SCREEN,
    KEY_BINDINGS,
    STOP_FIRE,
)


class Button:
    def __init__(self, control_id, label, color):
        self.control_id = control_id
        self.label = label
        self.color = color
        self.rect = (0, 0, 0, 0)

    def contains(self, x, y):
        bx, by, bw, bh = self.rect
        return bx <= x < bx + bw and by <= y < by + bh


class ControlPanel:
    """
    The row of on-screen buttons along the bottom edge.
    The auto-fire button mirrors the scene's auto-fire state.
    """

    def __init__(self, width, height):
        self.buttons = [
            Button(AUTO_FIRE, "Auto-fire", BUTTON_IDLE_COLOR),
            Button(STOP_FIRE, "Stop", BUTTON_STOP_COLOR),
            Button(CLEAR_SCREEN, "Clear", BUTTON_CLEAR_COLOR),
        ]
        self.layout(width, height)

    def layout(self, width, height):
        """Centre the buttons horizontally near the bottom of the viewport."""
        total = len(self.buttons) * BUTTON_WIDTH + (len(self.buttons) - 1) * BUTTON_GAP
        x = (width - total) // 2
        y = height - BUTTON_HEIGHT - BUTTON_BOTTOM_OFFSET
        for button in self.buttons:
            button.rect = (x, y, BUTTON_WIDTH, BUTTON_HEIGHT)
            x += BUTTON_WIDTH + BUTTON_GAP

    def button(self, control_id):
        for button in self.buttons:
            if button.control_id == control_id:
                return button
        raise KeyError(control_id)

    def set_auto_firing(self, firing):
        """Listener for the scene: swap label and colour of the auto-fire button."""
        button = self.button(AUTO_FIRE)
        if firing:
            button.label = "Pause"
            button.color = BUTTON_ACTIVE_COLOR
        else:
            button.label = "Auto-fire"
            button.color = BUTTON_IDLE_COLOR

    def hit_test(self, x, y):
        """Return the id of the button under (x, y), or None."""
        for button in self.buttons:
            if button.contains(x, y):
                return button.control_id
        return None

    @staticmethod
    def control_for_key(key):
        return KEY_BINDINGS.get(key)

    def draw(self, image):
        for button in self.buttons:
            x, y, w, h = button.rect
            cv2.rectangle(image, (x, y), (x + w, y + h), button.color, -1, cv2.LINE_AA)

            (text_w, text_h), _ = cv2.getTextSize(button.label, cv2.FONT_HERSHEY_SIMPLEX, 0.6, 1)
            origin = (x + (w - text_w) // 2, y + (h + text_h) // 2)
            cv2.putText(
                image,
                button.label,
                origin,
                cv2.FONT_HERSHEY_SIMPLEX,
                0.6,
                BUTTON_TEXT_COLOR,
                1,
                cv2.LINE_AA,
            )
        return image

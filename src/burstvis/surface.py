import cv2
import numpy as np


def hex_to_bgr(color):
    """Convert '#RRGGBB' (or an existing BGR tuple) to an OpenCV BGR tuple."""
    if isinstance(color, str):
        value = color.lstrip("#")
        r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
        return (b, g, r)
    return tuple(int(c) for c in color)


def linear_gradient(width, height, stops):
    """
    Build a vertical gradient image from (offset, colour) stops.
    Offsets run from 0.0 (top row) to 1.0 (bottom row).
    """
    offsets = np.array([offset for offset, _ in stops], dtype=np.float64)
    colors = np.array([hex_to_bgr(color) for _, color in stops], dtype=np.float64)

    rows = np.linspace(0.0, 1.0, height) if height > 1 else np.zeros(height)
    column = np.stack([np.interp(rows, offsets, colors[:, c]) for c in range(3)], axis=-1)

    image = np.repeat(column[:, np.newaxis, :], width, axis=1)
    return np.clip(np.rint(image), 0, 255).astype(np.uint8)


class Canvas:
    """
    A 2D drawing surface backed by a numpy BGR frame.
    Mirrors the small subset of a canvas context the scene needs:
    a global alpha, a fill style, rectangles, circles and gradients.
    """

    def __init__(self, width, height):
        self.global_alpha = 1.0
        self.fill_style = "#000000"
        self.resize(width, height)

    def resize(self, width, height):
        """Replace the frame with a blank one of the new size."""
        self.width = int(width)
        self.height = int(height)
        self.frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def _blend_into(self, x0, y0, layer):
        """Alpha-blend `layer` onto the frame at (x0, y0) using global_alpha."""
        h, w = layer.shape[:2]
        region = self.frame[y0 : y0 + h, x0 : x0 + w]
        self.frame[y0 : y0 + h, x0 : x0 + w] = cv2.addWeighted(
            layer, self.global_alpha, region, 1.0 - self.global_alpha, 0
        )

    def fill_rect(self, x, y, w, h):
        x0, y0 = max(int(x), 0), max(int(y), 0)
        x1, y1 = min(int(x + w), self.width), min(int(y + h), self.height)
        if x0 >= x1 or y0 >= y1 or self.global_alpha <= 0:
            return

        layer = np.empty((y1 - y0, x1 - x0, 3), dtype=np.uint8)
        layer[:] = hex_to_bgr(self.fill_style)
        self._blend_into(x0, y0, layer)

    def fill_gradient(self, stops):
        """Fill the whole surface with a vertical linear gradient."""
        if self.width == 0 or self.height == 0:
            return
        self._blend_into(0, 0, linear_gradient(self.width, self.height, stops))

    def fill_circle(self, x, y, radius):
        cx, cy = int(round(x)), int(round(y))
        r = max(int(round(radius)), 0)

        # Bounding box of the circle, clipped to the frame
        x0, y0 = max(cx - r - 1, 0), max(cy - r - 1, 0)
        x1, y1 = min(cx + r + 2, self.width), min(cy + r + 2, self.height)
        if x0 >= x1 or y0 >= y1 or self.global_alpha <= 0:
            return

        color = hex_to_bgr(self.fill_style)
        if self.global_alpha >= 1.0:
            cv2.circle(self.frame, (cx, cy), r, color, -1, cv2.LINE_AA)
            return

        layer = self.frame[y0:y1, x0:x1].copy()
        cv2.circle(layer, (cx - x0, cy - y0), r, color, -1, cv2.LINE_AA)
        self._blend_into(x0, y0, layer)

    def fade_to(self, image, alpha, snap=0):
        """
        Paint `image` over the current frame at opacity `alpha`.
        Pixels left within `snap` levels of `image` are set to it exactly;
        uint8 rounding would otherwise stall them just short of it.
        """
        self.frame = cv2.addWeighted(self.frame, 1.0 - alpha, image, alpha, 0)
        if snap > 0:
            close = (cv2.absdiff(self.frame, image) <= snap).all(axis=2)
            self.frame[close] = image[close]

    def snapshot(self):
        return self.frame.copy()

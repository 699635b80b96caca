import numpy as np
import pytest

from burstvis.surface import Canvas, hex_to_bgr, linear_gradient


def test_hex_to_bgr():
    assert hex_to_bgr("#FF6B6B") == (0x6B, 0x6B, 0xFF)
    assert hex_to_bgr("#0f0c29") == (0x29, 0x0C, 0x0F)
    assert hex_to_bgr((1, 2, 3)) == (1, 2, 3)


def test_linear_gradient_hits_stops():
    image = linear_gradient(4, 101, [(0.0, "#000000"), (0.5, "#FFFFFF"), (1.0, "#000000")])

    assert image.shape == (101, 4, 3)
    assert image.dtype == np.uint8
    assert (image[0] == 0).all()
    assert (image[50] == 255).all()
    assert (image[100] == 0).all()
    assert (image[:, 0] == image[:, 3]).all()


def test_canvas_starts_black():
    canvas = Canvas(30, 20)
    assert canvas.frame.shape == (20, 30, 3)
    assert not canvas.frame.any()


def test_fill_rect_opaque_and_clipped():
    canvas = Canvas(10, 10)
    canvas.fill_style = "#FFFFFF"
    canvas.fill_rect(5, 5, 100, 100)

    assert (canvas.frame[5:, 5:] == 255).all()
    assert not canvas.frame[:5].any()


def test_fill_rect_respects_global_alpha():
    canvas = Canvas(4, 4)
    canvas.fill_style = "#C8C8C8"
    canvas.global_alpha = 0.5
    canvas.fill_rect(0, 0, 4, 4)

    assert canvas.frame[0, 0, 0] == pytest.approx(100, abs=1)


def test_fill_circle_opaque():
    canvas = Canvas(40, 40)
    canvas.fill_style = "#FF0000"
    canvas.fill_circle(20, 20, 5)

    assert tuple(canvas.frame[20, 20]) == (0, 0, 255)
    assert not canvas.frame[0, 0].any()


def test_fill_circle_translucent_blends():
    canvas = Canvas(40, 40)
    canvas.fill_style = "#FFFFFF"
    canvas.global_alpha = 0.5
    canvas.fill_circle(20, 20, 6)

    assert canvas.frame[20, 20, 0] == pytest.approx(128, abs=2)


def test_fill_circle_off_screen_is_ignored():
    canvas = Canvas(20, 20)
    canvas.fill_style = "#FFFFFF"
    canvas.global_alpha = 0.5
    canvas.fill_circle(-50, 500, 4)
    assert not canvas.frame.any()


def test_fade_to_moves_towards_image():
    canvas = Canvas(8, 8)
    target = np.full((8, 8, 3), 200, dtype=np.uint8)

    canvas.fade_to(target, 0.1)

    assert canvas.frame[0, 0, 0] == 20


def test_snapshot_is_a_copy():
    canvas = Canvas(8, 8)
    snap = canvas.snapshot()
    canvas.fill_style = "#FFFFFF"
    canvas.fill_rect(0, 0, 8, 8)
    assert not snap.any()


def test_resize_replaces_frame():
    canvas = Canvas(8, 8)
    canvas.fill_style = "#FFFFFF"
    canvas.fill_rect(0, 0, 8, 8)

    canvas.resize(16, 4)

    assert (canvas.width, canvas.height) == (16, 4)
    assert canvas.frame.shape == (4, 16, 3)
    assert not canvas.frame.any()


def test_fade_to_without_snap_stalls_short_of_image():
    canvas = Canvas(4, 4)
    canvas.frame[:] = 60
    target = np.full((4, 4, 3), 20, dtype=np.uint8)

    for _ in range(500):
        canvas.fade_to(target, 0.1)

    assert (canvas.frame != target).any()


def test_fade_to_with_snap_settles_on_image():
    canvas = Canvas(4, 4)
    canvas.frame[:] = 60
    target = np.full((4, 4, 3), 20, dtype=np.uint8)

    for _ in range(500):
        canvas.fade_to(target, 0.1, snap=5)

    assert (canvas.frame == target).all()


def test_fade_to_snap_leaves_bright_pixels_alone():
    canvas = Canvas(4, 4)
    canvas.frame[0, 0] = 255
    target = np.zeros((4, 4, 3), dtype=np.uint8)

    canvas.fade_to(target, 0.1, snap=5)

    assert canvas.frame[0, 0, 0] > 200

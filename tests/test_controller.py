import math

import pytest

from meshview.camera import Camera
from meshview.controller import Controller
from meshview.vector3 import Vector3
from meshview.window import Key


class FakeWindow:
    def __init__(self):
        self.keys = set()
        self.cursor = (0.0, 0.0)

    def is_key_pressed(self, key):
        return key in self.keys

    def cursor_position(self):
        return self.cursor


def make_camera():
    camera = Camera(45.0, 800.0 / 600.0, 0.1, 200.0)
    camera.position = Vector3(0.0, 0.0, 12.0)
    return camera


def test_initial_angles_follow_camera_forward():
    controller = Controller(make_camera(), FakeWindow())
    assert controller.yaw == pytest.approx(-90.0)
    assert controller.pitch == pytest.approx(0.0)


def test_forward_key_moves_along_view_direction():
    camera = make_camera()
    window = FakeWindow()
    controller = Controller(camera, window, speed=5.0)
    start, forward = camera.position, camera.forward()
    window.keys.add(Key.W)
    controller.update(0.5)
    moved = camera.position - start
    assert moved.length() == pytest.approx(5.0 * 0.5)
    assert moved.normalized() == forward
    assert camera.forward() == forward


def test_sprint_multiplies_speed():
    camera = make_camera()
    window = FakeWindow()
    controller = Controller(camera, window, speed=2.0, sprint_multiplier=3.0)
    start = camera.position
    window.keys.update({Key.D, Key.LSHIFT})
    controller.update(1.0)
    moved = camera.position - start
    assert moved.length() == pytest.approx(2.0 * 3.0)
    assert moved.dot(camera.right()) == pytest.approx(moved.length())


def test_opposite_keys_cancel():
    camera = make_camera()
    window = FakeWindow()
    controller = Controller(camera, window)
    window.keys.update({Key.Q, Key.E})
    controller.update(1.0)
    assert camera.position == Vector3(0.0, 0.0, 12.0)


def test_still_mouse_keeps_view_direction():
    camera = make_camera()
    window = FakeWindow()
    window.cursor = (100.0, 50.0)
    controller = Controller(camera, window)
    controller.update(0.016)
    controller.update(0.016)
    forward = camera.forward()
    assert list(forward) == pytest.approx([0.0, 0.0, -1.0], abs=1e-6)
    assert (camera.target - camera.position).length() == pytest.approx(1.0)


def test_pitch_is_clamped():
    camera = make_camera()
    window = FakeWindow()
    controller = Controller(camera, window)
    controller.update(0.0)
    window.cursor = (0.0, -10000.0)
    controller.update(0.0)
    assert controller.pitch == 89.0
    assert camera.forward().y == pytest.approx(math.sin(math.radians(89.0)))
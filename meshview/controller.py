"""First-person fly controls for a camera."""

from __future__ import annotations

import math
from typing import Optional

from meshview.camera import Camera
from meshview.vector3 import Vector3
from meshview.window import Key, Window

_PITCH_LIMIT = 89.0


class Controller:
    """Moves the camera with WASD/QE and turns it with the mouse."""

    def __init__(
        self,
        camera: Optional[Camera],
        window: Optional[Window],
        speed: float = 5.0,
        sprint_multiplier: float = 5.0,
        sensitivity: float = 0.2,
    ) -> None:
        self.camera = camera
        self.window = window
        self.speed = speed
        self.sprint_multiplier = sprint_multiplier
        self.sensitivity = sensitivity

        self._first_mouse = True
        self._last_x = 0.0
        self._last_y = 0.0
        self.yaw = -90.0
        self.pitch = 0.0

        if camera is not None:
            forward = camera.forward()
            self.pitch = math.degrees(math.asin(max(-1.0, min(1.0, forward.y))))
            self.yaw = math.degrees(math.atan2(forward.z, forward.x))

    def update(self, delta: float) -> None:
        """Apply this frame's keyboard and mouse input."""
        if self.camera is None or self.window is None:
            return
        self._process_keyboard(delta)
        self._process_mouse()

    def _axis(self, negative: Key, positive: Key) -> float:
        pressed = self.window.is_key_pressed
        return float(pressed(positive)) - float(pressed(negative))

    def _process_keyboard(self, delta: float) -> None:
        speed = self.speed
        if self.window.is_key_pressed(Key.LSHIFT):
            speed *= self.sprint_multiplier

        direction = Vector3(
            self._axis(Key.A, Key.D),
            self._axis(Key.Q, Key.E),
            self._axis(Key.W, Key.S),
        )
        if direction == Vector3():
            return

        direction = direction.normalized()
        camera = self.camera
        move = (
            camera.forward() * -direction.z
            + camera.right() * direction.x
            + camera.up() * direction.y
        ) * (speed * delta)

        camera.position = camera.position + move
        camera.target = camera.target + move

    def _process_mouse(self) -> None:
        x, y = self.window.cursor_position()

        if self._first_mouse:
            self._last_x, self._last_y = x, y
            self._first_mouse = False
            return

        x_offset = (x - self._last_x) * self.sensitivity
        y_offset = (self._last_y - y) * self.sensitivity
        self._last_x, self._last_y = x, y

        self.yaw += x_offset
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch + y_offset))

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = Vector3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ).normalized()

        self.camera.target = self.camera.position + front
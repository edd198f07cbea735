"""Perspective camera looking from a position towards a target."""

from __future__ import annotations

import math

import numpy as np

from meshview.vector3 import Vector3

_WORLD_UP = Vector3(0.0, 1.0, 0.0)
_STEEP = 0.99


def look_at(eye: Vector3, target: Vector3, up: Vector3) -> np.ndarray:
    """Right-handed view matrix, row-major, acting on column vectors."""
    f = (target - eye).normalized()
    s = f.cross(up).normalized()
    u = s.cross(f)
    return np.array(
        [
            [s.x, s.y, s.z, -s.dot(eye)],
            [u.x, u.y, u.z, -u.dot(eye)],
            [-f.x, -f.y, -f.z, f.dot(eye)],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def perspective(fov_radians: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection mapping depth ``[-near, -far]`` to ``[-1, 1]``."""
    tan_half = math.tan(fov_radians / 2.0)
    matrix = np.zeros((4, 4), dtype=np.float64)
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


class Camera:
    """Camera with a vertical field of view in degrees."""

    def __init__(self, fov: float, aspect: float, near_plane: float, far_plane: float) -> None:
        self.position = Vector3()
        self.target = Vector3()
        self.fov = fov
        self.aspect_ratio = aspect
        self.near_clip = near_plane
        self.far_clip = far_plane

        forward = (self.target - self.position).normalized()
        self._up = _WORLD_UP
        if abs(forward.y) > _STEEP:
            self._up = Vector3(0.0, 0.0, -1.0 if forward.y > 0 else 1.0)

    def set_target(self, target: Vector3) -> None:
        """Aim at ``target`` and recompute the up direction."""
        self.target = target

        forward = (self.target - self.position).normalized()
        world_up = Vector3(0.0, 0.0, 1.0) if abs(forward.y) > _STEEP else _WORLD_UP

        right = forward.cross(world_up).normalized()
        self._up = right.cross(forward).normalized()

    def view_matrix(self) -> np.ndarray:
        return look_at(self.position, self.target, self._up)

    def projection_matrix(self) -> np.ndarray:
        return perspective(math.radians(self.fov), self.aspect_ratio, self.near_clip, self.far_clip)

    def forward(self) -> Vector3:
        return (self.target - self.position).normalized()

    def right(self) -> Vector3:
        return self.forward().cross(self._up).normalized()

    def up(self) -> Vector3:
        return self._up
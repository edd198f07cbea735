"""Rotation quaternion with the operations a scene graph needs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

import numpy as np

from meshview.vector3 import FLT_EPSILON, Vector3

Operand = Union["Quaternion", float]


@dataclass(frozen=True, eq=False)
class Quaternion:
    """An immutable quaternion ``(x, y, z, w)``; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    __hash__ = None  # equality is tolerant, so instances are not hashable

    def _components(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return all(
            abs(a - b) < FLT_EPSILON
            for a, b in zip(self._components(), other._components())
        )

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Operand) -> Quaternion:
        if isinstance(other, Quaternion):
            x, y, z, w = self.x, self.y, self.z, self.w
            ox, oy, oz, ow = other.x, other.y, other.z, other.w
            return Quaternion(
                x * ow + y * oz - z * oy + w * ox,
                -x * oz + y * ow + z * ox + w * oy,
                x * oy - y * ox + z * ow + w * oz,
                -x * ox - y * oy - z * oz + w * ow,
            )
        if isinstance(other, Real):
            n = float(other)
            return Quaternion(self.x * n, self.y * n, self.z * n, self.w * n)
        return NotImplemented

    def __truediv__(self, other: Operand) -> Quaternion:
        if isinstance(other, Quaternion):
            x, y, z, w = self.x, self.y, self.z, self.w
            ox, oy, oz, ow = other.x, other.y, other.z, other.w
            norm = ow * ow + ox * ox + oy * oy + oz * oz
            return Quaternion(
                (x * ow - w * ox - z * oy + y * oz) / norm,
                (y * ow + z * ox - w * oy - x * oz) / norm,
                (z * ow - y * ox + x * oy - w * oz) / norm,
                (w * ow + x * ox + y * oy + z * oz) / norm,
            )
        if isinstance(other, Real):
            n = float(other)
            return Quaternion(self.x / n, self.y / n, self.z / n, self.w / n)
        return NotImplemented

    def __str__(self) -> str:
        return f"Quaternion({self.x}, {self.y}, {self.z}, {self.w})"

    def max(self) -> float:
        return max(self._components())

    def min(self) -> float:
        return min(self._components())

    def normalized(self) -> Quaternion:
        """Unit-length copy; a near-zero quaternion becomes the identity."""
        current = self.length()
        if current <= FLT_EPSILON:
            return Quaternion()
        return self * (1.0 / current)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def inversed(self) -> Quaternion:
        """Multiplicative inverse; raises ZeroDivisionError for the zero quaternion."""
        d = self.dot(self)
        return Quaternion(-self.x / d, -self.y / d, -self.z / d, self.w / d)

    def conjugated(self) -> Quaternion:
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def distance(self, other: Quaternion) -> float:
        return (self - other).length()

    def lerp(self, other: Quaternion, factor: float) -> Quaternion:
        return self * (1.0 - factor) + other * factor

    def apply(self, vec: Vector3) -> Vector3:
        """Rotate ``vec`` by this (unit) quaternion."""
        u = Vector3(self.x, self.y, self.z)
        v = u.cross(vec) * 2.0
        return vec + v * self.w + u.cross(v)

    def to_matrix(self) -> np.ndarray:
        """4x4 rotation matrix, row-major, acting on column vectors (``m @ v``)."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return np.array(
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0],
                [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0],
                [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    @classmethod
    def with_axis_angle(cls, axis: Vector3, radians: float) -> Quaternion:
        """Rotation of ``radians`` about ``axis`` (expected to be unit length)."""
        half = radians * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def with_euler_angle(cls, euler: Vector3) -> Quaternion:
        """Rotation from Euler angles in radians (x roll, y pitch, z yaw)."""
        hx, hy, hz = euler.x * 0.5, euler.y * 0.5, euler.z * 0.5

        cy, sy = math.cos(hz), math.sin(hz)
        cp, sp = math.cos(hy), math.sin(hy)
        cr, sr = math.cos(hx), math.sin(hx)

        srcp = sr * cp
        crsp = cr * sp
        srsp = sr * sp
        crcp = cr * cp

        return cls(
            srcp * cy - crsp * sy,
            crsp * cy + srcp * sy,
            crcp * sy - srsp * cy,
            crcp * cy + srsp * sy,
        )
"""Three-component float vector used for positions, directions and scales."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

import numpy as np

FLT_EPSILON = 2.0**-23

Operand = Union["Vector3", float]


@dataclass(frozen=True, eq=False)
class Vector3:
    """An immutable 3D vector with tolerant equality."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __hash__ = None  # equality is tolerant, so instances are not hashable

    @classmethod
    def splat(cls, n: float) -> Vector3:
        """Return a vector with every component set to ``n``."""
        return cls(n, n, n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return all(abs(a - b) < FLT_EPSILON for a, b in zip(self, other))

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def _combine(self, other: object, op) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, Real):
            n = float(other)
            return Vector3(op(self.x, n), op(self.y, n), op(self.z, n))
        return NotImplemented

    def __add__(self, other: Operand) -> Vector3:
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other: Operand) -> Vector3:
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other: Operand) -> Vector3:
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Operand) -> Vector3:
        return self._combine(other, lambda a, b: a / b)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def max(self) -> float:
        """Largest component."""
        return max(self.x, self.y, self.z)

    def min(self) -> float:
        """Smallest component."""
        return min(self.x, self.y, self.z)

    def normalized(self, length: float = 1.0) -> Vector3:
        """Return this vector scaled to ``length``; a near-zero vector becomes zero."""
        current = self.length()
        if current <= FLT_EPSILON:
            return Vector3()
        return self * (length / current)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: Vector3) -> float:
        return (self - other).length()

    def lerp(self, other: Vector3, factor: float) -> Vector3:
        """Linear interpolation between this vector and ``other``."""
        return self * (1.0 - factor) + other * factor

    def as_array(self) -> np.ndarray:
        """The components as a float32 numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float32)
"""Two-dimensional real vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable 2D vector; positive x is right, positive y is up."""

    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def dot(self, other: Vector) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Return the z-component of the cross product with another vector."""
        return self.x * other.y - self.y * other.x

    def rotate(self, angle: float) -> Vector:
        """Return this vector rotated counterclockwise by ``angle`` radians about the origin."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)


VEC_ZERO = Vector(0.0, 0.0)
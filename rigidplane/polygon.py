"""Polygons with position, velocity, rotation and color."""

from __future__ import annotations

from collections.abc import Iterable

from rigidplane.color import Color
from rigidplane.vector import VEC_ZERO, Vector


def _edges(points: list[Vector]):
    return zip(points, points[1:] + points[:1])


class Polygon:
    """A polygon given by its vertices, listed counterclockwise."""

    def __init__(
        self,
        points: Iterable[Vector],
        velocity: Vector = VEC_ZERO,
        rotation_speed: float = 0.0,
        color: Color | None = None,
    ) -> None:
        self.points: list[Vector] = list(points)
        self.velocity = velocity
        self.rotation_speed = rotation_speed
        self.color = color if color is not None else Color(0.0, 0.0, 0.0)
        self._angle = 0.0

    def area(self) -> float:
        """Return the area by the shoelace formula."""
        total = sum((b.x + a.x) * (b.y - a.y) for a, b in _edges(self.points))
        return 0.5 * abs(total)

    def centroid(self) -> Vector:
        """Return the center of mass of the polygon."""
        cx = 0.0
        cy = 0.0
        for a, b in _edges(self.points):
            cross = a.x * b.y - b.x * a.y
            cx += (a.x + b.x) * cross
            cy += (a.y + b.y) * cross
        constant = 1 / (6 * self.area())
        return Vector(constant * cx, constant * cy)

    def translate(self, translation: Vector) -> None:
        """Move every vertex by ``translation``."""
        self.points[:] = [p + translation for p in self.points]

    def rotate(self, angle: float, point: Vector) -> None:
        """Rotate every vertex counterclockwise by ``angle`` about ``point``."""
        self.points[:] = [(p - point).rotate(angle) + point for p in self.points]

    def move(self, dt: float) -> None:
        """Advance the polygon by its velocity and rotation speed over ``dt``."""
        self.translate(dt * self.velocity)
        angle_change = self.rotation_speed * dt
        if angle_change:
            self.rotate(angle_change, self.centroid())

    @property
    def center(self) -> Vector:
        """The centroid; setting it translates the polygon there."""
        return self.centroid()

    @center.setter
    def center(self, centroid: Vector) -> None:
        self.translate(centroid - self.centroid())

    @property
    def rotation(self) -> float:
        """The absolute orientation in radians; setting it rotates about the centroid."""
        return self._angle

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self.rotate(angle - self._angle, self.centroid())
        self._angle = angle
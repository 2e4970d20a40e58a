"""Rigid bodies: polygons with mass that respond to forces and impulses."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rigidplane.color import Color
from rigidplane.polygon import Polygon
from rigidplane.vector import VEC_ZERO, Vector


class Body:
    """A rigid body constrained to the plane, modelled as a uniform-density polygon.

    A mass of ``math.inf`` makes the body immovable by forces and impulses.
    """

    def __init__(
        self,
        shape: Iterable[Vector],
        mass: float,
        color: Color,
        info: Any = None,
    ) -> None:
        if not mass > 0:
            raise ValueError(f"body mass must be positive, got {mass!r}")
        self.polygon = Polygon(shape, VEC_ZERO, 0.0, Color(color.r, color.g, color.b))
        self.mass = mass
        self.info = info
        self.force = VEC_ZERO
        self.impulse = VEC_ZERO
        self._removed = False

    def shape(self) -> list[Vector]:
        """Return a copy of the body's current vertices."""
        return list(self.polygon.points)

    @property
    def centroid(self) -> Vector:
        """The center of mass; setting it translates the body there."""
        return self.polygon.center

    @centroid.setter
    def centroid(self, value: Vector) -> None:
        self.polygon.center = value

    @property
    def velocity(self) -> Vector:
        """The body's velocity."""
        return self.polygon.velocity

    @velocity.setter
    def velocity(self, value: Vector) -> None:
        self.polygon.velocity = value

    @property
    def rotation(self) -> float:
        """The absolute orientation in radians, rotating about the centroid when set."""
        return self.polygon.rotation

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self.polygon.rotation = angle

    @property
    def color(self) -> Color:
        """The display color."""
        return self.polygon.color

    @color.setter
    def color(self, value: Color) -> None:
        self.polygon.color = value

    def tick(self, dt: float) -> None:
        """Advance the body by ``dt`` seconds, applying accumulated forces and impulses.

        The body moves at the average of its velocities before and after the
        tick; accumulated forces and impulses are cleared afterwards.
        """
        old_velocity = self.velocity
        impulse_vel = (1.0 / self.mass) * self.impulse
        force_vel = (dt / self.mass) * self.force
        new_velocity = (force_vel + impulse_vel) + old_velocity

        self.velocity = 0.5 * (old_velocity + new_velocity)
        self.polygon.move(dt)
        self.velocity = new_velocity
        self.reset()

    def add_force(self, force: Vector) -> None:
        """Add a force to be applied over the current tick."""
        self.force = self.force + force

    def add_impulse(self, impulse: Vector) -> None:
        """Add an impulse to be applied at the next tick."""
        self.impulse = self.impulse + impulse

    def reset(self) -> None:
        """Clear the accumulated forces and impulses."""
        self.force = VEC_ZERO
        self.impulse = VEC_ZERO

    def remove(self) -> None:
        """Mark the body for removal from its scene."""
        self._removed = True

    @property
    def removed(self) -> bool:
        """Whether :meth:`remove` has been called."""
        return self._removed
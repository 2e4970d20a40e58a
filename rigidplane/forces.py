"""Force creators and collision handlers that act on bodies in a scene."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from rigidplane.body import Body
from rigidplane.collision import find_collision
from rigidplane.scene import Scene
from rigidplane.vector import Vector

MIN_DIST = 5.0

CollisionHandler = Callable[[Body, Body, Vector, Any, float], None]


def create_newtonian_gravity(scene: Scene, g: float, body1: Body, body2: Body) -> None:
    """Apply Newtonian gravity with constant ``g`` between two bodies every tick.

    No force acts while the centroids are within ``MIN_DIST`` of each other.
    """

    def newtonian_gravity() -> None:
        displacement = body1.centroid - body2.centroid
        dist_sq = displacement.dot(displacement)
        distance = math.sqrt(dist_sq)
        if distance > MIN_DIST:
            unit = (1 / distance) * displacement
            grav_force = (g * body1.mass * body2.mass / dist_sq) * unit
            body2.add_force(grav_force)
            body1.add_force(-1 * grav_force)

    scene.add_force_creator(newtonian_gravity, (body1, body2))


def create_spring(scene: Scene, k: float, body1: Body, body2: Body) -> None:
    """Join two bodies with a Hooke's-law spring of constant ``k``."""

    def spring_force() -> None:
        distance = body1.centroid - body2.centroid
        force = Vector(-k * distance.x, -k * distance.y)
        body1.add_force(force)
        body2.add_force(-force)

    scene.add_force_creator(spring_force, (body1, body2))


def create_drag(scene: Scene, gamma: float, body: Body) -> None:
    """Apply a drag force proportional to the body's velocity, opposing it."""

    def drag_force() -> None:
        body.add_force((-1 * gamma) * body.velocity)

    scene.add_force_creator(drag_force, (body,))


def create_collision(
    scene: Scene,
    body1: Body,
    body2: Body,
    handler: CollisionHandler,
    aux: Any,
    force_const: float,
) -> None:
    """Call ``handler`` once each time the two bodies begin to collide."""
    collided = False

    def collision_force_creator() -> None:
        nonlocal collided
        info = find_collision(body1, body2)
        if info.collided and not collided:
            handler(body1, body2, info.axis, aux, force_const)
            collided = True
        elif not info.collided and collided:
            collided = False

    scene.add_force_creator(collision_force_creator, (body1, body2))


def _destructive_collision(
    body1: Body, body2: Body, axis: Vector, aux: Any, force_const: float
) -> None:
    body1.remove()
    body2.remove()


def create_destructive_collision(scene: Scene, body1: Body, body2: Body) -> None:
    """Remove both bodies when they collide."""
    create_collision(scene, body1, body2, _destructive_collision, None, 0.0)


def physics_collision_handler(
    body1: Body, body2: Body, axis: Vector, aux: Any, force_const: float
) -> None:
    """Apply equal and opposite impulses along ``axis`` with elasticity ``force_const``."""
    comp_vel_1 = body1.velocity.dot(axis)
    comp_vel_2 = body2.velocity.dot(axis)
    mass1 = body1.mass
    mass2 = body2.mass

    if mass1 == math.inf:
        reduced_mass = mass2
    elif mass2 == math.inf:
        reduced_mass = mass1
    else:
        reduced_mass = mass1 * mass2 / (mass1 + mass2)

    impulse = reduced_mass * (1 + force_const) * (comp_vel_2 - comp_vel_1)
    impulse_vector = impulse * axis
    body1.add_impulse(impulse_vector)
    body2.add_impulse(-impulse_vector)


def create_physics_collision(
    scene: Scene, body1: Body, body2: Body, elasticity: float
) -> None:
    """Resolve collisions between two bodies with impulses of the given elasticity."""
    create_collision(scene, body1, body2, physics_collision_handler, None, elasticity)
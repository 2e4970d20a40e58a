"""Separating-axis collision detection between convex bodies."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from rigidplane.body import Body
from rigidplane.vector import VEC_ZERO, Vector


@dataclass(frozen=True, slots=True)
class CollisionInfo:
    """Whether two shapes collide and, if so, the unit axis of collision."""

    collided: bool
    axis: Vector


def _projection_range(shape: list[Vector], unit_axis: Vector) -> tuple[float, float]:
    projections = [vertex.dot(unit_axis) for vertex in shape]
    return max(projections), min(projections)


def _compare(shape1: list[Vector], shape2: list[Vector]) -> tuple[CollisionInfo, float]:
    """Test the edge normals of ``shape1`` as separating axes."""
    min_overlap = sys.float_info.max
    min_axis = VEC_ZERO
    collided = True
    for current, following in zip(shape1, shape1[1:] + shape1[:1]):
        edge = current - following
        axis = Vector(edge.y, -edge.x)
        unit_axis = (1 / axis.length()) * axis

        max1, min1 = _projection_range(shape1, unit_axis)
        max2, min2 = _projection_range(shape2, unit_axis)
        overlap = min(max2, max1) - max(min1, min2)
        if overlap <= 0:
            collided = False
            break
        if overlap < min_overlap:
            min_overlap = overlap
            min_axis = unit_axis
    return CollisionInfo(collided, min_axis), min_overlap


def find_collision(body1: Body, body2: Body) -> CollisionInfo:
    """Return whether two convex bodies overlap and the axis of least overlap."""
    shape1 = body1.shape()
    shape2 = body2.shape()

    collision1, overlap1 = _compare(shape1, shape2)
    collision2, overlap2 = _compare(shape2, shape1)

    if not collision1.collided:
        return collision1
    if not collision2.collided:
        return collision2
    if overlap1 < overlap2:
        return collision1
    return collision2
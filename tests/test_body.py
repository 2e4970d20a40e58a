import math

import pytest

from rigidplane.body import Body
from rigidplane.color import Color
from rigidplane.vector import VEC_ZERO, Vector


def vec_isclose(v1, v2, eps=1e-7):
    return abs(v1.x - v2.x) < eps and abs(v1.y - v2.y) < eps


def triangle():
    return [Vector(1, 0), Vector(0, 1), Vector(-1, 0)]


def test_body_init():
    v = [Vector(1, 1), Vector(2, 1), Vector(2, 2), Vector(1, 2)]
    color = Color(0, 0.5, 1)
    body = Body(v, 3, color)
    shape = body.shape()
    assert len(shape) == len(v)
    for got, expected in zip(shape, v):
        assert vec_isclose(got, expected)
    assert vec_isclose(body.centroid, Vector(1.5, 1.5))
    assert body.velocity == VEC_ZERO
    assert body.color.r == color.r
    assert body.color.g == color.g
    assert body.color.b == color.b
    assert body.mass == 3


def test_body_setters():
    body = Body(triangle(), 1, Color(0, 0, 0))
    body.velocity = Vector(5, -5)
    assert body.velocity == Vector(5, -5)
    assert vec_isclose(body.centroid, Vector(0, 1.0 / 3.0))

    body.centroid = Vector(1, 2)
    assert vec_isclose(body.centroid, Vector(1, 2))
    shape = body.shape()
    assert len(shape) == 3
    assert vec_isclose(shape[0], Vector(2, 5.0 / 3.0))
    assert vec_isclose(shape[1], Vector(1, 8.0 / 3.0))
    assert vec_isclose(shape[2], Vector(0, 5.0 / 3.0))

    body.rotation = math.pi / 2
    assert vec_isclose(body.centroid, Vector(1, 2))
    shape = body.shape()
    assert len(shape) == 3
    assert vec_isclose(shape[0], Vector(4.0 / 3.0, 3))
    assert vec_isclose(shape[1], Vector(1.0 / 3.0, 2))
    assert vec_isclose(shape[2], Vector(4.0 / 3.0, 1))

    body.centroid = Vector(3, 4)
    assert vec_isclose(body.centroid, Vector(3, 4))
    shape = body.shape()
    assert len(shape) == 3
    assert vec_isclose(shape[0], Vector(10.0 / 3.0, 5))
    assert vec_isclose(shape[1], Vector(7.0 / 3.0, 4))
    assert vec_isclose(shape[2], Vector(10.0 / 3.0, 3))


def test_body_rotation_property():
    body = Body(triangle(), 1, Color(0, 0, 0))
    body.rotation = math.pi / 2
    assert body.rotation == math.pi / 2


def test_body_tick():
    a = Vector(1, 2)
    dt = 1e-6
    steps = 1000000
    body = Body(
        [Vector(-1, -1), Vector(1, -1), Vector(1, 1), Vector(-1, 1)],
        1,
        Color(0, 0, 0),
    )
    for i in range(steps):
        t = i * dt
        if i % 1000 == 0:
            centroid = body.centroid
            expected = (t * t / 2) * a
            assert (centroid.x, centroid.y) == pytest.approx(
                (expected.x, expected.y), abs=1e-7
            )
        body.velocity = (t + dt / 2) * a
        body.tick(dt)
    t = steps * dt
    offset = (t * t / 2) * a
    corners = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    shape = body.shape()
    assert len(shape) == 4
    for point, (cx, cy) in zip(shape, corners):
        assert (point.x, point.y) == pytest.approx(
            (cx + offset.x, cy + offset.y), abs=1e-7
        )


def test_infinite_mass():
    body = Body(
        [VEC_ZERO, Vector(1, 0), Vector(1, 1), Vector(0, 1)],
        math.inf,
        Color(0, 0, 0),
    )
    body.velocity = Vector(2, 3)
    assert body.mass == math.inf
    body.add_force(Vector(1, 1))
    body.tick(1.0)
    assert body.velocity == Vector(2, 3)
    assert vec_isclose(body.centroid, Vector(2.5, 3.5))


def test_forces():
    mass = 10
    dt = 0.1
    body = Body(triangle(), mass, Color(0, 0, 0))
    body.centroid = VEC_ZERO
    body.velocity = Vector(1, -2)
    body.add_force(Vector(mass * 3, mass * 4))
    body.add_impulse(Vector(mass * 10, mass * 5))
    body.add_force(Vector(mass * 3, mass * 4))
    body.tick(dt)
    new_vx = 1 + 10 + 6 * dt
    new_vy = -2 + 5 + 8 * dt
    velocity = body.velocity
    assert (velocity.x, velocity.y) == pytest.approx((new_vx, new_vy), abs=1e-7)
    cx = dt / 2 * (1 + new_vx)
    cy = dt / 2 * (-2 + new_vy)
    centroid = body.centroid
    assert (centroid.x, centroid.y) == pytest.approx((cx, cy), abs=1e-7)
    body.tick(dt)
    centroid = body.centroid
    assert (centroid.x, centroid.y) == pytest.approx(
        (cx + dt * new_vx, cy + dt * new_vy), abs=1e-7
    )


def test_reset_clears_forces_and_impulses():
    body = Body(triangle(), 2, Color(0, 0, 0))
    body.velocity = Vector(1, -2)
    body.add_force(Vector(100, 100))
    body.add_impulse(Vector(50, 50))
    body.reset()
    body.tick(0.5)
    assert body.velocity == Vector(1, -2)


def test_body_remove():
    body = Body(triangle(), 1, Color(0, 0, 0))
    assert not body.removed
    body.remove()
    assert body.removed
    body.remove()
    assert body.removed


def test_body_info():
    body = Body(triangle(), 1, Color(0, 0, 0), 123)
    assert body.info == 123


def test_body_info_list():
    body = Body(triangle(), 1, Color(0, 0, 0), [10, 20, 30])
    assert body.info[0] == 10
    assert body.info[1] == 20
    assert body.info[2] == 30


def test_shape_is_a_copy():
    body = Body(triangle(), 1, Color(0, 0, 0))
    shape = body.shape()
    shape.clear()
    assert len(body.shape()) == 3


@pytest.mark.parametrize("mass", [0, -1])
def test_non_positive_mass_rejected(mass):
    with pytest.raises(ValueError):
        Body(triangle(), mass, Color(0, 0, 0))
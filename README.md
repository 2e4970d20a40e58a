# rigidplane

A small two-dimensional rigid-body physics engine. Bodies are convex
polygons with a mass, a velocity and a colour. A scene ticks them forward
in time and runs force creators such as gravity, springs, drag and collision
handlers. Image, text and button assets, backed by pygame, can be attached
to bodies and drawn through a window object you provide.

## Installing

```
pip install rigidplane
```

To run the test suite as well:

```
pip install "rigidplane[test]"
pytest
```

## The pieces

- `rigidplane.vector.Vector`: an immutable 2D vector with `+`, `-`, unary
  `-`, scalar `*`, and the methods `dot`, `cross`, `rotate` and `length`.
  `rigidplane.vector.VEC_ZERO` is the zero vector.
- `rigidplane.color.Color`: an RGB colour with components between 0 and 1;
  `random_color(rng)` gives a light random colour, using `rng` (a
  `random.Random`) or the `random` module when it is `None`.
- `rigidplane.polygon.Polygon`: a list of vertices with `area()`,
  `centroid()`, `translate()`, `rotate()` about a point and `move(dt)`.
  Setting `center` moves the polygon there; setting `rotation` turns it to
  an absolute angle about its centroid.
- `rigidplane.body.Body`: a polygon with mass, velocity, accumulated force
  and impulse, and optional attached `info`. The mass must be positive
  (`ValueError` otherwise); a body with mass `math.inf` never changes
  velocity. `remove()` marks a body; the scene drops it on its next tick.
- `rigidplane.collision.find_collision(body1, body2)`: separating-axis test
  between two convex bodies, returning a `CollisionInfo` with whether they
  collide and the unit axis of least overlap.
- `rigidplane.scene.Scene`: holds bodies and force creators. `len(scene)`
  counts the bodies and iterating yields them; `get_body(index)` raises
  `IndexError` for a bad index. Each `tick(dt)` runs every force creator,
  removes marked bodies together with every force creator registered on
  them, then ticks the remaining bodies.
- `rigidplane.forces`: `create_newtonian_gravity`, `create_spring`,
  `create_drag`, `create_collision`, `create_destructive_collision` and
  `create_physics_collision`, which add force creators to a scene, and
  `physics_collision_handler`, the impulse handler the last one uses.
- `rigidplane.assets`: `ImageAsset`, `TextAsset` and `ButtonAsset`, backed
  by an `AssetCache` that loads each image or font file once and passes
  clicks to registered buttons.

## A mass on a spring

```python
import math

from rigidplane.body import Body
from rigidplane.color import Color
from rigidplane.forces import create_spring
from rigidplane.scene import Scene
from rigidplane.vector import Vector

def square():
    return [Vector(-1, -1), Vector(1, -1), Vector(1, 1), Vector(-1, 1)]

scene = Scene()
mass = Body(square(), 10, Color(0, 0, 0), None)
anchor = Body(square(), math.inf, Color(0, 0, 0), None)
scene.add_body(mass)
scene.add_body(anchor)
create_spring(scene, 2.0, mass, anchor)

for _ in range(1000):
    scene.tick(1e-3)
```

Collision handlers take `(body1, body2, axis, aux, force_const)`, so you
can react to contact however you like:

```python
from rigidplane.forces import create_collision

def on_hit(body1, body2, axis, aux, force_const):
    body2.remove()

create_collision(scene, mass, anchor, on_hit, None, 0.0)
```

A handler runs once when two bodies start touching, and not again until
they have separated.

## Assets

`AssetCache(window)` loads images with `window.load_image(path)` and fonts
with `pygame.font.Font(path, 18)`. Asking for a cached file under a
different type raises `ValueError`. Assets draw themselves with
`render(window)`, which calls `window.render_image(image, width, height, x,
y)`, `window.render_text(text, font, position, color)` and, for an image
that follows a body, `window.bounding_box(body)`.

A `ButtonAsset` runs its handler on a click strictly inside its box, but
only after it has been rendered; the click hides it again until the next
render. Register buttons with `AssetCache.register_button` and pass clicks
with `AssetCache.handle_buttons(state, x, y)`.

## What is not included

The package does not open a window, draw scenes, read the keyboard or
mouse, or run a game loop, and it installs no commands or demo games. To
see a simulation on screen, supply your own window object with the methods
listed above and call `Scene.tick` from your own loop.
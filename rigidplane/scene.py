"""Scenes: collections of bodies and the force creators acting on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from rigidplane.body import Body

ForceCreator = Callable[[], None]


@dataclass(slots=True)
class _ForceEntry:
    forcer: ForceCreator
    bodies: tuple[Body, ...]

    def involves(self, removed_ids: set[int]) -> bool:
        return any(id(body) in removed_ids for body in self.bodies)


class Scene:
    """A collection of bodies and force creators, advanced together by :meth:`tick`."""

    def __init__(self) -> None:
        self._bodies: list[Body] = []
        self._forces: list[_ForceEntry] = []

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(list(self._bodies))

    def get_body(self, index: int) -> Body:
        """Return the body at ``index``; raise IndexError if there is none."""
        if not 0 <= index < len(self._bodies):
            raise IndexError(
                f"body index {index} out of range for scene of {len(self._bodies)}"
            )
        return self._bodies[index]

    def add_body(self, body: Body) -> None:
        """Append a body to the scene."""
        self._bodies.append(body)

    def remove_body(self, index: int) -> None:
        """Mark the body at ``index`` for removal at the next tick."""
        self.get_body(index).remove()

    def add_force_creator(
        self, forcer: ForceCreator, bodies: Iterable[Body] = ()
    ) -> None:
        """Register ``forcer`` to run on every tick.

        The force creator is dropped as soon as any body in ``bodies`` is removed.
        """
        self._forces.append(_ForceEntry(forcer, tuple(bodies)))

    def tick(self, dt: float) -> None:
        """Run every force creator, reap removed bodies, then tick the rest."""
        # Force creators registered during this loop are run in the same tick.
        for entry in self._forces:
            entry.forcer()

        removed_ids = {id(body) for body in self._bodies if body.removed}
        if removed_ids:
            self._forces[:] = [
                entry for entry in self._forces if not entry.involves(removed_ids)
            ]
            self._bodies[:] = [
                body for body in self._bodies if id(body) not in removed_ids
            ]

        for body in reversed(self._bodies):
            body.tick(dt)
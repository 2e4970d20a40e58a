"""Two-dimensional rigid-body physics with collisions, forces and pygame-backed assets."""

__version__ = "0.1.0"

__all__ = [
    "assets",
    "body",
    "collision",
    "color",
    "forces",
    "polygon",
    "scene",
    "vector",
]
"""Images, text and clickable buttons, with a cache of loaded files."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

import pygame

from rigidplane.body import Body
from rigidplane.color import Color
from rigidplane.vector import Vector

FONT_SIZE = 18

ButtonHandler = Callable[[Any], None]


class AssetType(Enum):
    """The kinds of asset."""

    IMAGE = auto()
    FONT = auto()
    BUTTON = auto()


@dataclass(slots=True)
class _Entry:
    asset_type: AssetType
    filepath: str | None
    obj: Any


class AssetCache:
    """Loads each image or font file once and holds the registered buttons."""

    def __init__(self, window: Any) -> None:
        self._window = window
        self._entries: list[_Entry] = []

    def __enter__(self) -> AssetCache:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _find(self, filepath: str) -> _Entry | None:
        return next(
            (
                entry
                for entry in self._entries
                if entry.filepath is not None and entry.filepath == filepath
            ),
            None,
        )

    def _load(self, asset_type: AssetType, filepath: str) -> Any:
        if asset_type is AssetType.IMAGE:
            return self._window.load_image(filepath)
        if asset_type is AssetType.FONT:
            if not pygame.font.get_init():
                pygame.font.init()
            return pygame.font.Font(filepath, FONT_SIZE)
        raise ValueError("buttons are registered with register_button, not loaded")

    def get_or_create(self, asset_type: AssetType, filepath: str) -> Any:
        """Return the object loaded from ``filepath``, loading it on first use.

        Raises ValueError if the file was already loaded as another type.
        """
        entry = self._find(filepath)
        if entry is None:
            obj = self._load(asset_type, filepath)
            self._entries.append(_Entry(asset_type, filepath, obj))
            return obj
        if entry.asset_type is not asset_type:
            raise ValueError(
                f"{filepath!r} is cached as {entry.asset_type.name}, "
                f"not {asset_type.name}"
            )
        return entry.obj

    def register_button(self, button: ButtonAsset) -> None:
        """Hold ``button`` so that :meth:`handle_buttons` dispatches clicks to it."""
        if not isinstance(button, ButtonAsset):
            raise TypeError(f"expected a ButtonAsset, got {type(button).__name__}")
        self._entries.append(_Entry(AssetType.BUTTON, None, button))

    def handle_buttons(self, state: Any, x: float, y: float) -> None:
        """Pass a click at (x, y) to every registered button."""
        for entry in list(self._entries):
            if entry.asset_type is AssetType.BUTTON:
                entry.obj.on_click(state, x, y)

    def close(self) -> None:
        """Drop every cached object and registered button."""
        self._entries.clear()


class _Asset:
    asset_type: AssetType

    def __init__(self, bounding_box: Any) -> None:
        self.bounding_box = pygame.Rect(bounding_box)


class ImageAsset(_Asset):
    """An image drawn into a box, or over a body that it follows."""

    asset_type = AssetType.IMAGE

    def __init__(
        self,
        cache: AssetCache,
        filepath: str,
        bounding_box: Any,
        body: Body | None = None,
    ) -> None:
        super().__init__(bounding_box)
        self.texture = cache.get_or_create(AssetType.IMAGE, filepath)
        self.body = body

    def render(self, window: Any) -> None:
        """Draw the image, first moving its box over the body if it has one."""
        if self.body is not None:
            self.bounding_box = pygame.Rect(window.bounding_box(self.body))
        box = self.bounding_box
        window.render_image(self.texture, box.w, box.h, box.x, box.y)


class TextAsset(_Asset):
    """A line of text drawn at the top-left of its box."""

    asset_type = AssetType.FONT

    def __init__(
        self,
        cache: AssetCache,
        filepath: str,
        bounding_box: Any,
        text: str,
        color: Color,
    ) -> None:
        super().__init__(bounding_box)
        self.font = cache.get_or_create(AssetType.FONT, filepath)
        self.text = text
        self.color = color

    def render(self, window: Any) -> None:
        """Draw the text."""
        box = self.bounding_box
        window.render_text(
            self.text, self.font, Vector(float(box.x), float(box.y)), self.color
        )


class ButtonAsset(_Asset):
    """A clickable area that may show an image and text.

    The image and text stay owned by the caller.
    """

    asset_type = AssetType.BUTTON

    def __init__(
        self,
        bounding_box: Any,
        image: ImageAsset | None,
        text: TextAsset | None,
        handler: ButtonHandler,
    ) -> None:
        if image is not None and not isinstance(image, ImageAsset):
            raise TypeError(f"button image must be an ImageAsset, got {type(image).__name__}")
        if text is not None and not isinstance(text, TextAsset):
            raise TypeError(f"button text must be a TextAsset, got {type(text).__name__}")
        super().__init__(bounding_box)
        self.image = image
        self.text = text
        self.handler = handler
        self.is_rendered = False

    def contains(self, x: float, y: float) -> bool:
        """Whether (x, y) lies strictly inside the button's box."""
        box = self.bounding_box
        return box.x < x < box.x + box.w and box.y < y < box.y + box.h

    def on_click(self, state: Any, x: float, y: float) -> None:
        """Run the handler if the button is shown and (x, y) is inside it.

        A click that runs the handler hides the button until it is rendered again.
        """
        if self.is_rendered and self.contains(x, y):
            self.handler(state)
            self.is_rendered = False

    def render(self, window: Any) -> None:
        """Draw the image and text, and mark the button as shown."""
        if self.image is not None:
            self.image.render(window)
        if self.text is not None:
            self.text.render(window)
        self.is_rendered = True
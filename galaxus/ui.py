"""Widgets laid out relative to the window size, and a container for them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterator, Optional

import pygame

Vector = tuple[float, float]

BUTTON_FILL = (100, 100, 100)
OUTLINE_COLOUR = (0, 0, 0)
TEXT_COLOUR = (255, 255, 255)
BUTTON_OUTLINE_THICKNESS = 2
TEXT_OUTLINE_THICKNESS = 1


def _render_outlined(font: pygame.font.Font, text: str, thickness: int) -> pygame.Surface:
    """Render ``text`` in white with an inner black outline."""
    face = font.render(text, True, TEXT_COLOUR)
    if thickness <= 0:
        return face
    outline = font.render(text, True, OUTLINE_COLOUR)
    result = pygame.Surface(face.get_size(), pygame.SRCALPHA)
    for dx in (-thickness, 0, thickness):
        for dy in (-thickness, 0, thickness):
            if dx or dy:
                result.blit(outline, (dx, dy))
    result.blit(face, (0, 0))
    return result


class UIElement(ABC):
    """Base widget with a position, visibility and relative anchoring."""

    def __init__(self) -> None:
        self.visible = True
        self.enabled = True
        self.position: Vector = (0.0, 0.0)
        self.elapsed = 0.0
        self._anchor_pos: Vector = (0.0, 0.0)
        self._anchor_size: Vector = (0.0, 0.0)

    def update(self, dt: float) -> None:
        """Advance the widget's clock by ``dt`` seconds for time-based animation."""
        self.elapsed += dt

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Return True if the event was consumed; widgets ignore events by default."""
        return False

    @abstractmethod
    def resize(self, size: tuple[int, int]) -> None:
        """Lay the widget out for a window of ``size`` pixels."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the widget onto ``surface``."""

    @abstractmethod
    def _local_bounds(self) -> pygame.Rect:
        """Bounding box relative to the widget's position."""

    def global_bounds(self) -> pygame.Rect:
        """Bounding box in window coordinates."""
        x, y = self.position
        return self._local_bounds().move(round(x), round(y))

    def _place(self, size: tuple[int, int]) -> Vector:
        """Move to the anchored position and return the anchored extent."""
        width, height = size
        self.position = (self._anchor_pos[0] * width, self._anchor_pos[1] * height)
        return (self._anchor_size[0] * width, self._anchor_size[1] * height)

    def _screen_position(self) -> tuple[int, int]:
        return round(self.position[0]), round(self.position[1])


class Button(UIElement):
    """A filled box with a centred label that runs a callback when clicked."""

    def __init__(
        self,
        font: pygame.font.Font,
        text: str,
        callback: Optional[Callable[[], None]],
    ) -> None:
        super().__init__()
        self._callback = callback
        self._box_size: Vector = (0.0, 0.0)
        self._label = _render_outlined(font, text, TEXT_OUTLINE_THICKNESS)
        self._label_offset: Vector = (0.0, 0.0)
        self._center_label()

    def set_relative_bounds(self, anchor: Vector, size: Vector) -> None:
        """Anchor the button as fractions of the window size."""
        self._anchor_pos = anchor
        self._anchor_size = size

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not (self.enabled and self.visible):
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            if self.global_bounds().collidepoint(event.pos):
                if self._callback is not None:
                    self._callback()
                return True
        return False

    def resize(self, size: tuple[int, int]) -> None:
        self._box_size = self._place(size)
        self._center_label()

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        box = self.global_bounds()
        pygame.draw.rect(surface, BUTTON_FILL, box)
        if box.width and box.height:
            pygame.draw.rect(surface, OUTLINE_COLOUR, box, BUTTON_OUTLINE_THICKNESS)
        x, y = self._screen_position()
        surface.blit(self._label, (x + round(self._label_offset[0]), y + round(self._label_offset[1])))

    def _local_bounds(self) -> pygame.Rect:
        return pygame.Rect(0, 0, round(self._box_size[0]), round(self._box_size[1]))

    def _center_label(self) -> None:
        label_w, label_h = self._label.get_size()
        self._label_offset = (
            (self._box_size[0] - label_w) / 2,
            (self._box_size[1] - label_h) / 2,
        )


class SpriteElement(UIElement):
    """A texture stretched to fill its anchored area."""

    def __init__(self, texture: pygame.Surface) -> None:
        super().__init__()
        self._texture = texture
        self._sprite = texture

    def set_relative_bounds(self, anchor: Vector, size: Vector) -> None:
        """Anchor the sprite as fractions of the window size."""
        self._anchor_pos = anchor
        self._anchor_size = size

    def resize(self, size: tuple[int, int]) -> None:
        width, height = self._place(size)
        target = (max(round(width), 0), max(round(height), 0))
        if target[0] == 0 or target[1] == 0:
            self._sprite = pygame.Surface(target, pygame.SRCALPHA)
        else:
            self._sprite = pygame.transform.scale(self._texture, target)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        surface.blit(self._sprite, self._screen_position())

    def _local_bounds(self) -> pygame.Rect:
        return self._sprite.get_rect()


class Label(UIElement):
    """Text placed at a relative position; its size follows the font, not the window."""

    def __init__(self, font: pygame.font.Font, text: str) -> None:
        super().__init__()
        self._text = _render_outlined(font, text, TEXT_OUTLINE_THICKNESS)

    def set_relative_position(self, anchor: Vector) -> None:
        """Anchor the label's top-left corner as fractions of the window size."""
        self._anchor_pos = anchor

    def resize(self, size: tuple[int, int]) -> None:
        self._place(size)

    def draw(self, surface: pygame.Surface) -> None:
        if not self.visible:
            return
        surface.blit(self._text, self._screen_position())

    def _local_bounds(self) -> pygame.Rect:
        return self._text.get_rect()


class UIManager:
    """Owns widgets, drawing them bottom to top and offering events top to bottom."""

    def __init__(self) -> None:
        self._widgets: list[UIElement] = []

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[UIElement]:
        return iter(self._widgets)

    def add(self, widget: UIElement) -> UIElement:
        """Store ``widget`` on top of the others and return it."""
        self._widgets.append(widget)
        return widget

    def clear(self) -> None:
        """Remove every widget."""
        self._widgets.clear()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Offer the event to the topmost widget first; True once one consumes it."""
        return any(widget.handle_event(event) for widget in reversed(self._widgets))

    def update(self, dt: float) -> None:
        for widget in self._widgets:
            widget.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for widget in self._widgets:
            widget.draw(surface)

    def resize_all(self, size: tuple[int, int]) -> None:
        for widget in self._widgets:
            widget.resize(size)
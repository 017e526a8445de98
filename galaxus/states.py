"""Game states and the stack that decides which of them is active."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

import pygame

from .resources import ResourceManager
from .ui import Button, Label, SpriteElement, UIManager

Size = tuple[int, int]
Colour = tuple[int, int, int]

BLACK: Colour = (0, 0, 0)
RED: Colour = (255, 0, 0)
GREEN: Colour = (0, 255, 0)
BLUE: Colour = (0, 0, 255)
MAGENTA: Colour = (255, 0, 255)

MENU_BACKGROUND = "menu_background"
MENU_FONT = "arial"
BUTTON_FONT_SIZE = 24
LABEL_FONT_SIZE = 36

PAUSE_TEXT = "PAUSED"
PAUSE_FONT_SIZE = 48
PAUSE_TEXT_TOP = 100.0

PLAYER_RADIUS = 10.0
PLAYER_START = (300.0, 400.0)
PLAYER_SPEED = 100.0

_MOVES = {
    pygame.K_d: (PLAYER_SPEED, 0.0),
    pygame.K_a: (-PLAYER_SPEED, 0.0),
    pygame.K_s: (0.0, PLAYER_SPEED),
    pygame.K_w: (0.0, -PLAYER_SPEED),
}


def _render_text(font: pygame.font.Font, text: str, colour: Colour) -> pygame.Surface:
    """Render ``text`` in ``colour`` with a one pixel black outline."""
    face = font.render(text, True, colour)
    outline = font.render(text, True, BLACK)
    result = pygame.Surface(face.get_size(), pygame.SRCALPHA)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx or dy:
                result.blit(outline, (dx, dy))
    result.blit(face, (0, 0))
    return result


class GameState(ABC):
    """A screen of the game: receives events, updates and draws itself."""

    def __init__(self, states: "StateManager", window: Any, resources: ResourceManager) -> None:
        self.states = states
        self.window = window
        self.resources = resources

    @abstractmethod
    def on_enter(self) -> None:
        """Called when the state becomes active."""

    @abstractmethod
    def on_exit(self) -> None:
        """Called when the state is removed or replaced."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one input event."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw onto ``surface``."""

    @abstractmethod
    def on_resize(self, size: Size) -> None:
        """Lay out for a window of ``size`` pixels."""

    def set_render_window(self, window: Any) -> None:
        """Point the state at a new window."""
        self.window = window


class MenuState(GameState):
    """Title screen with a background, a Play button and a label."""

    def __init__(self, states: "StateManager", window: Any, resources: ResourceManager) -> None:
        super().__init__(states, window, resources)
        self.ui = UIManager()

    def on_enter(self) -> None:
        self.ui.clear()
        background = SpriteElement(self.resources.get_texture(MENU_BACKGROUND))
        background.set_relative_bounds((0.0, 0.0), (1.0, 1.0))
        self.ui.add(background)

        play = Button(
            self.resources.get_font(MENU_FONT, BUTTON_FONT_SIZE),
            "Play",
            self._start_game,
        )
        play.set_relative_bounds((0.4, 0.1), (0.2, 0.1))
        self.ui.add(play)

        label = Label(self.resources.get_font(MENU_FONT, LABEL_FONT_SIZE), "TESTING LABEL")
        label.set_relative_position((0.5, 0.5))
        self.ui.add(label)

        self.on_resize(self.window.get_size())

    def _start_game(self) -> None:
        self.states.change_base_state(PlayState, self.states, self.window, self.resources)

    def on_exit(self) -> None:
        self.resources.unload_texture(MENU_BACKGROUND)

    def on_resize(self, size: Size) -> None:
        self.ui.resize_all(size)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.ui.handle_event(event):
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN and self.states.top() is self:
            self.states.change_state(PlayState, self.states, self.window, self.resources)

    def update(self, dt: float) -> None:
        self.ui.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        self.ui.draw(surface)


class PauseState(GameState):
    """Overlay showing a pause caption above the state beneath it."""

    def __init__(self, states: "StateManager", window: Any, resources: ResourceManager) -> None:
        super().__init__(states, window, resources)
        self._font: Optional[pygame.font.Font] = None
        self.text_colour: Colour = BLUE
        self.text_surface: Optional[pygame.Surface] = None
        self.text_position: tuple[float, float] = (0.0, PAUSE_TEXT_TOP)

    def on_enter(self) -> None:
        self._font = self.resources.get_font(MENU_FONT, PAUSE_FONT_SIZE)
        self._set_colour(BLUE)
        width = self.window.get_size()[0]
        self.text_position = ((width - self.text_surface.get_width()) / 2, PAUSE_TEXT_TOP)

    def _set_colour(self, colour: Colour) -> None:
        self.text_colour = colour
        if self._font is not None:
            self.text_surface = _render_text(self._font, PAUSE_TEXT, colour)

    def on_exit(self) -> None:
        pass

    def on_resize(self, size: Size) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self.states.pop_state()
        if event.key == pygame.K_b:
            self._set_colour(MAGENTA)
        if event.key == pygame.K_c:
            self._set_colour(GREEN)

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        if self.text_surface is not None:
            x, y = self.text_position
            surface.blit(self.text_surface, (round(x), round(y)))


class PlayState(GameState):
    """The playing field: a circle steered with W, A, S and D."""

    def __init__(self, states: "StateManager", window: Any, resources: ResourceManager) -> None:
        super().__init__(states, window, resources)
        self.player_position: tuple[float, float] = PLAYER_START
        self.player_radius = PLAYER_RADIUS

    def on_enter(self) -> None:
        self.player_radius = PLAYER_RADIUS
        self.player_position = PLAYER_START

    def on_exit(self) -> None:
        pass

    def on_resize(self, size: Size) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_RETURN:
            self.states.change_state(MenuState, self.states, self.window, self.resources)
        if event.key == pygame.K_ESCAPE:
            self.states.push_state(PauseState, self.states, self.window, self.resources)

    def update(self, dt: float) -> None:
        pressed = pygame.key.get_pressed()
        x, y = self.player_position
        for key, (vx, vy) in _MOVES.items():
            if pressed[key]:
                x += vx * dt
                y += vy * dt
        self.player_position = (x, y)

    def draw(self, surface: pygame.Surface) -> None:
        center = (round(self.player_position[0]), round(self.player_position[1]))
        radius = round(self.player_radius)
        pygame.draw.circle(surface, RED, center, radius)
        pygame.draw.circle(surface, BLACK, center, radius, 1)


class StateManager:
    """Stack of game states; the top one gets events and updates, all are drawn."""

    def __init__(self) -> None:
        self._states: list[GameState] = []

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[GameState]:
        return iter(self._states)

    def change_state(self, state_cls: type[GameState], *args: Any) -> GameState:
        """Replace the top state with a new ``state_cls(*args)``."""
        if self._states:
            self._states.pop().on_exit()
        return self.push_state(state_cls, *args)

    def push_state(self, state_cls: type[GameState], *args: Any) -> GameState:
        """Put a new ``state_cls(*args)`` on top and enter it."""
        state = state_cls(*args)
        self._states.append(state)
        state.on_enter()
        return state

    def change_base_state(self, state_cls: type[GameState], *args: Any) -> GameState:
        """Exit every state from top to bottom, then start afresh with ``state_cls(*args)``."""
        for state in reversed(self._states):
            state.on_exit()
        self._states.clear()
        return self.push_state(state_cls, *args)

    def pop_state(self) -> None:
        """Exit the top state and re-enter the one beneath it."""
        if not self._states:
            return
        self._states.pop().on_exit()
        if self._states:
            self._states[-1].on_enter()

    def top(self) -> Optional[GameState]:
        return self._states[-1] if self._states else None

    def empty(self) -> bool:
        return not self._states

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._states:
            self._states[-1].handle_event(event)

    def update(self, dt: float) -> None:
        if self._states:
            self._states[-1].update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        for state in list(self._states):
            state.draw(surface)

    def set_render_window(self, window: Any) -> None:
        for state in self._states:
            state.set_render_window(window)

    def handle_resize(self, size: Size) -> None:
        for state in list(self._states):
            state.on_resize(size)
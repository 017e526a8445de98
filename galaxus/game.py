"""The game object that owns the window and runs the main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .resources import ResourceManager
from .settings import DEFAULT_SETTINGS_PATH, WindowSettings
from .states import MenuState, StateManager

DEFAULT_RESOURCE_ROOT = "resources"
CLEAR_COLOUR = (0, 0, 0)


class Game:
    """Holds the window, the state stack and the resources, and runs the loop."""

    def __init__(
        self,
        settings_path: str | Path = DEFAULT_SETTINGS_PATH,
        resource_root: str | Path = DEFAULT_RESOURCE_ROOT,
    ) -> None:
        self.settings = WindowSettings.load_from_file(settings_path)
        self.settings.icon_path = str(Path(resource_root) / "textures" / "icon.png")
        self.states = StateManager()
        self.resources = ResourceManager(resource_root)
        self.window: Optional[pygame.Surface] = None
        self._open = False

    def run(self) -> None:
        """Open the window, enter the menu and loop until the window closes."""
        try:
            self._recreate_window()
            self.states.push_state(MenuState, self.states, self.window, self.resources)
            clock = pygame.time.Clock()
            clock.tick()
            while self._open:
                dt = clock.tick(self.settings.frame_limit) / 1000.0
                self._handle_events()
                if not self._open:
                    break
                self.states.update(dt)
                self._render()
        finally:
            self._open = False
            pygame.display.quit()

    def _recreate_window(self) -> None:
        self.window = self.settings.make_window()
        self._open = True
        self.states.set_render_window(self.window)
        self.states.handle_resize(self.window.get_size())

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._open = False
            if event.type == pygame.VIDEORESIZE:
                self.states.handle_resize((event.w, event.h))
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.settings.fullscreen = not self.settings.fullscreen
                self._recreate_window()
            self.states.handle_event(event)

    def _render(self) -> None:
        self.window.fill(CLEAR_COLOUR)
        self.states.draw(self.window)
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; report any error and wait for Enter before failing."""
    parser = argparse.ArgumentParser(prog="galaxus", description="Run the Galaxus game.")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_PATH, help="settings JSON file")
    parser.add_argument("--resources", default=DEFAULT_RESOURCE_ROOT, help="resource directory")
    args = parser.parse_args(argv)

    try:
        Game(args.settings, args.resources).run()
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Press enter to exit...", end="", flush=True)
        sys.stdin.readline()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Window configuration loaded from a JSON settings file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

WINDOW_TITLE = "Galaxus"
DEFAULT_SETTINGS_PATH = "settings.json"
DEFAULT_ICON_PATH = "resources/textures/icon.png"


def _read_unsigned(data: dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"setting '{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"setting '{key}' must not be negative, got {value}")
    return value


def _read_flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"setting '{key}' must be a boolean, got {value!r}")
    return value


@dataclass
class WindowSettings:
    """Size, mode and timing options for the main window."""

    width: int = 800
    height: int = 600
    fullscreen: bool = False
    vsync: bool = False
    frame_limit: int = 60
    icon_path: str = DEFAULT_ICON_PATH

    @classmethod
    def load_from_file(cls, path: str | Path = DEFAULT_SETTINGS_PATH) -> "WindowSettings":
        """Read settings from a JSON file; keys that are absent keep their defaults."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise RuntimeError(f"Could not open {path}") from exc

        if not isinstance(data, dict):
            raise TypeError(f"{path} must hold a JSON object")

        defaults = cls()
        return cls(
            width=_read_unsigned(data, "windowWidth", defaults.width),
            height=_read_unsigned(data, "windowHeight", defaults.height),
            fullscreen=_read_flag(data, "fullscreen", defaults.fullscreen),
            vsync=_read_flag(data, "vsync", defaults.vsync),
            frame_limit=_read_unsigned(data, "frameLimit", defaults.frame_limit),
            icon_path=defaults.icon_path,
        )

    def make_window(self) -> pygame.Surface:
        """Open the display window described by these settings.

        The frame limit is not applied here; the game loop honours it.
        """
        pygame.display.init()
        try:
            icon = pygame.image.load(self.icon_path)
        except (pygame.error, OSError) as exc:
            raise RuntimeError("Failed to load window icon") from exc
        pygame.display.set_icon(icon)

        if self.fullscreen:
            size = (0, 0)
            flags = pygame.FULLSCREEN
        else:
            size = (self.width, self.height)
            flags = 0
        if self.vsync:
            flags |= pygame.SCALED

        window = pygame.display.set_mode(size, flags, vsync=int(self.vsync))
        pygame.display.set_caption(WINDOW_TITLE)
        return window
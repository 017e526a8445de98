"""Cache of fonts, textures and sounds loaded from a resource directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import pygame

T = TypeVar("T")


class ResourceError(RuntimeError):
    """Raised when a resource file cannot be loaded."""


class ResourceManager:
    """Loads resources on first request and keeps them until unloaded.

    Fonts live in ``<root>/fonts/<name>.ttf``, textures in
    ``<root>/textures/<name>.png`` and sounds in ``<root>/audio/<name>.wav``.
    """

    def __init__(self, root: str | Path = "resources") -> None:
        self.root = Path(root)
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self._textures: dict[str, pygame.Surface] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def _load(self, name: str, path: Path, loader: Callable[[Path], T]) -> T:
        if not path.is_file():
            raise ResourceError(f"ResourceManager: failed to load '{name}' from '{path}'")
        try:
            return loader(path)
        except (pygame.error, OSError) as exc:
            raise ResourceError(
                f"ResourceManager: failed to load '{name}' from '{path}'"
            ) from exc

    def get_font(self, name: str, size: int) -> pygame.font.Font:
        """Return the font ``name`` at ``size`` pixels, loading it if needed."""
        key = (name, size)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            path = self.root / "fonts" / f"{name}.ttf"
            self._fonts[key] = self._load(name, path, lambda p: pygame.font.Font(str(p), size))
        return self._fonts[key]

    def unload_font(self, name: str) -> bool:
        """Drop every cached size of font ``name``; report whether any was cached."""
        keys = [key for key in self._fonts if key[0] == name]
        for key in keys:
            del self._fonts[key]
        return bool(keys)

    def get_texture(self, name: str) -> pygame.Surface:
        """Return the texture ``name``, loading it if needed."""
        if name not in self._textures:
            path = self.root / "textures" / f"{name}.png"
            self._textures[name] = self._load(name, path, lambda p: pygame.image.load(str(p)))
        return self._textures[name]

    def unload_texture(self, name: str) -> bool:
        """Drop texture ``name``; report whether it was cached."""
        return self._textures.pop(name, None) is not None

    def get_sound(self, name: str) -> pygame.mixer.Sound:
        """Return the sound ``name``, loading it if needed."""
        if name not in self._sounds:
            path = self.root / "audio" / f"{name}.wav"
            self._sounds[name] = self._load(name, path, lambda p: pygame.mixer.Sound(str(p)))
        return self._sounds[name]

    def unload_sound(self, name: str) -> bool:
        """Drop sound ``name``; report whether it was cached."""
        return self._sounds.pop(name, None) is not None
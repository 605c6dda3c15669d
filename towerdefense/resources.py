"""Loading and caching of fonts, textures and sounds by path or key."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pygame

DEFAULT_FONT_SIZE = 24

Loader = Callable[[str], Any]


class ResourceError(Exception):
    """A resource file could not be loaded."""


def _load_font(path: str) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, DEFAULT_FONT_SIZE)


def _load_texture(path: str) -> pygame.Surface:
    return pygame.image.load(path)


def _load_sound(path: str) -> pygame.mixer.Sound:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


class ResourceManager:
    """Caches loaded resources under their path or under a chosen key."""

    def __init__(
        self,
        font_loader: Loader | None = None,
        texture_loader: Loader | None = None,
        sound_loader: Loader | None = None,
    ) -> None:
        self._font_loader = font_loader or _load_font
        self._texture_loader = texture_loader or _load_texture
        self._sound_loader = sound_loader or _load_sound
        self.fonts: dict[str, Any] = {}
        self.textures: dict[str, Any] = {}
        self.sounds: dict[str, Any] = {}

    def load_font(self, path: str, key: str | None = None) -> Any:
        return self._load(
            self.fonts, self._font_loader, path, key, "Erreur lors du chargement de la police"
        )

    def load_texture(self, path: str, key: str | None = None) -> Any:
        return self._load(
            self.textures,
            self._texture_loader,
            path,
            key,
            "Erreur lors du chargement de la texture",
        )

    def load_sound(self, path: str, key: str | None = None) -> Any:
        return self._load(
            self.sounds, self._sound_loader, path, key, "Erreur lors du chargement du son"
        )

    def get_font(self, path: str) -> Any:
        """Return the font cached under this path, loading it if needed."""
        if path not in self.fonts:
            self.load_font(path)
        return self.fonts[path]

    def get_texture(self, path: str) -> Any:
        """Return the texture cached under this path, loading it if needed."""
        if path not in self.textures:
            self.load_texture(path)
        return self.textures[path]

    def get_sound(self, path: str) -> Any:
        """Return the sound cached under this path, loading it if needed."""
        if path not in self.sounds:
            self.load_sound(path)
        return self.sounds[path]

    @staticmethod
    def _load(
        store: dict[str, Any], loader: Loader, path: str, key: str | None, message: str
    ) -> Any:
        try:
            resource = loader(path)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"{message}: {path}") from exc
        store[key or path] = resource
        return resource
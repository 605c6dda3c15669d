"""Clickable buttons with hover and press feedback, and a factory for them."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence

import pygame

from towerdefense.resources import ResourceError

DEFAULT_FONT_PATH = "assets/arial.TTF"
LABEL_SIZE = 24
LEFT_BUTTON = 1

Color = tuple[int, int, int]

TEXT_IDLE: Color = (70, 130, 180)
TEXT_HOVER: Color = (100, 149, 237)
TEXT_ACTIVE: Color = (65, 105, 225)
LABEL_COLOR: Color = (255, 255, 255)

IMAGE_IDLE: Color = (255, 255, 255)
IMAGE_HOVER: Color = (255, 255, 0)
IMAGE_ACTIVE: Color = (255, 0, 0)


class Button(ABC):
    """A rectangular button that tracks hover and left-button presses."""

    def __init__(self, size: Sequence[float], idle: Color, hover: Color, active: Color) -> None:
        self.size = (float(size[0]), float(size[1]))
        self.position = (0.0, 0.0)
        self.idle_color = idle
        self.hover_color = hover
        self.active_color = active
        self.hovered = False
        self.pressed = False

    @property
    def rect(self) -> pygame.Rect:
        x, y = self.position
        width, height = self.size
        return pygame.Rect(round(x), round(y), round(width), round(height))

    @property
    def color(self) -> Color:
        """The fill colour for the current press and hover state."""
        if self.pressed:
            return self.active_color
        if self.hovered:
            return self.hover_color
        return self.idle_color

    def set_position(self, pos: Sequence[float]) -> None:
        self.position = (float(pos[0]), float(pos[1]))

    def update(self, mouse_pos: Sequence[float]) -> None:
        self.hovered = self._contains(mouse_pos)

    def is_clicked(self, event: pygame.event.Event) -> bool:
        """Return True for a left-button press inside the button."""
        button = getattr(event, "button", None)
        if event.type == pygame.MOUSEBUTTONDOWN and button == LEFT_BUTTON:
            if self._contains(event.pos):
                self.pressed = True
                return True
        if event.type == pygame.MOUSEBUTTONUP and button == LEFT_BUTTON:
            self.pressed = False
        return False

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button onto a surface."""

    def _contains(self, point: Sequence[float]) -> bool:
        return bool(self.rect.collidepoint(int(point[0]), int(point[1])))


class TextButton(Button):
    """A coloured rectangle with a centred text label."""

    def __init__(
        self,
        size: Sequence[float],
        label: str,
        font: pygame.font.Font | None,
        idle: Color = TEXT_IDLE,
        hover: Color = TEXT_HOVER,
        active: Color = TEXT_ACTIVE,
        text_color: Color = LABEL_COLOR,
    ) -> None:
        super().__init__(size, idle, hover, active)
        self.label = label
        self.font = font
        self.text_color = text_color

    def draw(self, surface: pygame.Surface) -> None:
        rect = self.rect
        pygame.draw.rect(surface, self.color, rect)
        if self.font is not None:
            text = self.font.render(self.label, True, self.text_color)
            surface.blit(text, text.get_rect(center=rect.center))


class ImageButton(Button):
    """An image scaled to the button size and tinted by its state."""

    def __init__(
        self,
        texture: pygame.Surface,
        size: Sequence[float],
        idle: Color = IMAGE_IDLE,
        hover: Color = IMAGE_HOVER,
        active: Color = IMAGE_ACTIVE,
    ) -> None:
        super().__init__(size, idle, hover, active)
        width, height = self.size
        self.texture = pygame.transform.scale(texture, (round(width), round(height)))

    def draw(self, surface: pygame.Surface) -> None:
        tinted = self.texture.copy()
        tinted.fill(self.color, special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(tinted, self.rect.topleft)


def _load_label_font(path: str) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(path, LABEL_SIZE)
    except (OSError, pygame.error):
        print("Erreur lors du chargement de la police dans ButtonFactory", file=sys.stderr)
        return pygame.font.Font(None, LABEL_SIZE)


class ButtonFactory:
    """Builds buttons that share one label font."""

    def __init__(
        self, font: pygame.font.Font | None = None, font_path: str = DEFAULT_FONT_PATH
    ) -> None:
        self.font = font if font is not None else _load_label_font(font_path)

    def create_text_button(self, size: Sequence[float], label: str) -> TextButton:
        return TextButton(size, label, self.font)

    def create_image_button(self, size: Sequence[float], image_path: str) -> ImageButton:
        """Load an image and wrap it in a button; raise ResourceError if it cannot load."""
        try:
            texture = pygame.image.load(image_path)
        except (OSError, pygame.error) as exc:
            raise ResourceError(f"Erreur chargement image {image_path}") from exc
        return ImageButton(texture, size)
"""The screens the game loop switches between: title, menus and pause."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import pygame

from towerdefense.battle import Battle
from towerdefense.buttons import ButtonFactory, TextButton
from towerdefense.session import Session

SCREEN_SIZE = (800, 600)
CENTER_X = 400
FONT_PATH = "assets/arial.TTF"
WHITE = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 128)

BASIC_TOWER_COST = 50
SNIPER_TOWER_COST = 100
VOLUME_STEP = 10


class _App(Protocol):
    session: Session
    mouse_pos: tuple[int, int]

    def change_state(self, state: Any) -> None: ...

    def close(self) -> None: ...


Action = Callable[[_App], None]


def _load_font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(FONT_PATH, size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


@dataclass
class _Label:
    text: str
    font: pygame.font.Font
    position: tuple[int, int]

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.font.render(self.text, True, WHITE), self.position)


def _centered_label(text: str, size: int, top: int) -> _Label:
    font = _load_font(size)
    width = font.size(text)[0]
    return _Label(text, font, (round(CENTER_X - width / 2), top))


class GameState(ABC):
    """A screen that receives events, updates once per frame and draws itself."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event, app: _App) -> None:
        """React to one input event."""

    @abstractmethod
    def update(self, app: _App) -> None:
        """Advance the screen by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the screen onto a surface."""


class StartState(GameState):
    """The title screen, left by pressing Enter."""

    def __init__(self) -> None:
        self.label = _centered_label("Appuyez sur Entree pour commencer", 40, 250)

    def handle_event(self, event: pygame.event.Event, app: _App) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
            app.change_state(MainMenuState())

    def update(self, app: _App) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        self.label.draw(surface)


class _MenuState(GameState):
    """A screen of labelled buttons, each bound to an action."""

    overlay = False

    def __init__(self, factory: ButtonFactory | None = None) -> None:
        self.factory = factory if factory is not None else ButtonFactory()
        self.labels: list[_Label] = []
        self._entries: list[tuple[TextButton, Action]] = []

    @property
    def buttons(self) -> list[TextButton]:
        return [button for button, _ in self._entries]

    def _add_button(
        self, size: Sequence[float], label: str, pos: Sequence[float], action: Action
    ) -> None:
        button = self.factory.create_text_button(size, label)
        button.set_position(pos)
        self._entries.append((button, action))

    def _handle_key(self, event: pygame.event.Event, app: _App) -> None:
        """Keyboard shortcuts; none by default."""

    def handle_event(self, event: pygame.event.Event, app: _App) -> None:
        self._handle_key(event, app)
        for button, action in self._entries:
            if button.is_clicked(event):
                app.session.play_click()
                action(app)
                break

    def update(self, app: _App) -> None:
        for button, _ in self._entries:
            button.update(app.mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        if self.overlay:
            shade = pygame.Surface(SCREEN_SIZE, pygame.SRCALPHA)
            shade.fill(OVERLAY_COLOR)
            surface.blit(shade, (0, 0))
        for label in self.labels:
            label.draw(surface)
        for button, _ in self._entries:
            button.draw(surface)


class MainMenuState(_MenuState):
    """The main menu: play, settings, scores and quit."""

    def __init__(self, factory: ButtonFactory | None = None) -> None:
        super().__init__(factory)
        self.labels.append(_centered_label("TOWER DEFENSE", 60, 100))
        self._add_button((200, 50), "JOUER", (300, 250), self._play)
        self._add_button((200, 50), "PARAMETRES", (300, 320), self._settings)
        self._add_button((200, 50), "SCORES", (300, 390), self._scores)
        self._add_button((200, 50), "QUITTER", (300, 460), self._quit)

    def _play(self, app: _App) -> None:
        app.change_state(Battle())

    def _settings(self, app: _App) -> None:
        app.change_state(SettingsState(self.factory))

    def _scores(self, app: _App) -> None:
        print("Scores sélectionnés")

    def _quit(self, app: _App) -> None:
        app.close()


class PauseState(_MenuState):
    """The pause overlay shown over a battle."""

    overlay = True

    def __init__(self, factory: ButtonFactory | None = None) -> None:
        super().__init__(factory)
        self.labels.append(_centered_label("PAUSE", 60, 150))
        self.labels.append(_centered_label("ESC: Reprendre | Q: Quitter", 20, 450))
        self._add_button((200, 50), "REPRENDRE", (300, 250), self._resume)
        self._add_button((200, 50), "PARAMETRES", (300, 320), self._settings)
        self._add_button((200, 50), "MENU PRINCIPAL", (300, 390), self._main_menu)

    def _handle_key(self, event: pygame.event.Event, app: _App) -> None:
        if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            app.change_state(Battle())

    def _resume(self, app: _App) -> None:
        app.change_state(Battle())

    def _settings(self, app: _App) -> None:
        """The pause screen has no settings page of its own."""

    def _main_menu(self, app: _App) -> None:
        app.change_state(MainMenuState(self.factory))


class SettingsState(_MenuState):
    """The settings screen, where the volume is raised or lowered."""

    def __init__(self, factory: ButtonFactory | None = None) -> None:
        super().__init__(factory)
        self.labels.append(_centered_label("PARAMETRES", 50, 100))
        self.volume_label = _Label("", _load_font(24), (200, 250))
        self.labels.append(self.volume_label)
        self._add_button((60, 40), "VOLUME -", (300, 300), self._volume_down)
        self._add_button((60, 40), "VOLUME +", (400, 300), self._volume_up)
        self._add_button((150, 50), "RETOUR", (325, 450), self._back)

    @property
    def volume_text(self) -> str:
        return self.volume_label.text

    def _handle_key(self, event: pygame.event.Event, app: _App) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            app.change_state(MainMenuState(self.factory))

    def _volume_down(self, app: _App) -> None:
        app.session.volume = app.session.volume - VOLUME_STEP
        self._refresh_volume(app.session)

    def _volume_up(self, app: _App) -> None:
        app.session.volume = app.session.volume + VOLUME_STEP
        self._refresh_volume(app.session)

    def _back(self, app: _App) -> None:
        app.change_state(MainMenuState(self.factory))

    def _refresh_volume(self, session: Session) -> None:
        self.volume_label.text = f"Volume: {int(session.volume)}%"

    def update(self, app: _App) -> None:
        self._refresh_volume(app.session)
        super().update(app)


class TowerMenuState(_MenuState):
    """The overlay for choosing which kind of tower to place."""

    overlay = True

    def __init__(self, factory: ButtonFactory | None = None) -> None:
        super().__init__(factory)
        self.labels.append(_centered_label("MENU DES TOURS", 40, 150))
        self.labels.append(_centered_label("Choisissez le type de tour a placer", 20, 200))
        self._add_button((250, 50), "TOUR BASIQUE (50 or)", (275, 280), self._basic)
        self._add_button((250, 50), "TOUR SNIPER (100 or)", (275, 350), self._sniper)
        self._add_button((150, 50), "RETOUR", (325, 420), self._back)

    def _handle_key(self, event: pygame.event.Event, app: _App) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            app.change_state(Battle())

    def _basic(self, app: _App) -> None:
        if app.session.gold >= BASIC_TOWER_COST:
            app.change_state(Battle())

    def _sniper(self, app: _App) -> None:
        if app.session.gold >= SNIPER_TOWER_COST:
            app.change_state(Battle())

    def _back(self, app: _App) -> None:
        app.change_state(Battle())
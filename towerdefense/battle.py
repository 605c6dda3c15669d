"""The playing screen: waves of enemies, towers placed by clicking, and the HUD."""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from typing import Any, Protocol

import pygame

from towerdefense.board import Board
from towerdefense.enemy import Enemy
from towerdefense.session import Session
from towerdefense.tower import Tower

SCREEN_WIDTH = 800
HUD_HEIGHT = 80
CELL_SIZE = 50
BOARD_WIDTH = 16
BOARD_HEIGHT = 12
PATH_ROW = 6

FONT_PATH = "assets/arial.TTF"
HUD_FONT_SIZE = 20
HELP_FONT_SIZE = 16

SPAWN_INTERVAL = 2.0
FIRST_WAVE_SIZE = 5
WAVE_GROWTH = 2
WAVE_BONUS = 20
ENEMY_HEALTH = 100
KILL_GOLD = 10
KILL_SCORE = 100

TOWER_COST = 50
TOWER_SPEED = 1.0
TOWER_RANGE = 100.0
TOWER_NAME = "Basic Tower"
TOWER_DAMAGE = 25

PAUSE_BUTTON = pygame.Rect(600, 10, 80, 30)
TOWER_MENU_BUTTON = pygame.Rect(690, 10, 100, 30)
HUD_BACKGROUND = (0, 0, 0, 128)
HELP_TEXT = "ESPACE: Nouvelle vague | ESC: Pause | Clic: Placer tour (50 gold)"

WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)

_HUD_LAYOUT = {
    "gold": ((10, 10), YELLOW),
    "lives": ((10, 35), RED),
    "wave": ((200, 10), WHITE),
    "score": ((200, 35), WHITE),
}

StateFactory = Callable[[], Any]


class _App(Protocol):
    session: Session

    def change_state(self, state: Any) -> None: ...


def _pause_screen() -> Any:
    from towerdefense.states import PauseState

    return PauseState()


def _tower_menu_screen() -> Any:
    from towerdefense.states import TowerMenuState

    return TowerMenuState()


def _main_menu_screen() -> Any:
    from towerdefense.states import MainMenuState

    return MainMenuState()


class Battle:
    """The game screen where waves are fought."""

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        font: pygame.font.Font | None = None,
        pause_state: StateFactory = _pause_screen,
        tower_menu_state: StateFactory = _tower_menu_screen,
        menu_state: StateFactory = _main_menu_screen,
    ) -> None:
        self.board = Board(BOARD_WIDTH, BOARD_HEIGHT)
        self.towers: list[Tower] = []
        self.enemies: list[Enemy] = []
        self.enemies_spawned = 0
        self.enemies_per_wave = FIRST_WAVE_SIZE
        self.wave_active = False
        self.hud = {name: "" for name in _HUD_LAYOUT}
        self._clock = clock
        self._spawn_started = clock()
        self._font = font
        self._fonts: dict[int, pygame.font.Font] = {}
        self._pause_state = pause_state
        self._tower_menu_state = tower_menu_state
        self._menu_state = menu_state

    def start_wave(self) -> None:
        """Begin the next wave unless one is already running."""
        if not self.wave_active:
            self.wave_active = True
            self.enemies_spawned = 0
            self._spawn_started = self._clock()

    def spawn_enemy(self) -> Enemy:
        path = [(col, PATH_ROW) for col in range(BOARD_WIDTH)]
        enemy = Enemy(path, ENEMY_HEALTH)
        self.enemies.append(enemy)
        return enemy

    def place_tower(self, pos: tuple[float, float], session: Session) -> Tower | None:
        """Buy a tower in the cell under pos if the player can afford it."""
        if session.gold < TOWER_COST:
            return None
        grid_x = int(pos[0] / CELL_SIZE)
        grid_y = int((pos[1] - HUD_HEIGHT) / CELL_SIZE)
        tower = Tower(TOWER_COST, TOWER_SPEED, TOWER_RANGE, TOWER_NAME)
        half = CELL_SIZE // 2
        tower.set_position(grid_x * CELL_SIZE + half, grid_y * CELL_SIZE + HUD_HEIGHT + half)
        self.towers.append(tower)
        session.spend_gold(TOWER_COST)
        session.play_click()
        return tower

    def handle_event(self, event: pygame.event.Event, app: _App) -> None:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.change_state(self._pause_state())
            if event.key == pygame.K_SPACE:
                self.start_wave()

        if event.type == pygame.MOUSEBUTTONDOWN:
            x, y = event.pos
            if PAUSE_BUTTON.collidepoint(x, y):
                app.session.play_click()
                app.change_state(self._pause_state())
            elif TOWER_MENU_BUTTON.collidepoint(x, y):
                app.session.play_click()
                app.change_state(self._tower_menu_state())
            elif y > HUD_HEIGHT:
                self.place_tower((x, y), app.session)

    def update(self, app: _App) -> None:
        session = app.session
        if self.wave_active and self.enemies_spawned < self.enemies_per_wave:
            if self._clock() - self._spawn_started > SPAWN_INTERVAL:
                self.spawn_enemy()
                self.enemies_spawned += 1
                self._spawn_started = self._clock()

        if (
            self.wave_active
            and self.enemies_spawned >= self.enemies_per_wave
            and not self.enemies
        ):
            self.wave_active = False
            session.next_wave()
            session.add_gold(WAVE_BONUS)
            self.enemies_per_wave += WAVE_GROWTH

        self._update_enemies(session)
        self._update_towers()
        self._update_hud(session)

        if session.lives <= 0:
            session.play_defeat()
            app.change_state(self._menu_state())

    def draw(self, surface: pygame.Surface) -> None:
        self.board.render(surface)
        for tower in self.towers:
            tower.render(surface)
        for enemy in self.enemies:
            enemy.render(surface)

        background = pygame.Surface((SCREEN_WIDTH, HUD_HEIGHT), pygame.SRCALPHA)
        background.fill(HUD_BACKGROUND)
        surface.blit(background, (0, 0))

        hud_font = self._get_font(HUD_FONT_SIZE)
        for name, (position, color) in _HUD_LAYOUT.items():
            if self.hud[name]:
                surface.blit(hud_font.render(self.hud[name], True, color), position)

        pygame.draw.rect(surface, BLUE, PAUSE_BUTTON)
        pygame.draw.rect(surface, GREEN, TOWER_MENU_BUTTON)

        help_font = self._get_font(HELP_FONT_SIZE)
        surface.blit(help_font.render(HELP_TEXT, True, WHITE), (10, 550))

    def _update_enemies(self, session: Session) -> None:
        survivors = []
        for enemy in self.enemies:
            if not enemy.is_alive():
                session.add_gold(KILL_GOLD)
                session.add_score(KILL_SCORE)
            elif enemy.has_reached_end():
                session.lose_life()
            else:
                enemy.move_towards(enemy.x + 2, enemy.y)
                survivors.append(enemy)
        self.enemies = survivors

    def _update_towers(self) -> None:
        for tower in self.towers:
            tower_x, tower_y = tower.position
            for enemy in self.enemies:
                if not enemy.is_alive():
                    continue
                if math.hypot(enemy.x - tower_x, enemy.y - tower_y) <= tower.range:
                    enemy.take_damage(TOWER_DAMAGE)
                    break

    def _update_hud(self, session: Session) -> None:
        self.hud = {
            "gold": f"Or: {session.gold}",
            "lives": f"Vies: {session.lives}",
            "wave": f"Vague: {session.wave}",
            "score": f"Score: {session.score}",
        }

    def _get_font(self, size: int) -> pygame.font.Font:
        if self._font is not None:
            return self._font
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._fonts[size] = pygame.font.Font(FONT_PATH, size)
            except (OSError, pygame.error):
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]
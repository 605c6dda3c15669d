"""The battle board: a grid of tower slots below the HUD."""

from __future__ import annotations

from typing import Protocol

import pygame

from towerdefense.enemy import Enemy
from towerdefense.tower import Tower

CELL_SIZE = 50
HUD_HEIGHT = 80
PATH_ROW = 6
PATH_COLOR = (139, 69, 19)
GRASS_COLORS = ((0, 100, 0), (0, 120, 0))
OUTLINE_COLOR = (0, 0, 0, 50)


class _Scoreboard(Protocol):
    def add_gold(self, amount: int) -> None: ...

    def add_score(self, amount: int) -> None: ...

    def lose_life(self) -> None: ...


class Board:
    """A width x height grid where each cell may hold one tower."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._grid: list[Tower | None] = [None] * (width * height)

    def place_tower(self, x: int, y: int, tower: Tower) -> bool:
        """Put a tower in a free cell; return whether it was placed."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        index = y * self.width + x
        if self._grid[index] is not None:
            return False
        self._grid[index] = tower
        tower.set_position(x * CELL_SIZE + CELL_SIZE // 2, y * CELL_SIZE + CELL_SIZE // 2 + HUD_HEIGHT)
        return True

    def simulate_turn(self, enemies: list[Enemy], session: _Scoreboard) -> None:
        """Remove dead and escaped enemies, then let every tower attack.

        The enemies list is updated in place.
        """
        survivors = []
        for enemy in enemies:
            if not enemy.is_alive():
                session.add_gold(10)
                session.add_score(100)
            elif enemy.has_reached_end():
                print("Ennemi atteint la sortie!")
                session.lose_life()
            else:
                survivors.append(enemy)
        enemies[:] = survivors

        for tower in self._grid:
            if tower is not None:
                tower.attack(enemies)

    def render(self, surface: pygame.Surface) -> None:
        outline = pygame.Surface((CELL_SIZE + 2, CELL_SIZE + 2), pygame.SRCALPHA)
        pygame.draw.rect(outline, OUTLINE_COLOR, outline.get_rect(), 1)
        for y in range(self.height):
            for x in range(self.width):
                left = x * CELL_SIZE
                top = y * CELL_SIZE + HUD_HEIGHT
                color = PATH_COLOR if y == PATH_ROW else GRASS_COLORS[(x + y) % 2]
                pygame.draw.rect(surface, color, pygame.Rect(left, top, CELL_SIZE, CELL_SIZE))
                surface.blit(outline, (left - 1, top - 1))
                tower = self._grid[y * self.width + x]
                if tower is not None:
                    tower.render(surface)
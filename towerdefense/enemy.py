"""Enemies walking along a path of grid waypoints."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pygame

CELL_SIZE = 50
BODY_SIZE = 20
BODY_COLOR = (255, 0, 0)
HEALTH_BAR_COLOR = (0, 255, 0)
HEALTH_BAR_HEIGHT = 5
HEALTH_BAR_OFFSET = 10
_WAYPOINT_RADIUS_SQUARED = 25


class Enemy:
    """An enemy following grid waypoints, positioned in pixels."""

    def __init__(self, path: Iterable[tuple[int, int]], health: int) -> None:
        self.path = tuple((int(col), int(row)) for col, row in path)
        if not self.path:
            raise ValueError("an enemy needs at least one waypoint")
        self.current_waypoint = 0
        self.health = health
        start_col, start_row = self.path[0]
        self.x = start_col * CELL_SIZE
        self.y = start_row * CELL_SIZE

    @property
    def hp(self) -> int:
        return self.health

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def is_alive(self) -> bool:
        return self.health > 0

    def move_towards(self, target_x: int, target_y: int) -> None:
        """Step a tenth of the way to the target, or jump to the next waypoint when close."""
        dx = target_x - self.x
        dy = target_y - self.y
        if dx * dx + dy * dy > _WAYPOINT_RADIUS_SQUARED:
            self.x += math.trunc(dx / 10)
            self.y += math.trunc(dy / 10)
        elif self.current_waypoint < len(self.path) - 1:
            self.current_waypoint += 1
            col, row = self.path[self.current_waypoint]
            self.x = col * CELL_SIZE
            self.y = row * CELL_SIZE

    def has_reached_end(self) -> bool:
        return self.current_waypoint >= len(self.path) - 1

    def take_damage(self, damage: int) -> None:
        self.health -= damage

    def render(self, surface: pygame.Surface) -> None:
        """Draw the body and a health bar above it, if the enemy is alive."""
        if not self.is_alive():
            return
        bar_width = int(self.health * 0.5)
        if bar_width > 0:
            pygame.draw.rect(
                surface,
                HEALTH_BAR_COLOR,
                pygame.Rect(self.x, self.y - HEALTH_BAR_OFFSET, bar_width, HEALTH_BAR_HEIGHT),
            )
        pygame.draw.rect(surface, BODY_COLOR, pygame.Rect(self.x, self.y, BODY_SIZE, BODY_SIZE))
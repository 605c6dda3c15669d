"""A tile map with a straight horizontal path from a start base to an end base."""

from __future__ import annotations

from enum import Enum

import pygame

MAP_WIDTH = 20
MAP_HEIGHT = 15
TILE_SIZE = 40.0


class TileType(Enum):
    EMPTY = "empty"
    PATH = "path"
    START_BASE = "start_base"
    END_BASE = "end_base"


TILE_COLORS = {
    TileType.EMPTY: (50, 150, 50),
    TileType.PATH: (210, 180, 140),
    TileType.START_BASE: (255, 100, 100),
    TileType.END_BASE: (100, 100, 255),
}

_WALKABLE = {TileType.START_BASE, TileType.PATH, TileType.END_BASE}


class TileMap:
    """A grid of tiles and the pixel waypoints of the path across it."""

    def __init__(self, width: int = MAP_WIDTH, height: int = MAP_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.path_row = height // 2
        self._grid = [[TileType.EMPTY] * width for _ in range(height)]
        row = self._grid[self.path_row]
        for col in range(1, width - 1):
            row[col] = TileType.PATH
        row[0] = TileType.START_BASE
        row[width - 1] = TileType.END_BASE
        self.waypoints: list[tuple[float, float]] = [
            (col * TILE_SIZE + TILE_SIZE / 2.0, self.path_row * TILE_SIZE + TILE_SIZE / 2.0)
            for col, tile in enumerate(row)
            if tile in _WALKABLE
        ]

    def tile_at(self, row: int, col: int) -> TileType:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"tile ({row}, {col}) is outside the map")
        return self._grid[row][col]

    def draw(self, surface: pygame.Surface) -> None:
        size = int(TILE_SIZE)
        for row, tiles in enumerate(self._grid):
            for col, tile in enumerate(tiles):
                pygame.draw.rect(
                    surface,
                    TILE_COLORS[tile],
                    pygame.Rect(int(col * TILE_SIZE), int(row * TILE_SIZE), size, size),
                )
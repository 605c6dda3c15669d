"""Towers that damage nearby enemies, and a factory for them."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum

import pygame

from towerdefense.enemy import Enemy

TOWER_SIZE = 40
MAX_ATTACK_SPEED = 3.0


class TowerType(Enum):
    BASIC = "basic"
    SNIPER = "sniper"


class Tower:
    """A tower with a price, an attack speed, a range and a map position."""

    color: tuple[int, int, int] = (128, 128, 128)

    def __init__(self, price: int, attack_speed: float, range: float, name: str) -> None:
        self.price = price
        self.attack_speed = attack_speed
        self.range = range
        self.name = name
        self.level = 1
        self.x = -1
        self.y = -1

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def set_position(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def attack(self, enemies: Sequence[Enemy]) -> None:
        """A plain tower does not attack."""

    def upgrade(self) -> None:
        self.level += 1
        self.price += 2
        print(f"{self.name} niveau {self.level} (prix : {self.price})")

    def sell(self) -> int:
        """Announce the sale and return the refund, half the price."""
        refund = self.price // 2
        print(f"{self.name} vendue pour {refund} pièces.")
        return refund

    def accelerate(self) -> None:
        """Double the attack speed, capped at the maximum."""
        if self.attack_speed < MAX_ATTACK_SPEED:
            self.attack_speed = min(self.attack_speed * 2.0, MAX_ATTACK_SPEED)
            print(f"{self.name} accélérée à {self.attack_speed:g} attaques/sec.")
        else:
            print(f"{self.name} est déjà à la vitesse max.")

    def render(self, surface: pygame.Surface) -> None:
        if self.x >= 0 and self.y >= 0:
            half = TOWER_SIZE // 2
            pygame.draw.rect(
                surface,
                self.color,
                pygame.Rect(self.x - half, self.y - half, TOWER_SIZE, TOWER_SIZE),
            )

    def _first_target(self, enemies: Sequence[Enemy]) -> tuple[Enemy, float] | None:
        for enemy in enemies:
            distance = math.hypot(self.x - enemy.x, self.y - enemy.y)
            if distance <= self.range and enemy.is_alive():
                return enemy, distance
        return None


class BasicTower(Tower):
    color = (0, 255, 0)
    damage = 5

    def __init__(self) -> None:
        super().__init__(10, 1.0, 3.0, "Tour Basique")

    def attack(self, enemies: Sequence[Enemy]) -> None:
        target = self._first_target(enemies)
        if target is not None:
            enemy, distance = target
            enemy.take_damage(self.damage)
            print(
                f"{self.name} attaque un ennemi à distance {distance:g} "
                f"(PV restant: {enemy.hp})"
            )

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)


class SniperTower(Tower):
    color = (0, 0, 255)
    damage = 10

    def __init__(self) -> None:
        super().__init__(20, 0.5, 8.0, "Tour Sniper")

    def attack(self, enemies: Sequence[Enemy]) -> None:
        target = self._first_target(enemies)
        if target is not None:
            enemy, _ = target
            enemy.take_damage(self.damage)
            print(f"{self.name} tire avec précision sur un ennemi (PV: {enemy.hp})")

    def render(self, surface: pygame.Surface) -> None:
        super().render(surface)


def create_tower(tower_type: TowerType) -> Tower:
    """Build a tower of the given type."""
    if tower_type is TowerType.BASIC:
        return BasicTower()
    if tower_type is TowerType.SNIPER:
        return SniperTower()
    raise ValueError(f"unknown tower type: {tower_type!r}")
"""A text-only tower defense simulation over five waves."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

LAST_WAVE = 5
STARTING_LIVES = 10
POINTS_PER_ENEMY = 10
ENEMIES_PER_WAVE = 2
FIRST_RISKY_WAVE = 3


class _Random(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class ConsoleResult:
    score: int
    lives: int
    waves: int

    @property
    def victory(self) -> bool:
        return self.lives > 0


def run_console_game(rng: _Random | None = None, out: TextIO | None = None) -> ConsoleResult:
    """Play the waves, writing a report to out, and return the outcome."""
    rng = rng or random.Random()
    out = out or sys.stdout
    wave = 1
    score = 0
    lives = STARTING_LIVES

    while wave <= LAST_WAVE and lives > 0:
        print(f"\n🌊 VAGUE {wave}", file=out)
        print(f"Vies restantes: {lives}", file=out)
        print(f"Score actuel: {score}", file=out)
        for enemy in range(1, wave * ENEMIES_PER_WAVE + 1):
            print(f"  📍 Ennemi {enemy} détruit!", file=out)
            score += POINTS_PER_ENEMY
        if wave >= FIRST_RISKY_WAVE and rng.randrange(3) == 0:
            lives -= 1
            print("  💥 Un ennemi a passé les défenses! (-1 vie)", file=out)
        wave += 1

    print("\n🏆 RÉSULTATS FINAUX:", file=out)
    if lives > 0:
        print("✅ VICTOIRE! Toutes les vagues repoussées!", file=out)
    else:
        print("💀 DÉFAITE! La base a été détruite...", file=out)
    print(f"Score final: {score}", file=out)
    return ConsoleResult(score=score, lives=lives, waves=wave - 1)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the console tower defense simulation.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random outcomes")
    args = parser.parse_args(argv)

    print("🎮 Version Tower Defense basique - v1.0")
    print("=================================")
    print("Démarrage de la simulation...")
    result = run_console_game(random.Random(args.seed))
    print(f"Vies restantes: {result.lives}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
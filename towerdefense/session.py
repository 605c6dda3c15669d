"""Player progress for one game: gold, lives, score, wave, volume and sounds."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from towerdefense.resources import ResourceError, ResourceManager

STARTING_GOLD = 100
STARTING_LIVES = 10
STARTING_SCORE = 0
STARTING_WAVE = 1
DEFAULT_VOLUME = 50.0
MIN_VOLUME = 0.0
MAX_VOLUME = 100.0

AMBIANCE = "ambiance"
CLICK = "click"
VICTORY = "victory"
DEFEAT = "defeat"
SOUND_NAMES = (AMBIANCE, CLICK, VICTORY, DEFEAT)


class _Sound(Protocol):
    def play(self, *args: Any, **kwargs: Any) -> Any: ...

    def set_volume(self, value: float) -> None: ...


class Session:
    """The running totals of a game and the sounds that go with it."""

    def __init__(self, sounds: Mapping[str, _Sound] | None = None) -> None:
        self.gold = STARTING_GOLD
        self.lives = STARTING_LIVES
        self.score = STARTING_SCORE
        self.wave = STARTING_WAVE
        self._volume = DEFAULT_VOLUME
        self._sounds: dict[str, _Sound] = dict(sounds or {})
        for sound in self._sounds.values():
            self._apply_volume(sound)

    @classmethod
    def from_resources(
        cls, resources: ResourceManager, directory: str | Path = "assets"
    ) -> Session:
        """Load the game's sounds from a directory; missing ones stay silent."""
        sounds: dict[str, _Sound] = {}
        failed = False
        for name in SOUND_NAMES:
            path = str(Path(directory) / f"{name}.wav")
            try:
                sounds[name] = resources.get_sound(path)
            except ResourceError:
                failed = True
        if failed:
            print("Erreur chargement des sons.", file=sys.stderr)
        return cls(sounds)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, float(value)))
        ambiance = self._sounds.get(AMBIANCE)
        if ambiance is not None:
            self._apply_volume(ambiance)

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def spend_gold(self, amount: int) -> None:
        """Take gold away, never going below zero."""
        self.gold = max(0, self.gold - amount)

    def lose_life(self) -> None:
        self.lives -= 1

    def add_score(self, amount: int) -> None:
        self.score += amount

    def next_wave(self) -> None:
        self.wave += 1

    def play_click(self) -> None:
        self._play(CLICK)

    def play_victory(self) -> None:
        self._play(VICTORY)

    def play_defeat(self) -> None:
        self._play(DEFEAT)

    def play_ambiance(self) -> None:
        """Start the ambiance sound, looping forever."""
        self._play(AMBIANCE, loops=-1)

    def _play(self, name: str, **kwargs: Any) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play(**kwargs)

    def _apply_volume(self, sound: _Sound) -> None:
        sound.set_volume(self._volume / MAX_VOLUME)
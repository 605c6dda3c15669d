"""The game window and the loop that drives the current screen."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import Any

import pygame

from towerdefense.resources import ResourceManager
from towerdefense.session import Session
from towerdefense.states import StartState

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Tower Defense"
BACKGROUND = (0, 0, 0)
FPS = 60

EventSource = Callable[[], Iterable[pygame.event.Event]]


class App:
    """Owns the drawing surface, the session and the current screen."""

    def __init__(
        self,
        surface: pygame.Surface | None = None,
        session: Session | None = None,
        *,
        state: Any = None,
        events: EventSource | None = None,
        size: tuple[int, int] = WINDOW_SIZE,
        title: str = WINDOW_TITLE,
    ) -> None:
        self._owns_display = surface is None
        if surface is None:
            pygame.display.init()
            surface = pygame.display.set_mode(size)
            pygame.display.set_caption(title)
        self.surface = surface
        self.session = session if session is not None else Session.from_resources(ResourceManager())
        self.mouse_pos = (0, 0)
        self.is_open = True
        self._events = events if events is not None else pygame.event.get
        self._clock = pygame.time.Clock()
        self.session.play_ambiance()
        self.state = state if state is not None else StartState()

    def change_state(self, state: Any) -> None:
        self.state = state

    def close(self) -> None:
        self.is_open = False

    def run(self, max_frames: int | None = None) -> int:
        """Run frames until closed or max_frames is reached; return the frame count."""
        frames = 0
        while self.is_open and (max_frames is None or frames < max_frames):
            for event in self._events():
                if event.type == pygame.QUIT:
                    self.close()
                pos = getattr(event, "pos", None)
                if pos is not None:
                    self.mouse_pos = (int(pos[0]), int(pos[1]))
                if self.state is not None:
                    self.state.handle_event(event, self)
            if self.state is not None:
                self.state.update(self)
            self.surface.fill(BACKGROUND)
            if self.state is not None:
                self.state.draw(self.surface)
            if self._owns_display:
                pygame.display.flip()
                self._clock.tick(FPS)
            frames += 1
        return frames


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play the tower defense game.")
    parser.add_argument(
        "--max-frames", type=int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)
    pygame.init()
    try:
        App().run(args.max_frames)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
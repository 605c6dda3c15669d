"""A small tower defense game: pygame screens, game logic and a console simulation."""

__version__ = "1.0.0"
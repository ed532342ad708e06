"""Project-wide constants for :mod:`monty_hall`."""

from __future__ import annotations

# Door positions are 1-based, matching how the game is described on the show.
DOORS: tuple[int, int, int] = (1, 2, 3)

DEFAULT_N_GAMES: int = 100
DEFAULT_DECIMALS: int = 2

LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

"""Domain data model for the Monty Hall simulator.

This module is intentionally *pure*: it defines the enums and dataclasses used
throughout the project, with no randomness and no aggregation.

- round logic lives in :mod:`monty_hall.game`
- repeated play and summaries live in :mod:`monty_hall.simulate`
- config file parsing lives in :mod:`monty_hall.io`
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from monty_hall.constants import DEFAULT_DECIMALS, DEFAULT_N_GAMES, DOORS


class DoorContent(str, Enum):
    """What sits behind a door."""

    GOAT = "goat"
    CAR = "car"


class Strategy(str, Enum):
    """The contestant's decision after the host opens a goat door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"


def is_integer(value: object) -> bool:
    """True for Python and numpy integers; bools are not counted as integers."""

    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


def validate_door(door: int, *, name: str = "door") -> int:
    """Return ``door`` unchanged if it is a valid door position, else raise."""

    # bool is an int subclass; True/False are never door numbers.
    if isinstance(door, bool) or door not in DOORS:
        raise ValueError(f"{name} must be one of {DOORS}, got {door!r}")
    return door


@dataclass(frozen=True, slots=True)
class Game:
    """One game setup: the contents of doors 1..3.

    Doors are addressed by position, so ``game[1]`` is the first door.
    """

    doors: tuple[DoorContent, ...]

    def __post_init__(self) -> None:
        if len(self.doors) != len(DOORS):
            raise ValueError(f"Game must have exactly {len(DOORS)} doors, got {len(self.doors)}")
        if any(not isinstance(d, DoorContent) for d in self.doors):
            raise ValueError("Game.doors must contain DoorContent values")
        n_cars = sum(1 for d in self.doors if d is DoorContent.CAR)
        if n_cars != 1:
            raise ValueError(f"Game must have exactly one car, got {n_cars}")

    @classmethod
    def from_labels(cls, labels: tuple[str, ...] | list[str]) -> "Game":
        """Build a game from plain labels such as ``["goat", "car", "goat"]``."""

        try:
            return cls(doors=tuple(DoorContent(str(label).strip().lower()) for label in labels))
        except ValueError as e:
            raise ValueError(f"Invalid game labels: {labels!r}") from e

    def __getitem__(self, door: int) -> DoorContent:
        return self.content(door)

    def content(self, door: int) -> DoorContent:
        validate_door(door)
        return self.doors[door - 1]

    @property
    def car_door(self) -> int:
        return self.doors.index(DoorContent.CAR) + 1

    @property
    def goat_doors(self) -> tuple[int, ...]:
        return tuple(door for door in DOORS if self.doors[door - 1] is DoorContent.GOAT)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(d.value for d in self.doors)


@dataclass(frozen=True, slots=True)
class RoundResult:
    """The outcome one strategy achieved in a single round."""

    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Settings for a batch of simulated games."""

    n_games: int = DEFAULT_N_GAMES
    seed: Optional[int] = None
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        if not is_integer(self.n_games):
            raise ValueError("SimulationConfig.n_games must be an integer")
        if self.n_games < 1:
            raise ValueError("SimulationConfig.n_games must be >= 1")
        if self.seed is not None and not is_integer(self.seed):
            raise ValueError("SimulationConfig.seed must be an integer or None")
        if self.seed is not None and self.seed < 0:
            raise ValueError("SimulationConfig.seed must be >= 0")
        if not is_integer(self.decimals) or self.decimals < 0:
            raise ValueError("SimulationConfig.decimals must be an integer >= 0")

        # Fields are always plain ints, even when built from numpy scalars.
        object.__setattr__(self, "n_games", int(self.n_games))
        object.__setattr__(self, "decimals", int(self.decimals))
        if self.seed is not None:
            object.__setattr__(self, "seed", int(self.seed))

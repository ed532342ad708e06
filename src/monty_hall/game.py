"""A single round of the Monty Hall game.

The round is a short pipeline of small functions:

1. :func:`create_game` hides a car and two goats behind doors 1..3
2. :func:`select_door` makes the contestant's uninformed first pick
3. :func:`open_goat_door` has the host reveal a goat the contestant didn't pick
4. :func:`change_door` applies the stay/switch decision
5. :func:`determine_winner` checks the final pick against the car

:func:`play_game` wires them together and evaluates both strategies against
the same game and the same opened door.

Randomness
----------
Every random step takes an optional ``rng`` (a :class:`numpy.random.Generator`).
When it is omitted the module-level default generator is used; call
:func:`seed` to make that default reproducible.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from monty_hall.constants import DOORS
from monty_hall.data import DoorContent, Game, Outcome, RoundResult, Strategy, validate_door

logger = logging.getLogger(__name__)

_LAYOUT: tuple[DoorContent, ...] = (DoorContent.GOAT, DoorContent.GOAT, DoorContent.CAR)

_default_rng: np.random.Generator = np.random.default_rng()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a new generator; ``seed=None`` draws fresh OS entropy."""

    return np.random.default_rng(seed)


def seed(value: Optional[int]) -> None:
    """Reseed the default generator used when no ``rng`` is passed."""

    global _default_rng
    _default_rng = make_rng(value)


def _resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return _default_rng if rng is None else rng


def create_game(*, rng: Optional[np.random.Generator] = None) -> Game:
    """Shuffle two goats and one car behind the three doors."""

    order = _resolve_rng(rng).permutation(len(_LAYOUT))
    return Game(doors=tuple(_LAYOUT[int(i)] for i in order))


def select_door(*, rng: Optional[np.random.Generator] = None) -> int:
    """Pick a door uniformly at random, without looking at the game."""

    return int(_resolve_rng(rng).choice(DOORS))


def open_goat_door(game: Game, first_pick: int, *, rng: Optional[np.random.Generator] = None) -> int:
    """Return the door the host opens.

    The host never opens the contestant's door and never reveals the car:

    - first pick is the car: both other doors hide goats, so pick one at random
    - first pick is a goat: exactly one other goat remains, so open that one

    This asymmetry is what makes switching win two thirds of the time.
    """

    validate_door(first_pick, name="first_pick")

    if game[first_pick] is DoorContent.CAR:
        return int(_resolve_rng(rng).choice(game.goat_doors))

    (opened,) = [d for d in game.goat_doors if d != first_pick]
    return opened


def change_door(opened_door: int, first_pick: int, *, stay: bool = True) -> int:
    """Return the contestant's final pick.

    Staying keeps ``first_pick``. Switching moves to the one door that is
    neither the first pick nor the opened door.

    Raises
    ------
    ValueError
        If either door is not 1, 2 or 3, or if ``opened_door`` equals
        ``first_pick``. The host never opens the contestant's door, so that
        pair is rejected for both strategies, including ``stay=True``.
    """

    validate_door(opened_door, name="opened_door")
    validate_door(first_pick, name="first_pick")
    if opened_door == first_pick:
        raise ValueError(f"opened_door and first_pick must differ, both are {first_pick}")

    if stay:
        return first_pick

    (final_pick,) = set(DOORS) - {opened_door, first_pick}
    return final_pick


def final_pick_for(strategy: Strategy, opened_door: int, first_pick: int) -> int:
    """:func:`change_door` keyed by :class:`~monty_hall.data.Strategy` instead of a flag."""

    return change_door(opened_door, first_pick, stay=Strategy(strategy) is Strategy.STAY)


def determine_winner(final_pick: int, game: Game) -> Outcome:
    """WIN if the car is behind ``final_pick``, otherwise LOSE."""

    return Outcome.WIN if game[final_pick] is DoorContent.CAR else Outcome.LOSE


def play_game(*, rng: Optional[np.random.Generator] = None) -> tuple[RoundResult, RoundResult]:
    """Play one full round and report how each strategy would have done.

    Both strategies are scored against the same game and opened door, so the
    two results are paired rather than independent draws. Stay comes first.
    """

    rng = _resolve_rng(rng)

    game = create_game(rng=rng)
    first_pick = select_door(rng=rng)
    opened_door = open_goat_door(game, first_pick, rng=rng)

    results = tuple(
        RoundResult(
            strategy=strategy,
            outcome=determine_winner(final_pick_for(strategy, opened_door, first_pick), game),
        )
        for strategy in (Strategy.STAY, Strategy.SWITCH)
    )

    logger.debug(
        "game=%s first_pick=%d opened=%d stay=%s switch=%s",
        "/".join(game.labels),
        first_pick,
        opened_door,
        results[0].outcome.value,
        results[1].outcome.value,
    )
    return results[0], results[1]

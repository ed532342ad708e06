from __future__ import annotations

import numpy as np
import pytest

from monty_hall.data import DoorContent, Game, Outcome, SimulationConfig, Strategy

G = DoorContent.GOAT
C = DoorContent.CAR


def test_game_indexes_doors_from_one() -> None:
    game = Game(doors=(G, C, G))
    assert game[1] is G
    assert game[2] is C
    assert game[3] is G
    assert game.car_door == 2
    assert game.goat_doors == (1, 3)


@pytest.mark.parametrize("door", [0, 4, -1, True, "1"])
def test_game_rejects_invalid_door(door) -> None:
    game = Game(doors=(C, G, G))
    with pytest.raises(ValueError, match="door must be one of"):
        game[door]


def test_game_requires_exactly_one_car() -> None:
    with pytest.raises(ValueError, match="exactly one car"):
        Game(doors=(C, C, G))
    with pytest.raises(ValueError, match="exactly one car"):
        Game(doors=(G, G, G))


def test_game_requires_three_doors() -> None:
    with pytest.raises(ValueError, match="exactly 3 doors"):
        Game(doors=(C, G))


def test_game_from_labels() -> None:
    game = Game.from_labels(["goat", "Car", "goat"])
    assert game.doors == (G, C, G)
    assert game.labels == ("goat", "car", "goat")

    with pytest.raises(ValueError, match="Invalid game labels"):
        Game.from_labels(["goat", "cat", "goat"])


def test_game_is_immutable() -> None:
    game = Game(doors=(G, G, C))
    with pytest.raises(AttributeError):
        game.doors = (C, G, G)  # type: ignore[misc]


def test_enum_values_match_table_labels() -> None:
    assert [s.value for s in Strategy] == ["stay", "switch"]
    assert [o.value for o in Outcome] == ["WIN", "LOSE"]


def test_simulation_config_defaults() -> None:
    config = SimulationConfig()
    assert config.n_games == 100
    assert config.seed is None
    assert config.decimals == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_games": 0},
        {"n_games": -5},
        {"n_games": True},
        {"n_games": 1.5},
        {"seed": -1},
        {"seed": "42"},
        {"decimals": -1},
    ],
)
def test_simulation_config_rejects_bad_values(kwargs) -> None:
    with pytest.raises(ValueError):
        SimulationConfig(**kwargs)


def test_simulation_config_accepts_numpy_integers() -> None:
    config = SimulationConfig(n_games=np.int64(10), seed=np.int64(3), decimals=np.int32(1))
    assert config == SimulationConfig(n_games=10, seed=3, decimals=1)
    assert type(config.n_games) is int
    assert type(config.seed) is int
    assert type(config.decimals) is int


def test_simulation_config_rejects_numpy_bool() -> None:
    with pytest.raises(ValueError, match="n_games must be an integer"):
        SimulationConfig(n_games=np.bool_(True))

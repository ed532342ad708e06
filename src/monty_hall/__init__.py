"""Monty Hall problem simulator.

Plays the three-door game many times to estimate how often staying and
switching win.
"""

from .data import DoorContent, Game, Outcome, RoundResult, SimulationConfig, Strategy
from .game import (
    change_door,
    create_game,
    determine_winner,
    make_rng,
    open_goat_door,
    play_game,
    seed,
    select_door,
)
from .simulate import play_n_games, summarise_results, win_rates

__all__ = [
    "DoorContent",
    "Game",
    "Outcome",
    "RoundResult",
    "SimulationConfig",
    "Strategy",
    "create_game",
    "select_door",
    "open_goat_door",
    "change_door",
    "determine_winner",
    "play_game",
    "play_n_games",
    "summarise_results",
    "win_rates",
    "make_rng",
    "seed",
]

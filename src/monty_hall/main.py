from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict

import pandas as pd

from monty_hall.constants import LOG_FORMAT
from monty_hall.data import SimulationConfig, Strategy
from monty_hall.game import make_rng
from monty_hall.simulate import play_n_games, summarise_results, win_rates


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger that writes to stderr.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SimulationResult:
    config: SimulationConfig
    results: pd.DataFrame
    summary: pd.DataFrame
    win_rates: Dict[Strategy, float]


def run_simulation(config: SimulationConfig | None = None, *, show: bool = True) -> SimulationResult:
    """Run a configured batch of games.

    A fresh generator is built from ``config.seed`` so that a seeded config
    always reproduces the same results, independent of the module default.
    """

    config = config or SimulationConfig()
    logger.info("Running simulation: n_games=%d seed=%s", config.n_games, config.seed)

    rng = make_rng(config.seed)
    results = play_n_games(config.n_games, rng=rng, decimals=config.decimals, show=show)

    rates = win_rates(results)
    for strategy, rate in rates.items():
        logger.info("  %s win rate=%.4f", strategy.value, rate)

    return SimulationResult(
        config=config,
        results=results,
        summary=summarise_results(results, decimals=config.decimals),
        win_rates=rates,
    )

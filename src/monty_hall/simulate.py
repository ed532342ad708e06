"""Monte Carlo estimate of the stay/switch win rates.

:func:`play_n_games` repeats :func:`monty_hall.game.play_game` and returns the
raw per-round results as a :class:`pandas.DataFrame` with one row per
(round, strategy). :func:`summarise_results` turns those rows into the 2x2
strategy x outcome proportion table.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd

from monty_hall.constants import DEFAULT_DECIMALS, DEFAULT_N_GAMES
from monty_hall.data import Outcome, RoundResult, Strategy, is_integer
from monty_hall.game import play_game

logger = logging.getLogger(__name__)

RESULT_COLUMNS: tuple[str, str] = ("strategy", "outcome")


def _validate_n(n: int) -> int:
    if not is_integer(n):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return int(n)


def results_to_frame(rounds: Iterable[Iterable[RoundResult]]) -> pd.DataFrame:
    """Flatten per-round result pairs into a ``strategy``/``outcome`` frame."""

    rows = [
        {"strategy": r.strategy.value, "outcome": r.outcome.value}
        for round_results in rounds
        for r in round_results
    ]
    return pd.DataFrame(rows, columns=list(RESULT_COLUMNS))


def _count_table(results: pd.DataFrame) -> pd.DataFrame:
    index = pd.Index([s.value for s in Strategy], name="strategy")
    columns = pd.Index([o.value for o in Outcome], name="outcome")

    missing = set(RESULT_COLUMNS) - set(results.columns)
    if missing:
        raise ValueError(f"results is missing columns: {sorted(missing)}")

    for column, known in (("strategy", index), ("outcome", columns)):
        unknown = sorted(map(str, set(results[column]) - set(known)))
        if unknown:
            raise ValueError(f"results column {column!r} has unknown labels: {unknown}")

    if results.empty:
        return pd.DataFrame(0, index=index, columns=columns)

    counts = pd.crosstab(results["strategy"], results["outcome"])
    counts = counts.reindex(index=index, columns=columns, fill_value=0)
    counts.index = index
    counts.columns = columns
    return counts


def summarise_results(results: pd.DataFrame, *, decimals: Optional[int] = DEFAULT_DECIMALS) -> pd.DataFrame:
    """Row-normalised outcome proportions per strategy.

    All four cells are always present. A strategy/outcome pair that never
    occurred shows ``0.0``; a strategy with no rows at all shows ``0.0`` for
    both outcomes. Pass ``decimals=None`` to skip rounding.

    Raises
    ------
    ValueError
        If a column is missing or holds a label that is not a known
        strategy or outcome.
    """

    counts = _count_table(results)
    totals = counts.sum(axis=1)
    proportions = counts.div(totals.where(totals > 0), axis=0).fillna(0.0).astype(float)
    if decimals is None:
        return proportions
    return proportions.round(decimals)


def win_rates(results: pd.DataFrame) -> Dict[Strategy, float]:
    """Unrounded WIN proportion for each strategy."""

    proportions = summarise_results(results, decimals=None)
    return {s: float(proportions.loc[s.value, Outcome.WIN.value]) for s in Strategy}


def play_n_games(
    n: int = DEFAULT_N_GAMES,
    *,
    rng: Optional[np.random.Generator] = None,
    decimals: int = DEFAULT_DECIMALS,
    show: bool = True,
) -> pd.DataFrame:
    """Play ``n`` rounds and return every (strategy, outcome) row.

    The rounded proportion table is printed to stdout (unless ``show`` is
    false) and logged at INFO.

    Raises
    ------
    TypeError
        If ``n`` is not an integer.
    ValueError
        If ``n`` is less than 1.
    """

    n = _validate_n(n)
    logger.info("Simulating %d games", n)

    results = results_to_frame(play_game(rng=rng) for _ in range(n))

    table = summarise_results(results, decimals=decimals)
    logger.info("Outcome proportions by strategy (n=%d):\n%s", n, table.to_string())
    if show:
        print(table)

    return results

"""Config file loading for the simulator.

Keeps file format knowledge (JSON) out of :mod:`monty_hall.data`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from monty_hall.data import SimulationConfig

_CONFIG_KEYS: frozenset[str] = frozenset({"n_games", "seed", "decimals"})


def _as_int(raw: Mapping[str, Any], key: str) -> int:
    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        as_float = float(value)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {value!r}") from e
    if not as_float.is_integer():
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return int(as_float)


def parse_simulation_config(raw: Mapping[str, Any]) -> SimulationConfig:
    """Build a :class:`~monty_hall.data.SimulationConfig` from a JSON-like mapping.

    Every key is optional; missing keys fall back to the dataclass defaults.
    """

    if not isinstance(raw, Mapping):
        raise ValueError("simulation config must be a JSON object")

    unknown = sorted(set(raw) - _CONFIG_KEYS)
    if unknown:
        raise ValueError(f"Unknown simulation config key(s): {unknown}")

    kwargs: dict[str, Any] = {}
    if "n_games" in raw:
        kwargs["n_games"] = _as_int(raw, "n_games")
    if "decimals" in raw:
        kwargs["decimals"] = _as_int(raw, "decimals")
    if raw.get("seed") is not None:
        kwargs["seed"] = _as_int(raw, "seed")

    return SimulationConfig(**kwargs)


def load_simulation_config_from_json(path: str | Path) -> SimulationConfig:
    """Load a :class:`~monty_hall.data.SimulationConfig` from JSON.

    Expected format (all keys optional):
        {"n_games": 10000, "seed": 42, "decimals": 2}
    """

    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8-sig"))
    return parse_simulation_config(raw)

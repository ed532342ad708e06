from __future__ import annotations

from pathlib import Path

from monty_hall.data import SimulationConfig
from monty_hall.io import load_simulation_config_from_json
from monty_hall.main import configure_logging, run_simulation

REPO_ROOT = Path(__file__).resolve().parent


def main(config_path: Path | None = None) -> None:
    configure_logging()

    # Optional simulation settings, e.g.
    #   {"n_games": 10000, "seed": 42, "decimals": 2}
    config_path = config_path or (REPO_ROOT / "data" / "simulation.json")
    config = load_simulation_config_from_json(config_path) if config_path.exists() else SimulationConfig()

    result = run_simulation(config)

    print()
    for strategy, rate in result.win_rates.items():
        print(f"{strategy.value:>6s}: won {rate:.1%} of {config.n_games} games")


if __name__ == "__main__":
    main()

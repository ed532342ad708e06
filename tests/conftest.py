from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


# Ensure repo root is importable (for run.py).
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240501)

from __future__ import annotations

import os
import random

import pytest

from lightcycle.core.models import LayoutConfig


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def open_layout() -> LayoutConfig:
    # Zero spacing with unit corridors opens every cell of a 5x5 grid.
    return LayoutConfig(icon_rows=4, icon_cols=4)


@pytest.fixture
def corridor_layout() -> LayoutConfig:
    return LayoutConfig(icon_rows=2, icon_cols=3, row_spacing=2, col_spacing=2)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in list(os.environ):
        if key.startswith("LIGHTCYCLE_") or key in {"LOG_LEVEL", "LOG_FORMAT"}:
            monkeypatch.delenv(key, raising=False)
    return monkeypatch

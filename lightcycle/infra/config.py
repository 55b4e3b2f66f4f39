"""Application configuration and env loading."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from lightcycle.core.models import (
    CORRIDOR_WIDTH,
    DEFAULT_RANDOMNESS_DIVISOR,
    LayoutConfig,
    Padding,
)
from lightcycle.infra.widget_codec import decode_widget_locations

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILES: tuple[str, ...] = (".env.lightcycle", ".env.lightcycle.local")

# Status bar and app drawer heights at mdpi.
DEFAULT_PADDING_TOP = 24
DEFAULT_PADDING_BOTTOM = 50


@dataclass(frozen=True, slots=True)
class DriverSettings:
    """Pacing and input settings owned by the host, not the simulation."""

    fps: int = 10
    user_control: bool = True
    show_walls: bool = True
    double_tap_ms: int = 100
    seed: int | None = None


def load_env_file(path: str = ".env.lightcycle", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load the shared env file, then its local override."""
    for path in tuple(paths) if paths is not None else DEFAULT_ENV_FILES:
        load_env_file(path, override_existing=override_existing)


def load_layout_config() -> LayoutConfig:
    """Build the board layout from LIGHTCYCLE_* env vars."""
    widgets_raw = os.getenv("LIGHTCYCLE_WIDGET_LOCATIONS", "")
    try:
        regions = decode_widget_locations(widgets_raw)
    except ValueError:
        logger.warning("widget_locations_ignored value=%r", widgets_raw)
        regions = ()
    return LayoutConfig(
        icon_rows=_int("LIGHTCYCLE_ICON_ROWS", 4),
        icon_cols=_int("LIGHTCYCLE_ICON_COLS", 4),
        row_spacing=max(0, _int("LIGHTCYCLE_ROW_SPACING", 2)),
        col_spacing=max(0, _int("LIGHTCYCLE_COL_SPACING", 2)),
        padding=Padding(
            left=max(0, _int("LIGHTCYCLE_PADDING_LEFT", 0)),
            top=max(0, _int("LIGHTCYCLE_PADDING_TOP", DEFAULT_PADDING_TOP)),
            right=max(0, _int("LIGHTCYCLE_PADDING_RIGHT", 0)),
            bottom=max(0, _int("LIGHTCYCLE_PADDING_BOTTOM", DEFAULT_PADDING_BOTTOM)),
        ),
        excluded_regions=regions,
        randomness_divisor=max(1, _int("LIGHTCYCLE_RANDOMNESS", DEFAULT_RANDOMNESS_DIVISOR)),
        corridor_width=max(1, _int("LIGHTCYCLE_CORRIDOR_WIDTH", CORRIDOR_WIDTH)),
    )


def load_driver_settings() -> DriverSettings:
    """Build host pacing/input settings from LIGHTCYCLE_* env vars."""
    seed_raw = os.getenv("LIGHTCYCLE_SEED", "").strip()
    seed: int | None
    try:
        seed = int(seed_raw) if seed_raw else None
    except ValueError:
        seed = None
    return DriverSettings(
        fps=max(1, _int("LIGHTCYCLE_FPS", 10)),
        user_control=_flag("LIGHTCYCLE_USER_CONTROL", True),
        show_walls=_flag("LIGHTCYCLE_SHOW_WALLS", True),
        double_tap_ms=max(0, _int("LIGHTCYCLE_DOUBLE_TAP_MS", 100)),
        seed=seed,
    )


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, frozen exe dir, then project root."""
    candidate = Path(path)
    if candidate.exists():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate

    # Fallback for IDE run configs with different working directory.
    project_root = Path(__file__).resolve().parents[2]
    return project_root / path

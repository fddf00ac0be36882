from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

_H_SPACING_ENV = "TREE_LAYOUT_H_SPACING"
_V_SPACING_ENV = "TREE_LAYOUT_V_SPACING"
_SPOUSE_GAP_ENV = "TREE_LAYOUT_SPOUSE_GAP"
_RESERVE_MARGIN_ENV = "TREE_LAYOUT_RESERVE_MARGIN"
_LOG_LEVEL_ENV = "TREE_LOG_LEVEL"


@dataclass(frozen=True)
class LayoutConfig:
    """Spacing units for the family tree layout.

    - h_spacing: horizontal unit between leaf slots
    - v_spacing: vertical distance between generation rows
    - spouse_gap: offset of each spouse from the union center
    - reserve_margin: minimum room kept right of a union's center
    """

    h_spacing: float = 150
    v_spacing: float = 150
    spouse_gap: float = 60
    reserve_margin: Optional[float] = None

    @property
    def effective_reserve_margin(self) -> float:
        if self.reserve_margin is not None:
            return self.reserve_margin
        return self.spouse_gap + self.h_spacing / 2


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise RuntimeError(f"{name} must be a positive finite number, got {raw!r}")
    return value


def load_layout_config() -> LayoutConfig:
    """Build a LayoutConfig from ``TREE_LAYOUT_*`` environment overrides."""
    defaults = LayoutConfig()
    h = _env_float(_H_SPACING_ENV)
    v = _env_float(_V_SPACING_ENV)
    gap = _env_float(_SPOUSE_GAP_ENV)
    return LayoutConfig(
        h_spacing=defaults.h_spacing if h is None else h,
        v_spacing=defaults.v_spacing if v is None else v,
        spouse_gap=defaults.spouse_gap if gap is None else gap,
        reserve_margin=_env_float(_RESERVE_MARGIN_ENV),
    )


def load_log_level() -> int:
    """Return the ``TREE_LOG_LEVEL`` logging level (default INFO)."""
    raw = (os.environ.get(_LOG_LEVEL_ENV) or "").strip()
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise RuntimeError(f"{_LOG_LEVEL_ENV} must be a logging level name, got {raw!r}")
    return level

"""Runtime settings resolved from the environment."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from kmon.core.registry import DEFAULT_SYSFS_ROOT

DEFAULT_REFRESH_S = 1.0
MIN_REFRESH_S = 0.1
LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    sysfs_root: str = DEFAULT_SYSFS_ROOT
    refresh_s: float = DEFAULT_REFRESH_S


def _clamp_refresh(refresh: float) -> float:
    if not math.isfinite(refresh):
        LOGGER.warning("Ignoring non-finite refresh interval %r", refresh)
        return DEFAULT_REFRESH_S
    return max(MIN_REFRESH_S, refresh)


def _parse_refresh(value: str | None) -> float:
    if value is None or not value.strip():
        return DEFAULT_REFRESH_S
    try:
        refresh = float(value)
    except ValueError:
        LOGGER.warning("Ignoring invalid KMON_REFRESH_S=%r", value)
        return DEFAULT_REFRESH_S
    return _clamp_refresh(refresh)


def load_settings(
    *,
    sysfs_root: str | None = None,
    refresh_s: float | None = None,
) -> Settings:
    """Resolve settings, letting explicit arguments win over the environment."""
    root = sysfs_root or os.environ.get("KMON_SYSFS_ROOT") or DEFAULT_SYSFS_ROOT
    if refresh_s is None:
        refresh = _parse_refresh(os.environ.get("KMON_REFRESH_S"))
    else:
        refresh = _clamp_refresh(refresh_s)
    return Settings(sysfs_root=root, refresh_s=refresh)

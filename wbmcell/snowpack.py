"""Degree-day snow pack accumulation and melt for a single cell.

Depths are in mm per time step and temperatures in degC.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MELT_THRESHOLD = 1.0
DEFAULT_FALL_THRESHOLD = -1.0


@dataclass(frozen=True)
class SnowPackStep:
    """Snow fall, melt, updated pack and pack change for one time step."""

    snow_fall: float
    snow_melt: float
    snow_pack: float
    change: float


def snow_pack_change(
    air_temp: float,
    precip: float,
    snow_pack: float,
    melt_threshold: float = DEFAULT_MELT_THRESHOLD,
    fall_threshold: float = DEFAULT_FALL_THRESHOLD,
) -> SnowPackStep:
    """Advance the snow pack by one step.

    Below ``fall_threshold`` all precipitation falls as snow; above
    ``melt_threshold`` the pack melts, at most down to zero; in between
    nothing changes.
    """
    if air_temp < fall_threshold:
        return SnowPackStep(precip, 0.0, snow_pack + precip, precip)
    if air_temp > melt_threshold:
        melt = 2.63 + 2.55 * air_temp + 0.0912 * air_temp * precip
        melt = min(melt, snow_pack)
        return SnowPackStep(0.0, melt, snow_pack - melt, -melt)
    return SnowPackStep(0.0, 0.0, snow_pack, 0.0)
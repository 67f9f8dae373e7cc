"""Precipitation downscaling and the spreading of monthly totals over days.

Precipitation depths are in mm per time step.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_WET_DAYS = 31
"""Number of wet days assumed when none is known."""


def downscale_precipitation(daily: float, monthly: float, reference: float) -> float:
    """Scale a daily value by the ratio of reference to monthly precipitation.

    Returns zero unless both the monthly and reference values are positive.
    """
    if monthly > 0.0 and reference > 0.0:
        return daily * reference / monthly
    return 0.0


def fraction_precipitation(
    monthly: float, fraction: Optional[float], month_length: int
) -> float:
    """Daily precipitation as a fraction of the monthly total.

    ``monthly`` is the mean daily rate of the month, so the monthly total is
    ``monthly * month_length``. A missing ``fraction`` spreads it evenly.
    """
    if month_length <= 0:
        raise ValueError(f"month length must be positive, got {month_length}")
    frac = 1.0 / month_length if fraction is None else fraction
    precip = frac * monthly * month_length
    if precip < 0.0:
        logger.warning(
            "negative precipitation %f from monthly %f and fraction %f",
            precip,
            monthly,
            frac,
        )
    return precip


def is_event(n_steps: int, n_events: int, step: int) -> bool:
    """Whether ``step`` is one of ``n_events`` events spread evenly over ``n_steps``.

    When more than half of the steps are events, the complementary dry steps
    are spread evenly instead.
    """
    if n_steps < 0 or n_events < 0:
        raise ValueError("step and event counts must not be negative")
    if n_steps == n_events:
        return True
    inverted = False
    if n_events > n_steps // 2:
        n_events = n_steps - n_events
        inverted = True
    if n_events == 0:
        return inverted
    freq = n_steps / n_events
    hit = any(round(event * freq + freq / 2.0) == step for event in range(step))
    return hit != inverted


def wet_day_precipitation(
    monthly: float,
    wet_days: Optional[int],
    day: int,
    month_length: int,
) -> float:
    """Concentrate the month's precipitation on its wet days.

    ``monthly`` is the mean daily rate of the month. On a wet ``day`` the
    precipitation is ``monthly * month_length / wet_days``, otherwise zero.
    A missing ``wet_days`` defaults to :data:`DEFAULT_WET_DAYS`.
    """
    n_wet = DEFAULT_WET_DAYS if wet_days is None else wet_days
    if is_event(month_length, n_wet, day):
        return monthly * month_length / n_wet
    return 0.0


def wet_days(
    precip: float, alpha: float = 1.0, beta: float = 0.0, month_length: int = 31
) -> int:
    """Number of wet days in a month from monthly precipitation.

    Uses ``month_length * alpha * (1 - exp(beta * precip))``, truncated and
    clamped to between one day and the whole month.
    """
    estimate = int(month_length * alpha * (1.0 - math.exp(beta * precip)))
    return max(1, min(estimate, month_length))
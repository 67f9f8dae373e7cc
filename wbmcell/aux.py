"""Auxiliary per-cell bookkeeping: accumulations, running statistics and balances.

Fluxes given as depths (mm per time step) are converted to volumetric flows
(m3/s) before being accumulated, so that accumulated quantities can be
compared across cells of different size.
"""

from __future__ import annotations

from dataclasses import dataclass

MM_PER_M = 1000.0


def depth_to_flow(depth: float, cell_area: float, dt: float) -> float:
    """Convert a depth in mm per time step over ``cell_area`` m2 to m3/s.

    ``dt`` is the length of the time step in seconds.
    """
    return depth * cell_area / (dt * MM_PER_M)


def storage_change_to_flow(storage_change: float, dt: float) -> float:
    """Convert a storage change in m3 over a time step of ``dt`` seconds to m3/s."""
    return storage_change / dt


def accumulate(accumulated: float, value: float) -> float:
    """Add this step's flow to the accumulated flow."""
    return accumulated + value


def accumulated_balance(
    precip: float,
    evapotranspiration: float,
    runoff: float,
    snow_pack_change: float,
    soil_moisture_change: float,
    groundwater_change: float,
) -> float:
    """Residual of the accumulated vertical water balance in m3/s.

    A perfectly closed balance returns zero.
    """
    return (
        precip
        - evapotranspiration
        - runoff
        - snow_pack_change
        - soil_moisture_change
        - groundwater_change
    )


def running_mean(mean: float, value: float, step: int) -> float:
    """Update a mean of ``step`` earlier values with one more value."""
    if step < 0:
        raise ValueError(f"step must not be negative, got {step}")
    return (mean * step + value) / (step + 1)


def discharge_max(current_max: float, value: float) -> float:
    """Larger of the maximum so far and the new value."""
    return current_max if current_max > value else value


def discharge_min(current_min: float, value: float, step: int) -> float:
    """Smaller of the minimum so far and the new value.

    On the very first step (``step`` of zero) the new value is ignored and the
    initial minimum is kept.
    """
    candidate = value if step > 0 else current_min
    return current_min if current_min < candidate else candidate


@dataclass
class RunningStatistics:
    """Step counter with running mean, maximum and minimum of one cell's series.

    ``minimum`` and ``maximum`` start from the given initial state, as the
    minimum is left untouched on the first step.
    """

    step: int = 0
    mean: float = 0.0
    maximum: float = 0.0
    minimum: float = 0.0

    def update(self, value: float) -> None:
        """Fold one more value into the statistics and advance the counter."""
        self.mean = running_mean(self.mean, value, self.step)
        self.maximum = discharge_max(self.maximum, value)
        self.minimum = discharge_min(self.minimum, value, self.step)
        self.step += 1
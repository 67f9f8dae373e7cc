"""Infiltration, surface runoff, base flow and total runoff of a single cell.

Depths and fluxes are in mm per time step unless stated otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wbmcell.aux import depth_to_flow

DEFAULT_INFILTRATION_FRACTION = 0.5
"""Share of the water surplus that recharges the shallow groundwater pool."""

DEFAULT_GROUNDWATER_BETA = 0.016666667
"""Share of the groundwater pool released as base flow in one time step."""


@dataclass(frozen=True)
class InfiltrationStep:
    """Split of the rainfed water surplus into surface runoff and infiltration."""

    surface_runoff: float
    infiltration: float


@dataclass(frozen=True)
class BaseFlowStep:
    """Groundwater state and fluxes after one time step.

    ``uptake_groundwater`` is ``None`` when irrigation is not modelled or is
    not allowed to draw on groundwater; ``uptake_external`` is ``None`` when
    irrigation is not modelled.
    """

    groundwater: float
    change: float
    recharge: float
    base_flow: float
    uptake_groundwater: Optional[float] = None
    uptake_external: Optional[float] = None


def infiltrate(
    surplus: float, fraction: float = DEFAULT_INFILTRATION_FRACTION
) -> InfiltrationStep:
    """Split the water surplus; ``fraction`` of it infiltrates, the rest runs off."""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"infiltration fraction must be within [0, 1], got {fraction}")
    infiltration = surplus * fraction
    return InfiltrationStep(surface_runoff=surplus - infiltration, infiltration=infiltration)


def rain_water_surplus(
    precip: float,
    snow_pack_change: float,
    evapotranspiration: float,
    soil_moisture_change: float,
    irrigated_fraction: float = 0.0,
) -> float:
    """Water left over on the rainfed part of the cell.

    Precipitation, evapotranspiration and soil moisture change are weighted by
    the rainfed share of the cell; the snow pack change is not, as snow covers
    the whole cell.
    """
    rainfed = 1.0 - irrigated_fraction
    return (
        precip * rainfed
        - snow_pack_change
        - evapotranspiration * rainfed
        - soil_moisture_change * rainfed
    )


def total_runoff(
    base_flow: float, surface_runoff: float, correction: Optional[float] = None
) -> float:
    """Runoff as base flow plus surface runoff, scaled by an optional correction."""
    runoff = base_flow + surface_runoff
    if correction is not None:
        runoff *= correction
    return runoff


def runoff_flow(runoff: float, cell_area: float, dt: float) -> float:
    """Runoff depth over a cell of ``cell_area`` m2 as a flow in m3/s.

    ``dt`` is the length of the time step in seconds.
    """
    if dt <= 0.0:
        raise ValueError(f"time step must be positive, got {dt}")
    return depth_to_flow(runoff, cell_area, dt)


def base_flow(
    groundwater: float,
    recharge: float,
    beta: float = DEFAULT_GROUNDWATER_BETA,
    irrigation_demand: Optional[float] = None,
    irrigation_return_flow: float = 0.0,
    irrigation_runoff: float = 0.0,
    groundwater_uptake: bool = True,
) -> BaseFlowStep:
    """Advance the shallow groundwater pool by one step and release base flow.

    Irrigation is modelled when ``irrigation_demand`` is given: its return
    flow and runoff recharge the pool, and the demand is met from groundwater
    as far as the pool allows (when ``groundwater_uptake`` is true), the rest
    being taken from external sources.
    """
    if beta < 0.0:
        raise ValueError(f"beta must not be negative, got {beta}")

    initial = groundwater
    storage = groundwater + recharge
    uptake_groundwater: Optional[float] = None
    uptake_external: Optional[float] = None

    if irrigation_demand is not None:
        irrigation_inflow = irrigation_return_flow + irrigation_runoff
        storage += irrigation_inflow
        recharge += irrigation_inflow
        if groundwater_uptake:
            if storage > irrigation_demand:
                uptake_groundwater = irrigation_demand
                uptake_external = 0.0
                storage -= irrigation_demand
            else:
                uptake_groundwater = storage
                uptake_external = irrigation_demand - storage
                storage = 0.0
        else:
            uptake_external = irrigation_demand

    released = storage * beta
    if storage > released:
        storage -= released
    else:
        released = storage
        storage = 0.0

    return BaseFlowStep(
        groundwater=storage,
        change=storage - initial,
        recharge=recharge,
        base_flow=released,
        uptake_groundwater=uptake_groundwater,
        uptake_external=uptake_external,
    )
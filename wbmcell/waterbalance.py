"""Vertical water balance of a single cell, with optional irrigation terms.

Lateral flow is not included. All terms are in mm per time step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class IrrigationFluxes:
    """Irrigation terms of a cell for one time step.

    ``uptake_groundwater`` and ``uptake_river`` are ``None`` when that source
    of irrigation water is not modelled.
    """

    area_fraction: float
    gross_demand: float
    return_flow: float
    runoff: float
    evapotranspiration: float
    soil_moisture_change: float
    uptake_excess: float
    uptake_groundwater: Optional[float] = None
    uptake_river: Optional[float] = None


@dataclass(frozen=True)
class WaterBalanceResult:
    """Residuals of the water balance; zero when the budget is closed.

    The irrigation residuals are ``None`` when irrigation is not modelled.
    """

    balance: float
    irrigation_balance: Optional[float] = None
    uptake_balance: Optional[float] = None


def water_balance(
    precip: float,
    evapotranspiration: float,
    snow_pack_change: float,
    soil_moisture_change: float,
    groundwater_change: float,
    runoff: float,
    irrigation: Optional[IrrigationFluxes] = None,
) -> WaterBalanceResult:
    """Residual of the vertical water balance of a cell.

    With irrigation, water taken from the river counts as an input to the
    cell, and the balances of irrigation water use and of its uptake from
    the various sources are returned as well. Cells without irrigated area
    report zero irrigation residuals.
    """
    balance = (
        precip
        - evapotranspiration
        - runoff
        - groundwater_change
        - snow_pack_change
        - soil_moisture_change
    )
    if irrigation is None:
        return WaterBalanceResult(balance)

    if irrigation.area_fraction <= 0.0:
        return WaterBalanceResult(balance, 0.0, 0.0)

    irrigation_balance = (
        irrigation.gross_demand
        - irrigation.evapotranspiration
        - irrigation.soil_moisture_change
        - irrigation.return_flow
        - irrigation.runoff
    )
    uptake_balance = irrigation.gross_demand - irrigation.uptake_excess
    if irrigation.uptake_groundwater is not None:
        uptake_balance -= irrigation.uptake_groundwater
    if irrigation.uptake_river is not None:
        uptake_balance -= irrigation.uptake_river
        balance += irrigation.uptake_river
    return WaterBalanceResult(balance, irrigation_balance, uptake_balance)
"""Soil water capacity and soil moisture bookkeeping for a single cell.

Depths are in mm and fluxes in mm per time step. Rainfed quantities are
weighted by the rainfed (non-irrigated) share of the cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_SOIL_MOISTURE_ALPHA = 5.0
"""Shape parameter of the soil drying function."""


@dataclass(frozen=True)
class RainSoilMoistureStep:
    """Rainfed evapotranspiration, soil moisture and its change for one step.

    All three are weighted by the rainfed fraction of the cell.
    """

    evapotranspiration: float
    soil_moisture: float
    change: float


@dataclass(frozen=True)
class SoilMoistureStep:
    """Cell soil moisture, its change and moisture relative to capacity."""

    soil_moisture: float
    change: float
    relative: float


def available_water_capacity(
    field_capacity: float, wilting_point: float, rooting_depth: float
) -> float:
    """Plant-available water capacity in mm.

    ``field_capacity`` and ``wilting_point`` are volumetric fractions and
    ``rooting_depth`` is in mm. A field capacity below the wilting point
    leaves no available water.
    """
    capacity = max(field_capacity, wilting_point)
    return rooting_depth * (capacity - wilting_point)


def rain_soil_moisture_change(
    precip: float,
    pet: float,
    snow_pack_change: float,
    snow_pack: float,
    soil_moisture: float,
    water_capacity: float,
    intercept: float = 0.0,
    irrigated_fraction: float = 0.0,
    alpha: float = DEFAULT_SOIL_MOISTURE_ALPHA,
) -> RainSoilMoistureStep:
    """Advance the rainfed soil moisture by one time step.

    ``soil_moisture`` is the stored moisture weighted by the rainfed share of
    the cell, as returned by a previous step. Surplus water fills the soil up
    to ``water_capacity``; a deficit dries it following an exponential
    function of relative moisture shaped by ``alpha``. While snow lies on the
    ground the soil moisture does not change.
    """
    if alpha == 0.0:
        raise ValueError("alpha must not be zero")

    rainfed = 1.0 - irrigated_fraction
    change = 0.0
    moisture = soil_moisture

    if irrigated_fraction < 1.0 and water_capacity > 0.0:
        moisture = moisture / rainfed
        if snow_pack <= 0.0:
            water_in = precip - snow_pack_change - intercept
            pet = pet - intercept if pet > intercept else 0.0
            if water_in > pet:
                change = min(water_in - pet, water_capacity - moisture)
            else:
                drying = (1.0 - math.exp(-alpha * moisture / water_capacity)) / (
                    1.0 - math.exp(-alpha)
                )
                change = drying * (water_in - pet)
                if moisture + change > water_capacity:
                    change = water_capacity - moisture
                if moisture + change < 0.0:
                    change = -moisture
            moisture += change
    else:
        moisture = 0.0
        change = 0.0

    evapotrans = min(pet + intercept, precip - snow_pack_change - change)
    return RainSoilMoistureStep(
        evapotranspiration=evapotrans * rainfed,
        soil_moisture=moisture * rainfed,
        change=change * rainfed,
    )


def combine_soil_moisture(
    rain_moisture: float,
    rain_change: float,
    water_capacity: float,
    irrigated_moisture: Optional[float] = None,
    irrigated_change: Optional[float] = None,
) -> SoilMoistureStep:
    """Combine rainfed and irrigated soil moisture into the cell totals.

    The relative soil moisture is zero where the water capacity is zero.
    """
    moisture = rain_moisture
    change = rain_change
    if irrigated_moisture is not None:
        moisture += irrigated_moisture
    if irrigated_change is not None:
        change += irrigated_change
    if math.isclose(water_capacity, 0.0, abs_tol=1e-12):
        relative = 0.0
    else:
        relative = moisture / water_capacity
    return SoilMoistureStep(soil_moisture=moisture, change=change, relative=relative)
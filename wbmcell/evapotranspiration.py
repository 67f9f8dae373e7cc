"""Actual and simple potential evapotranspiration, in mm per day."""

from __future__ import annotations

from typing import Optional


def evapotranspiration(
    rain_evapotranspiration: float,
    irrigation_evapotranspiration: Optional[float] = None,
) -> float:
    """Total evapotranspiration from rainfed and, if present, irrigated land."""
    if irrigation_evapotranspiration is None:
        return rain_evapotranspiration
    return rain_evapotranspiration + irrigation_evapotranspiration


def pet_jensen(air_temp: float, solar_radiation: float) -> float:
    """Jensen-Haise (1963) potential evapotranspiration.

    ``air_temp`` in degC, ``solar_radiation`` the daily radiation on a
    horizontal surface.
    """
    return 0.41 * (0.025 * air_temp + 0.078) * solar_radiation


def pet_turc(air_temp: float, solar_radiation: float) -> float:
    """Turc (1961) potential evapotranspiration; zero at or below 0 degC."""
    if air_temp <= 0.0:
        return 0.0
    return 0.313 * air_temp * (solar_radiation + 2.1) / (air_temp + 15.0)
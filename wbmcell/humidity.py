"""Humidity relations for a single cell: vapour pressures, dew point and wet bulb.

Pressures are in Pa, temperatures in degC, relative humidity in percent and
specific humidity in kg/kg unless stated otherwise.
"""

from __future__ import annotations

import math

REFERENCE_VAPOR_PRESSURE = 611.0
"""Saturated vapour pressure at 0 degC in Pa."""

MISSING_VALUE = 32800.0
"""Sentinel that marks missing data in the wet-bulb calculation."""

_WATER_A, _WATER_B = 17.27, 237.3
_ICE_A, _ICE_B = 21.87, 265.5
_EPSILON = 0.622
_ONE_MINUS_EPSILON = 0.378

_WET_BULB_TOLERANCE = 0.1
_WET_BULB_ITERATIONS = 10
_AIR_SPECIFIC_HEAT = 1005.0  # J/(kg K)


def dew_point_temperature(vapor_pressure: float) -> float:
    """Dew point temperature in degC for a vapour pressure in Pa.

    Above the 0 degC saturation pressure the over-water relation is used,
    otherwise the over-ice relation.
    """
    if vapor_pressure <= 0.0:
        raise ValueError(f"vapour pressure must be positive, got {vapor_pressure}")
    ratio = math.log(vapor_pressure / REFERENCE_VAPOR_PRESSURE)
    if vapor_pressure > REFERENCE_VAPOR_PRESSURE:
        return _WATER_B * ratio / (_WATER_A - ratio)
    return _ICE_B * ratio / (_ICE_A - ratio)


def saturated_vapor_pressure(air_temp: float) -> float:
    """Saturated vapour pressure in Pa, over water above 0 degC and over ice otherwise."""
    if air_temp > 0.0:
        return REFERENCE_VAPOR_PRESSURE * math.exp(_WATER_A * air_temp / (air_temp + _WATER_B))
    return REFERENCE_VAPOR_PRESSURE * math.exp(_ICE_A * air_temp / (air_temp + _ICE_B))


def relative_humidity(saturated_vapor_pressure: float, vapor_pressure: float) -> float:
    """Relative humidity in percent, capped at 100."""
    if vapor_pressure < saturated_vapor_pressure:
        return 100.0 * vapor_pressure / saturated_vapor_pressure
    return 100.0


def specific_humidity(
    air_pressure: float, saturated_vapor_pressure: float, relative_humidity: float
) -> float:
    """Specific humidity in kg/kg from air pressure, saturated vapour pressure and RH."""
    vapor = relative_humidity / 100.0 * saturated_vapor_pressure
    return _EPSILON * vapor / (air_pressure - _ONE_MINUS_EPSILON * vapor)


def vapor_pressure(specific_humidity: float, air_pressure: float) -> float:
    """Vapour pressure, in the unit of ``air_pressure``, from specific humidity."""
    return specific_humidity * air_pressure / (_EPSILON + specific_humidity * _ONE_MINUS_EPSILON)


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _root(value: float) -> float:
    return math.sqrt(value) if value >= 0.0 else math.nan


def wet_bulb_temperature(
    air_temp: float,
    specific_humidity: float,
    air_pressure: float,
    relative_humidity: float,
) -> float:
    """Wet-bulb temperature in degC.

    Starts from the Chappell approximation and refines it with a damped
    fixed-point iteration on the Clausius-Clapeyron relation. If that does not
    converge, a closed-form cubic estimate that uses ``relative_humidity``
    (percent) is returned instead. Below 0 degC the result is 0.
    """
    q = specific_humidity * 1000.0  # g/kg
    pressure = air_pressure / 100.0  # hPa

    vapor = q * pressure / 622.0
    saturated = 6.112 * math.exp(17.27 * (air_temp / (237.3 + air_temp)))

    if vapor >= saturated:
        result = air_temp
    elif MISSING_VALUE in (air_temp, pressure, q):
        result = MISSING_VALUE
    else:
        mixing = q / 1000.0 / (1.0 - q / 1000.0)
        mixing_sat = 0.62197 * (saturated / (pressure - saturated))
        log_term = math.log(math.e / 6.11)
        dew_point = (243.5 * log_term) / (17.67 - log_term)
        depression = air_temp - dew_point
        mixing_depression = mixing_sat - mixing
        c = (597.3 - 0.566 * (air_temp - 273.16)) / 0.24
        twn = air_temp - (depression * mixing_depression * c) / (
            depression + mixing_depression * c
        )

        latent = 1918460.0 * ((air_temp + 273.0) / ((air_temp + 273.0) - 33.91)) ** 2
        twn2 = twn
        for iteration in range(_WET_BULB_ITERATIONS):
            esw = 611.0 * math.exp(17.27 * (twn / (237.3 + twn))) / 100.0
            ws = 0.62197 * (esw / (pressure - esw))
            twn2 = (twn + air_temp + latent / _AIR_SPECIFIC_HEAT * (mixing - ws)) / 2.0
            if abs(twn2 - twn) <= _WET_BULB_TOLERANCE:
                break
            if iteration == _WET_BULB_ITERATIONS - 1:
                s = 662.23 + 0.97 * pressure
                big_q = (
                    8264.65
                    - (1480.45 * (relative_humidity / 100.0)) * saturated
                    - 0.966 * air_temp * pressure
                )
                discriminant = _root(big_q ** 2 / 4.0 + s ** 3 / 27.0)
                twn2 = _cbrt(-big_q / 2.0 + discriminant) + _cbrt(-big_q / 2.0 - discriminant) - 1.0
            else:
                twn = twn2
        result = twn2

    return 0.0 if air_temp < 0.0 else result
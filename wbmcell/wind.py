"""Wind speed adjustment between a weather station and a reference height."""

from __future__ import annotations

import math


def wind_adjustment(
    za: float, disp: float, z0: float, fetch: float, zw: float, z0w: float
) -> float:
    """Ratio of wind speed at reference height to that at the weather station.

    After Brutsaert (1982), equations 7-39, 7-41 and 4-3.

    * ``za``    reference height above the canopy [m]
    * ``disp``  zero-plane displacement height [m]
    * ``z0``    roughness parameter [m]
    * ``fetch`` fetch to the weather station [m]
    * ``zw``    height of the wind sensor at the station [m]
    * ``z0w``   roughness parameter at the station [m]
    """
    if z0 <= 0.0 or z0w <= 0.0:
        raise ValueError("roughness parameters must be positive")
    if fetch <= 0.0:
        raise ValueError("fetch must be positive")
    if za <= disp:
        raise ValueError("reference height must exceed the displacement height")
    if zw <= 0.0:
        raise ValueError("sensor height must be positive")
    hibl = 0.334 * fetch ** 0.875 * z0w ** 0.125  # internal boundary layer height
    denominator = math.log(hibl / z0) * math.log(zw / z0w)
    if denominator == 0.0:
        raise ValueError("sensor height or boundary layer equals the roughness length")
    return math.log(hibl / z0w) * math.log((za - disp) / z0) / denominator
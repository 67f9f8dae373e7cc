"""Air temperature downscaling and elevation correction for a single cell.

Missing inputs are passed as ``None``.
"""

from __future__ import annotations

from typing import Optional

DEFAULT_LAPSE_RATE = 0.0098
"""Adiabatic lapse rate in degC/m used when none is given."""


def downscale_air_temperature(
    daily: Optional[float],
    monthly: Optional[float],
    reference: Optional[float],
) -> Optional[float]:
    """Shift a daily temperature by the offset between reference and monthly means.

    Any of the three inputs may be missing (``None``):

    * with all three missing the result is missing;
    * without a daily value the reference value is used, falling back to the
      monthly value when the reference is missing;
    * with a daily value but no monthly value the daily value is returned;
    * otherwise ``daily + reference - monthly``, a missing reference standing
      in for the monthly value.
    """
    if daily is None:
        if monthly is None:
            return reference
        return reference if reference is not None else monthly
    if monthly is None:
        return daily
    ref = reference if reference is not None else monthly
    return daily + ref - monthly


def elevation_adjustment(
    air_temp: Optional[float],
    elevation: Optional[float],
    elevation_reference: Optional[float],
    lapse_rate: Optional[float] = None,
) -> Optional[float]:
    """Correct a temperature observed at ``elevation_reference`` to ``elevation``.

    Elevations are in metres and the lapse rate in degC/m; a missing lapse
    rate defaults to :data:`DEFAULT_LAPSE_RATE`. A missing temperature stays
    missing, and a missing elevation leaves the temperature unchanged.
    """
    if air_temp is None:
        return None
    if elevation is None or elevation_reference is None:
        return air_temp
    rate = DEFAULT_LAPSE_RATE if lapse_rate is None else lapse_rate
    return air_temp + (elevation_reference - elevation) * rate
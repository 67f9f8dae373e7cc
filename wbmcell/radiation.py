"""Clear-sky radiation, cloud cover, solar radiation and day length.

Latitudes are in decimal degrees and days are days of the year.
"""

from __future__ import annotations

import math

DTOR = 0.01745329252
SOLAR_CONSTANT = 1360.0  # W/m2

_CLOUD_A = 0.458
_CLOUD_B = 0.340
_CLOUD_C = 0.803


def gross_radiation_standard(day_of_year: int, latitude: float, tau: float = 1.0) -> float:
    """Daily mean clear-sky radiation in W/m2 with atmospheric transmissivity ``tau``."""
    if tau < 0.0:
        raise ValueError(f"transmissivity must not be negative, got {tau}")
    lam = latitude * DTOR
    sigma = -23.4 * math.cos(2.0 * math.pi * (day_of_year + 11.0) / 365.25) * DTOR
    total = 0.0
    for hour in range(24):
        eta = (hour + 1) * math.pi / 12.0
        sinphi = math.sin(lam) * math.sin(sigma) + math.cos(lam) * math.cos(sigma) * math.cos(eta)
        if sinphi <= 0.0:
            continue  # sun below the horizon contributes nothing
        sbb = SOLAR_CONSTANT * sinphi * tau ** (1.0 / sinphi)
        if sbb > 0.0:
            total += sbb
    return total / 24.0


def gross_radiation_otto(day_of_year: int, latitude: float) -> float:
    """Daily mean clear-sky radiation in W/m2 corrected for Earth-Sun distance."""
    lam = latitude * DTOR
    sigma = -23.4856 * math.cos(2.0 * math.pi * (day_of_year + 11.0) / 365.25) * DTOR
    sotd = 1.0 - 0.016729 * math.cos(0.9856 * (day_of_year - 4.0) * DTOR)
    total = 0.0
    for hour in range(24):
        eta = (hour + 1) * math.pi / 12.0
        sinphi = math.sin(lam) * math.sin(sigma) + math.cos(lam) * math.cos(sigma) * math.cos(eta)
        sbb = SOLAR_CONSTANT * sinphi / sotd ** 2
        if sbb >= 0.0:
            total += sbb
    return total / 24.0


def cloud_cover(solar_radiation: float, gross_radiation: float) -> float:
    """Cloud cover in percent from the ratio of solar to clear-sky radiation.

    The result is clamped to [0, 100]. Ratios too high for the quadratic to
    have a real root give NaN.
    """
    if gross_radiation == 0.0:
        raise ValueError("gross radiation must not be zero")
    c = solar_radiation / gross_radiation - _CLOUD_C
    disc = _CLOUD_B ** 2 - 4.0 * _CLOUD_A * c
    if disc < 0.0:
        return math.nan
    cover = 100.0 * (-_CLOUD_B + math.sqrt(disc)) / (2.0 * _CLOUD_A)
    return min(max(cover, 0.0), 100.0)


def solar_radiation_cloud(cloud_cover: float, clear_sky: float) -> float:
    """Solar radiation in W/m2 from cloud cover in percent and clear-sky radiation."""
    cloud = cloud_cover / 100.0 if cloud_cover < 100.0 else 1.0
    return clear_sky * (_CLOUD_C - _CLOUD_B * cloud - _CLOUD_A * cloud ** 2)


def solar_radiation_sun(sunshine: float, clear_sky: float) -> float:
    """Solar radiation in W/m2 from sunshine in percent of the day."""
    return clear_sky * (0.251 + 0.509 * sunshine / 100.0)


def _solar_constant_correction(doy: int) -> float:
    isc = 1.0 - 0.0167 * math.cos(0.0172 * (doy - 3))
    return 1367.0 / (isc * isc)


def _declination(doy: int) -> float:
    dec = math.sin(6.224111 + 0.017202 * doy)
    dec = 0.39785 * math.sin(4.868961 + 0.017203 * doy + 0.033446 * math.sin(dec))
    return math.asin(dec)


def _half_day_angle(lat: float, dec: float) -> float:
    arg = -math.tan(dec) * math.tan(lat)
    if arg > 1.0:
        return 0.0  # sun stays below the horizon
    if arg < -1.0:
        return math.pi  # sun stays above the horizon
    return math.acos(arg)


def _latitude_radians(latitude: float) -> float:
    lat = latitude / 180.0 * math.pi
    if abs(lat) > math.pi / 2:
        lat = (math.pi / 2 - 0.01) * (1.0 if lat > 0.0 else -1.0)
    return lat


def day_length(day_of_year: int, latitude: float) -> float:
    """Day length as a fraction of the whole day."""
    lat = _latitude_radians(latitude)
    return _half_day_angle(lat, _declination(day_of_year)) / math.pi


def potential_insolation(day_of_year: int, latitude: float) -> float:
    """Daily potential insolation on a horizontal surface in MJ/m2 (Sellers 1965)."""
    isc = _solar_constant_correction(day_of_year)
    dec = _declination(day_of_year)
    lat = _latitude_radians(latitude)
    h = _half_day_angle(lat, dec)
    return 0.000001 * isc * (86400.0 / math.pi) * (
        h * math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.sin(h)
    )
"""
tsuki.sun — Low-Precision Solar Ephemeris
==========================================

Apparent geocentric ecliptic longitude and Earth–Sun distance from the
low-precision formulae of the Astronomical Almanac (accurate to ~0.01° in
longitude over ±50 years from J2000), which is all the lunar phase
computation needs.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 25.
"""

from dataclasses import dataclass

import numpy as np

from .utils import normalize_degrees, as_float, JD_J2000


@dataclass(frozen=True)
class SolarCoords:
    """Geocentric ecliptic position of the Sun."""
    longitude: float        # apparent ecliptic longitude [deg, 0..360)
    radius_vector: float    # Earth–Sun distance [AU]


def solar_mean_anomaly(jd):
    """Mean anomaly of the Sun [deg, 0..360)."""
    return normalize_degrees(357.5291092 + 0.985600283 * (jd - JD_J2000))


def solar_mean_longitude(jd):
    """Geometric mean longitude of the Sun [deg, 0..360)."""
    return normalize_degrees(280.46646 + 0.98564736 * (jd - JD_J2000))


def solar_position(jd) -> SolarCoords:
    """Compute the Sun's geocentric ecliptic longitude and distance.

    Parameters
    ----------
    jd : float or ndarray — Julian Date (UTC ≈ TT for this precision)

    Returns
    -------
    SolarCoords — longitude [deg], radius vector [AU]
    """
    M = np.deg2rad(solar_mean_anomaly(jd))

    # Equation of center [deg]
    C = 1.9148 * np.sin(M) + 0.0200 * np.sin(2 * M) + 0.0003 * np.sin(3 * M)

    sun_lon = normalize_degrees(solar_mean_longitude(jd) + C)
    R_au = 1.00014 - 0.01671 * np.cos(M) - 0.00014 * np.cos(2 * M)

    return SolarCoords(longitude=as_float(sun_lon), radius_vector=as_float(R_au))


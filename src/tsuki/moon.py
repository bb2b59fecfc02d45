"""
tsuki.moon — Low-Precision Lunar Ephemeris
===========================================

Geocentric ecliptic longitude, latitude and distance of the Moon from a
truncated periodic series in the four fundamental arguments (mean
elongation D, solar mean anomaly M, lunar mean anomaly M', argument of
latitude F).  Accuracy is about a degree in longitude, half a degree in
latitude and a few hundred km in distance: enough for phase naming and
rise/set times within a few minutes.

The series tables below are fixed.  Their order and coefficients determine
the numerical output and must not be "corrected" term by term.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 47.
"""

from dataclasses import dataclass

import numpy as np

from .utils import normalize_degrees, as_float, JD_J2000
from .sun import solar_mean_anomaly, solar_mean_longitude

# ── Constants ───────────────────────────────────────────────────────────────
MEAN_EARTH_MOON_DIST_KM = 385_000.0   # series base distance [km]


@dataclass(frozen=True)
class FundamentalArguments:
    """Lunar fundamental arguments [deg, 0..360)."""
    L: float        # Moon's mean longitude
    D: float        # mean elongation of the Moon from the Sun
    M: float        # Sun's mean anomaly
    M_moon: float   # Moon's mean anomaly (M')
    F: float        # Moon's argument of latitude


@dataclass(frozen=True)
class LunarCoords:
    """Geocentric ecliptic position of the Moon."""
    longitude: float        # ecliptic longitude [deg, 0..360)
    latitude: float         # ecliptic latitude [deg]
    radius_vector: float    # Earth–Moon distance [km]


# ── Series Tables ───────────────────────────────────────────────────────────
# (D, M, M', F, coeff): coeff · sin/cos(D·D + M·M + M'·M' + F·F)

# Longitude, coeff_sin [deg]
LON_TERMS = (
    (0, 0, 1, 0, 6.28875),
    (2, 0, 0, 0, 1.27401),
    (0, 0, 0, 2, 0.65831),
    (0, 1, 0, 0, -0.18581),
    (0, 0, 1, 2, -0.11433),
    (2, 0, -1, 0, 0.05877),
    (2, 0, 1, 0, 0.05730),
    (0, 1, 0, 2, 0.05322),
    (0, 0, -1, 2, 0.04620),
    (2, -1, 0, 0, 0.04092),
    (0, 1, 1, 0, 0.03044),
    (2, 0, 0, -2, 0.01526),
    (0, -1, 1, 0, 0.01130),
    (0, -1, 0, 2, 0.01024),
    (2, 1, 0, 0, -0.00914),
    (2, 0, 0, 2, 0.00422),
    (2, 0, 0, -3, 0.00386),
    (0, 0, 3, 0, 0.00366),
    (0, 2, 0, 0, 0.00293),
    (-2, 0, 2, 0, 0.00276),
    (2, 0, 2, 0, 0.00252),
    (2, -1, 1, 0, 0.00224),
)

# Latitude, coeff_sin [deg]
LAT_TERMS = (
    (0, 0, 0, 1, 5.12819),
    (0, 0, 1, 1, 0.28060),
    (0, 0, -1, 1, 0.27769),
    (0, 1, 0, 1, 0.17320),
    (2, 0, 0, 1, 0.05538),
    (2, 0, 0, -1, 0.04627),
    (2, 0, -1, 1, 0.03257),
    (2, 1, 0, -1, 0.01633),
    (2, 0, 1, 1, 0.00809),
    (0, 0, 2, 1, 0.00769),
    (2, 0, -1, 2, 0.00755),
    (2, 1, 0, 1, 0.00705),
    (2, -1, 0, 1, 0.00583),
    (2, 0, 0, 2, 0.00517),
    (2, 1, 0, -2, 0.00412),
    (2, 0, 1, 2, 0.00388),
    (2, 0, 1, 2, 0.00277),
)

# Distance, coeff_cos [km]
DIST_TERMS = (
    (0, 0, 1, 0, -20905.0),
    (2, 0, -1, 0, -3699.0),
    (2, 0, 0, 0, -2956.0),
    (0, 0, 0, 2, -569.0),
    (2, 0, 0, -2, 246.0),
    (0, 1, 1, 0, 209.0),
    (0, 1, 0, 0, 105.0),
    (0, -1, 1, 0, -103.0),
    (2, 0, 1, 0, -57.0),
    (0, 0, 1, 2, -48.0),
    (2, -1, -1, 0, 46.0),
    (2, 0, 1, 0, 38.0),
    (2, 0, 1, 1, -30.0),
    (-2, 0, 1, 0, -24.0),
    (2, 0, 0, -1, -22.0),
    (0, 0, 1, -2, 15.0),
    (2, 0, 1, 1, -13.0),
    (2, 1, 0, 0, -12.0),
    (0, 1, 0, -2, 10.0),
    (2, 1, 0, 1, 8.0),
    (0, 0, 1, 1, 7.0),
    (2, 1, 0, -1, -6.0),
    (-2, 0, 1, 2, -5.0),
    (2, 0, 1, -1, -4.0),
    (2, 1, 1, 0, 4.0),
    (2, -2, 0, 0, -4.0),
    (-2, -1, 1, 0, -3.0),
    (0, 1, 0, -1, -3.0),
    (2, 0, 0, 2, -3.0),
    (0, 1, 1, -1, 3.0),
    (0, 1, 0, 2, -3.0),
    (2, -1, -1, 0, -3.0),
    (2, -1, 1, 0, 3.0),
    (0, 1, 1, 1, 3.0),
    (-2, 0, 1, 1, -3.0),
    (2, 0, -1, -1, -2.0),
)


# ════════════════════════════════════════════════════════════════════════════
#  Lunar Ephemeris
# ════════════════════════════════════════════════════════════════════════════

def fundamental_arguments(jd) -> FundamentalArguments:
    """Mean lunar/solar arguments, linear in days from J2000 [deg]."""
    d = jd - JD_J2000
    L = normalize_degrees(218.3164477 + 13.17639647 * d)
    M_moon = normalize_degrees(134.9634114 + 13.06499295 * d)
    F = normalize_degrees(93.2720950 + 13.22935035 * d)
    D = normalize_degrees(L - solar_mean_longitude(jd))
    return FundamentalArguments(L=L, D=D, M=solar_mean_anomaly(jd),
                                M_moon=M_moon, F=F)


def _series(terms, D_r, M_r, Mp_r, F_r, fn):
    total = 0.0
    for d, m, mp, f, coeff in terms:
        arg = d * D_r + m * M_r + mp * Mp_r + f * F_r
        total += coeff * fn(arg)
    return total


def lunar_position(jd) -> LunarCoords:
    """Compute the Moon's geocentric ecliptic coordinates.

    Parameters
    ----------
    jd : float or ndarray — Julian Date (UTC ≈ TT for this precision)

    Returns
    -------
    LunarCoords — longitude [deg, 0..360), latitude [deg], distance [km]
    """
    args = fundamental_arguments(jd)
    D_r = np.deg2rad(args.D)
    M_r = np.deg2rad(args.M)
    Mp_r = np.deg2rad(args.M_moon)
    F_r = np.deg2rad(args.F)

    sum_l = _series(LON_TERMS, D_r, M_r, Mp_r, F_r, np.sin)
    sum_b = _series(LAT_TERMS, D_r, M_r, Mp_r, F_r, np.sin)
    sum_r = _series(DIST_TERMS, D_r, M_r, Mp_r, F_r, np.cos)

    return LunarCoords(
        longitude=as_float(normalize_degrees(args.L + sum_l)),
        latitude=as_float(sum_b),
        radius_vector=as_float(MEAN_EARTH_MOON_DIST_KM + sum_r),
    )

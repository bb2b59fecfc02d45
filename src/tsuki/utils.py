"""
tsuki.utils — Foundational Utilities
=====================================

Constants, angle normalisation, and the calendar → Julian Date and sidereal
time conversions shared by every ephemeris module.
All functions are pure NumPy and accept scalars or arrays.
"""

import numpy as np
from numpy.typing import NDArray

# ── Physical / Epoch Constants ──────────────────────────────────────────────
JD_J2000 = 2_451_545.0          # Julian Date of J2000.0 (2000-01-01 12:00)
JD_UNIX_EPOCH = 2_440_587.5     # Julian Date of 1970-01-01 00:00 UTC
DAYS_PER_CENTURY = 36_525.0
DAILY_SECONDS = 86400.0
R_EARTH_KM = 6378.137           # WGS-84 semi-major axis          [km]

# Mean refraction + lunar semi-diameter: altitude of the Moon's centre at
# apparent rise / set [deg]
HORIZON_ALT_DEG = -0.566

TWO_PI = 2.0 * np.pi


# ── Angle Helpers ───────────────────────────────────────────────────────────

def normalize_degrees(angle):
    """Reduce an angle to [0, 360) degrees.  Idempotent."""
    result = np.fmod(angle, 360.0)
    result = result + 360.0 * (result < 0.0)
    # a tiny negative remainder can round up to a full turn
    return result - 360.0 * (result >= 360.0)


def normalize_radians(angle):
    """Reduce an angle to [0, 2π) radians.  Idempotent."""
    result = np.fmod(angle, TWO_PI)
    result = result + TWO_PI * (result < 0.0)
    return result - TWO_PI * (result >= TWO_PI)


# ── Time Utilities ──────────────────────────────────────────────────────────

def julian_date(year: int, month: int, day: int,
                hour: float = 0.0, minute: float = 0.0,
                second: float = 0.0) -> float:
    """Compute Julian Date from Gregorian calendar fields (UTC).

    January and February are counted as months 13 and 14 of the previous
    year so the leap day falls at the end of the computational year.
    """
    if month <= 2:
        year -= 1
        month += 12
    A = np.floor(year / 100.0)
    B = 2 - A + np.floor(A / 4.0)
    day_fraction = hour / 24.0 + minute / 1440.0 + second / DAILY_SECONDS
    JD = (np.floor(365.25 * (year + 4716))
          + np.floor(30.6001 * (month + 1))
          + day + day_fraction + B - 1524.5)
    return float(JD)


def julian_centuries(jd):
    """Julian centuries elapsed since J2000.0."""
    return (jd - JD_J2000) / DAYS_PER_CENTURY


def gmst_deg(jd):
    """Greenwich Mean Sidereal Time [deg, 0..360) from Julian Date (UT).

    Meeus (1998) eq. 12.4, valid for any instant (not only 0h UT).
    """
    T = julian_centuries(jd)
    theta = 280.46061837 + 360.98564736629 * (jd - JD_J2000) \
        + 0.000387933 * T**2 - T**3 / 38_710_000.0
    return normalize_degrees(theta)


def as_float(value) -> float | NDArray:
    """Unwrap 0-d NumPy results to a plain float; leave arrays untouched."""
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0:
        return float(arr)
    return arr

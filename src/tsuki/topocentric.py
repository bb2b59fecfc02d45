"""
tsuki.topocentric — Geocentric → Topocentric Lunar Coordinates
===============================================================

Composes the lunar ephemeris, nutation and sidereal time into the Moon's
altitude above an observer's horizon:

    ecliptic (λ+Δψ, β)  →  equatorial (α, δ)          true obliquity ε0+Δε
    GMST + λ_obs        →  local sidereal time θ
    θ − α               →  geocentric hour angle H
    parallax π          →  topocentric (α', δ')
    θ − α'              →  topocentric hour angle H'  →  altitude h

The Moon's horizontal parallax reaches ~1°, so the topocentric correction
matters for rise/set times at the minute level.  The observer is treated
as sitting on a spherical Earth of equatorial radius (ρ = 1, φ' = φ).

Every function here is branch-free NumPy and vectorises over ``jd``; the
altitude is the innermost call of the horizon-crossing search.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Ch. 13 & 40.
"""

from dataclasses import dataclass

import numpy as np

from .utils import normalize_radians, gmst_deg, as_float, R_EARTH_KM
from .moon import lunar_position
from .nutation import obliquity_and_nutation


@dataclass(frozen=True)
class EquatorialCoords:
    """Equatorial position [rad]."""
    right_ascension: float  # α, 0..2π
    declination: float      # δ, −π/2..π/2


# ════════════════════════════════════════════════════════════════════════════
#  Frame Conversions
# ════════════════════════════════════════════════════════════════════════════

def ecliptic_to_equatorial(lon_deg, lat_deg, obliquity_deg) -> EquatorialCoords:
    """Rotate ecliptic longitude/latitude [deg] to right ascension/declination.

    Parameters
    ----------
    lon_deg, lat_deg : float or ndarray — ecliptic longitude / latitude [deg]
    obliquity_deg : float or ndarray — obliquity of the ecliptic [deg]

    Returns
    -------
    EquatorialCoords — α [rad, 0..2π), δ [rad]
    """
    lam = np.deg2rad(lon_deg)
    beta = np.deg2rad(lat_deg)
    eps = np.deg2rad(obliquity_deg)

    ra = normalize_radians(np.arctan2(
        np.sin(lam) * np.cos(eps) - np.tan(beta) * np.sin(eps),
        np.cos(lam),
    ))
    dec = np.arcsin(np.sin(beta) * np.cos(eps)
                    + np.cos(beta) * np.sin(eps) * np.sin(lam))
    return EquatorialCoords(right_ascension=as_float(ra), declination=as_float(dec))


def moon_equatorial(jd) -> tuple[EquatorialCoords, float]:
    """Geocentric apparent right ascension/declination of the Moon.

    Returns
    -------
    eq : EquatorialCoords — geocentric α, δ [rad]
    distance : float — Earth–Moon distance [km]
    """
    moon = lunar_position(jd)
    nut = obliquity_and_nutation(jd)
    eq = ecliptic_to_equatorial(moon.longitude + nut.delta_psi,
                                moon.latitude, nut.true_obliquity)
    return eq, moon.radius_vector


def local_sidereal_time(jd, lon_deg):
    """Local mean sidereal time [rad, 0..2π) for east longitude ``lon_deg``."""
    return normalize_radians(np.deg2rad(gmst_deg(jd)) + np.deg2rad(lon_deg))


def horizontal_parallax(distance_km):
    """Equatorial horizontal parallax π = asin(R⊕ / Δ) [rad]."""
    return np.arcsin(R_EARTH_KM / distance_km)


def topocentric_correction(eq: EquatorialCoords, distance_km, lst_rad,
                           lat_deg) -> EquatorialCoords:
    """Apply diurnal parallax to a geocentric equatorial position.

    Parameters
    ----------
    eq : EquatorialCoords — geocentric α, δ [rad]
    distance_km : float or ndarray — geocentric distance [km]
    lst_rad : float or ndarray — local sidereal time [rad]
    lat_deg : float — observer latitude [deg]

    Returns
    -------
    EquatorialCoords — topocentric α' (not re-normalised), δ' [rad]
    """
    phi = np.deg2rad(lat_deg)
    sin_phi, cos_phi = np.sin(phi), np.cos(phi)
    sin_pi = np.sin(horizontal_parallax(distance_km))

    H = normalize_radians(lst_rad - eq.right_ascension)
    cos_dec = np.cos(eq.declination)

    delta_alpha = np.arctan2(-cos_phi * sin_pi * np.sin(H),
                             cos_dec - cos_phi * sin_pi * np.cos(H))
    dec_topo = np.arctan2(np.sin(eq.declination) - sin_phi * sin_pi,
                          (cos_dec - cos_phi * sin_pi * np.cos(H)) * np.cos(delta_alpha))

    return EquatorialCoords(
        right_ascension=as_float(eq.right_ascension + delta_alpha),
        declination=as_float(dec_topo),
    )


# ════════════════════════════════════════════════════════════════════════════
#  Altitude
# ════════════════════════════════════════════════════════════════════════════

def moon_altitude(jd, lon_deg: float, lat_deg: float):
    """Topocentric altitude of the Moon's centre [deg].

    Parameters
    ----------
    jd : float or ndarray — Julian Date (UTC)
    lon_deg : float — observer east longitude [deg]
    lat_deg : float — observer latitude [deg]

    Returns
    -------
    altitude : float or ndarray — geometric altitude, no refraction [deg]
    """
    eq, distance = moon_equatorial(jd)
    lst = local_sidereal_time(jd, lon_deg)
    topo = topocentric_correction(eq, distance, lst, lat_deg)

    phi = np.deg2rad(lat_deg)
    H_topo = normalize_radians(lst - topo.right_ascension)
    sin_h = np.sin(topo.declination) * np.sin(phi) \
        + np.cos(topo.declination) * np.cos(phi) * np.cos(H_topo)
    return as_float(np.rad2deg(np.arcsin(sin_h)))

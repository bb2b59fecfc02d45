"""
tsuki.nutation — Obliquity of the Ecliptic & Nutation
======================================================

Mean obliquity (IAU 1980 polynomial) and the four dominant periodic terms
of nutation in longitude (Δψ) and in obliquity (Δε), good to a few arcseconds.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Ch. 22.
"""

from dataclasses import dataclass

import numpy as np

from .utils import normalize_degrees, as_float, julian_centuries


@dataclass(frozen=True)
class NutationObliquity:
    """Obliquity and nutation at one instant [deg]."""
    mean_obliquity: float   # ε0
    delta_psi: float        # nutation in longitude Δψ
    delta_epsilon: float    # nutation in obliquity Δε

    @property
    def true_obliquity(self) -> float:
        """ε = ε0 + Δε [deg]."""
        return self.mean_obliquity + self.delta_epsilon


def mean_obliquity(jd):
    """Mean obliquity of the ecliptic ε0 [deg]."""
    T = julian_centuries(jd)
    eps0_arcsec = 84381.448 - 46.8150 * T - 0.00059 * T**2 + 0.001813 * T**3
    return eps0_arcsec / 3600.0


def obliquity_and_nutation(jd) -> NutationObliquity:
    """Mean obliquity and nutation corrections.

    Parameters
    ----------
    jd : float or ndarray — Julian Date

    Returns
    -------
    NutationObliquity — ε0, Δψ, Δε [deg]
    """
    T = julian_centuries(jd)

    # Moon's mean longitude, argument of latitude, ascending node [rad]
    Lp = np.deg2rad(normalize_degrees(218.3164477 + 481267.88123421 * T))
    F = np.deg2rad(normalize_degrees(93.2720950 + 483202.0175 * T))
    omega = np.deg2rad(normalize_degrees(125.04452 - 1934.13626 * T))

    delta_psi = (-17.200 * np.sin(omega) - 1.319 * np.sin(2 * Lp)
                 - 0.227 * np.sin(2 * F) + 0.206 * np.sin(2 * omega)) / 3600.0
    delta_epsilon = (9.202 * np.cos(omega) + 0.573 * np.cos(2 * Lp)
                     + 0.098 * np.cos(2 * F) - 0.090 * np.cos(2 * omega)) / 3600.0

    return NutationObliquity(
        mean_obliquity=as_float(mean_obliquity(jd)),
        delta_psi=as_float(delta_psi),
        delta_epsilon=as_float(delta_epsilon),
    )

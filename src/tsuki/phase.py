"""
tsuki.phase — Lunar Illumination & Phase Name
==============================================

Illuminated fraction from the Sun–Moon elongation, and an 8-way phase label.

The phase angle *g* (Sun–Moon–Earth) is approximated from the geocentric
ecliptic positions, neglecting the Sun/Moon distance ratio::

    cos g = −cos β☾ · cos(λ☾ − λ☉)          k = (1 + cos g) / 2

Waxing vs. waning is decided by a forward difference: the Moon is waxing
when the fraction three minutes later is larger.  This can misjudge the
instant of exact new/full moon, which only ever lands in the "New Moon" /
"Full Moon" buckets anyway.
"""

import numpy as np

from .utils import as_float
from .sun import solar_position
from .moon import lunar_position

# ── Constants ───────────────────────────────────────────────────────────────
PHASE_DELTA_DAYS = 3.0 / (24.0 * 60.0)    # forward-difference step (3 min)

NEW_MOON_MAX = 0.01
QUARTER_MIN = 0.49
QUARTER_MAX = 0.51
FULL_MOON_MIN = 0.99

NEW_MOON = "New Moon"
WAXING_CRESCENT = "Waxing Crescent"
FIRST_QUARTER = "First Quarter"
WAXING_GIBBOUS = "Waxing Gibbous"
FULL_MOON = "Full Moon"
WANING_GIBBOUS = "Waning Gibbous"
LAST_QUARTER = "Last Quarter"
WANING_CRESCENT = "Waning Crescent"

# In cycle order, starting at new moon
PHASE_NAMES = (
    NEW_MOON, WAXING_CRESCENT, FIRST_QUARTER, WAXING_GIBBOUS,
    FULL_MOON, WANING_GIBBOUS, LAST_QUARTER, WANING_CRESCENT,
)


def phase_angle(jd):
    """Phase angle g (Sun–Moon–Earth) [rad, 0..π].

    0 = full Moon, π = new Moon.
    """
    sun = solar_position(jd)
    moon = lunar_position(jd)
    cos_g = -np.cos(np.deg2rad(moon.latitude)) \
        * np.cos(np.deg2rad(moon.longitude - sun.longitude))
    return as_float(np.arccos(np.clip(cos_g, -1.0, 1.0)))


def illuminated_fraction(jd):
    """Fraction of the lunar disk that is illuminated [0..1]."""
    return as_float((1.0 + np.cos(phase_angle(jd))) / 2.0)


def is_waxing(jd, delta_days: float = PHASE_DELTA_DAYS) -> bool:
    """True if the illuminated fraction grows over the next ``delta_days``."""
    return bool(illuminated_fraction(jd + delta_days) > illuminated_fraction(jd))


def classify_phase(fraction: float, waxing: bool) -> str:
    """Name the phase for an illuminated ``fraction``.

    Buckets: [0, 0.01) new, [0.01, 0.49) crescent, [0.49, 0.51] quarter,
    (0.51, 0.99) gibbous, [0.99, 1] full.
    """
    if fraction < NEW_MOON_MAX:
        return NEW_MOON
    elif fraction < QUARTER_MIN:
        return WAXING_CRESCENT if waxing else WANING_CRESCENT
    elif fraction <= QUARTER_MAX:
        return FIRST_QUARTER if waxing else LAST_QUARTER
    elif fraction < FULL_MOON_MIN:
        return WAXING_GIBBOUS if waxing else WANING_GIBBOUS
    else:
        return FULL_MOON


def format_illumination(fraction: float) -> str:
    """Illuminated fraction as a percentage with one decimal, e.g. "42.7"."""
    return f"{fraction * 100.0:.1f}"


def phase_and_illumination(jd: float) -> tuple[str, str]:
    """Phase label and illumination percentage string at ``jd``.

    Returns
    -------
    label : str — one of ``PHASE_NAMES``
    illumination : str — percentage, one decimal, no "%" sign
    """
    fraction = illuminated_fraction(jd)
    label = classify_phase(fraction, is_waxing(jd))
    return label, format_illumination(fraction)

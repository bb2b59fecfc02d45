"""
tsuki — Moon Phase, Illumination & Rise/Set Library
=====================================================

A pure-NumPy engine that computes, for an observer's latitude/longitude and
an instant, the Moon's illuminated fraction, its named phase, and its local
rise and set times, using truncated solar and lunar series with no external
ephemeris::

    clock ─→ Julian Date ─┬─→ sun / moon ─→ phase        ─┐
                          └─→ moon + nutation + GMST      │
                               ─→ topocentric altitude    ├─→ MoonReport
                               ─→ horizon scan + bisection┘

Modules
-------
- **utils**        constants, angle normalisation, Julian Date, GMST
- **civil_time**   clock snapshot, JD ↔ local civil time, local midnight
- **sun**          low-precision solar ecliptic longitude / distance
- **moon**         truncated lunar longitude / latitude / distance series
- **nutation**     mean obliquity, nutation in longitude and obliquity
- **topocentric**  geocentric → topocentric equatorial, lunar altitude
- **phase**        illuminated fraction and 8-way phase label
- **riseset**      moonrise / moonset horizon-crossing search
- **report**       ``MoonReport`` facade

Example
-------
>>> from tsuki import moon_report
>>> r = moon_report(50.27, -119.28)
>>> r.phase, r.illumination, r.rise_time, r.set_time   # doctest: +SKIP
('Waxing Gibbous', '78.4', '3:12 PM', '4:51 AM')
"""

from .utils import (
    normalize_degrees, normalize_radians,
    julian_date, julian_centuries, gmst_deg,
    JD_J2000, JD_UNIX_EPOCH, R_EARTH_KM, HORIZON_ALT_DEG,
)

from .civil_time import (
    LocalMidnight,
    utc_now, local_from_epoch, julian_day, jd_to_local,
    local_midnight, military_to_standard, format_local_time,
    resolve_timezone,
)

from .sun import SolarCoords, solar_position

from .moon import LunarCoords, FundamentalArguments, fundamental_arguments, lunar_position

from .nutation import NutationObliquity, obliquity_and_nutation

from .topocentric import (
    EquatorialCoords,
    ecliptic_to_equatorial, moon_equatorial,
    local_sidereal_time, topocentric_correction, moon_altitude,
)

from .phase import (
    PHASE_NAMES,
    phase_angle, illuminated_fraction, is_waxing,
    classify_phase, format_illumination, phase_and_illumination,
)

from .riseset import (
    RiseSetTimes,
    NOT_AVAILABLE, ALWAYS_ABOVE, ALWAYS_BELOW,
    refine_crossing, scan_horizon_crossings,
    select_daily_crossing, horizon_state, moon_rise_set,
)

from .report import Observer, MoonReport, moon_report, format_report

__version__ = "1.0.0"
__all__ = [
    # ── Constants ──
    "JD_J2000", "JD_UNIX_EPOCH", "R_EARTH_KM", "HORIZON_ALT_DEG", "PHASE_NAMES",
    "NOT_AVAILABLE", "ALWAYS_ABOVE", "ALWAYS_BELOW",
    # ── Facade (recommended entry points) ──
    "Observer", "MoonReport", "moon_report", "format_report",
    # ── Angles / time ──
    "normalize_degrees", "normalize_radians",
    "julian_date", "julian_centuries", "gmst_deg",
    "LocalMidnight", "utc_now", "local_from_epoch", "julian_day", "jd_to_local",
    "local_midnight", "military_to_standard", "format_local_time",
    "resolve_timezone",
    # ── Ephemerides ──
    "SolarCoords", "solar_position",
    "LunarCoords", "FundamentalArguments", "fundamental_arguments", "lunar_position",
    "NutationObliquity", "obliquity_and_nutation",
    # ── Topocentric ──
    "EquatorialCoords", "ecliptic_to_equatorial", "moon_equatorial",
    "local_sidereal_time", "topocentric_correction", "moon_altitude",
    # ── Phase ──
    "phase_angle", "illuminated_fraction", "is_waxing",
    "classify_phase", "format_illumination", "phase_and_illumination",
    # ── Rise / set ──
    "RiseSetTimes", "refine_crossing", "scan_horizon_crossings",
    "select_daily_crossing", "horizon_state", "moon_rise_set",
]

"""
tsuki.riseset — Moonrise / Moonset Search
==========================================

Numerical horizon-crossing search over a two-day window centred on the
query instant:

1. **Coarse scan** — sample the altitude every 5 minutes (one vectorised
   call, the samples are independent) and flag each step where the
   altitude crosses the horizon threshold upward (rise) or downward (set).
2. **Bisection** — refine every flagged step to better than one second,
   with a hard cap of 100 halvings.
3. **Daily selection** — keep crossings inside the observer's local civil
   day ``[midnight, next midnight)`` and report the earliest of each kind.
4. **Sentinels** — when a day has no rise (or set), the altitude at both
   ends of the day decides between "Always Above Horizon", "Always Below
   Horizon" and "N/A".

The search never raises for astronomical input: every path ends in a
formatted local time or one of the three sentinel strings.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .utils import HORIZON_ALT_DEG, DAILY_SECONDS
from .civil_time import local_midnight, format_local_time
from .topocentric import moon_altitude

logger = logging.getLogger(__name__)

# ── Search Parameters ───────────────────────────────────────────────────────
SEARCH_HALF_WINDOW_DAYS = 1.0
SCAN_STEP_DAYS = 5.0 / (24.0 * 60.0)              # 288 samples per day
BISECTION_TOLERANCE_DAYS = 1.0 / DAILY_SECONDS    # 1 second
BISECTION_MAX_ITERATIONS = 100
DAY_END_EPSILON_DAYS = 0.0001

# ── Sentinels ───────────────────────────────────────────────────────────────
NOT_AVAILABLE = "N/A"
ALWAYS_ABOVE = "Always Above Horizon"
ALWAYS_BELOW = "Always Below Horizon"


@dataclass(frozen=True)
class RiseSetTimes:
    """Moonrise / moonset for one local civil day."""
    rise_time: str              # "H:MM AM/PM" or a sentinel
    set_time: str               # "H:MM AM/PM" or a sentinel
    rise_jd: float | None = None
    set_jd: float | None = None
    midnight_converted: bool = True   # False → day bounds are approximate


# ════════════════════════════════════════════════════════════════════════════
#  Root Finding
# ════════════════════════════════════════════════════════════════════════════

def refine_crossing(
    altitude_fn,
    jd_start: float,
    jd_end: float,
    target: float = HORIZON_ALT_DEG,
    tolerance: float = BISECTION_TOLERANCE_DAYS,
    max_iterations: int = BISECTION_MAX_ITERATIONS,
) -> float:
    """Bisect ``[jd_start, jd_end]`` for the instant ``altitude_fn`` equals ``target``.

    Parameters
    ----------
    altitude_fn : callable(jd) -> float — altitude [deg]
    jd_start, jd_end : float — bracketing interval (Julian Dates)
    target : float — altitude to solve for [deg]
    tolerance : float — stop once the bracket is narrower than this [days]
    max_iterations : int — hard cap on halvings

    Returns
    -------
    jd : float — midpoint of the final bracket
    """
    start_diff = altitude_fn(jd_start) - target
    for _ in range(max_iterations):
        if abs(jd_end - jd_start) < tolerance:
            break
        jd_mid = (jd_start + jd_end) / 2.0
        mid_diff = altitude_fn(jd_mid) - target
        if start_diff * mid_diff < 0:
            jd_end = jd_mid
        else:
            jd_start = jd_mid
            start_diff = mid_diff
    return (jd_start + jd_end) / 2.0


def scan_horizon_crossings(
    altitude_fn,
    jd_start: float,
    jd_end: float,
    step: float = SCAN_STEP_DAYS,
    threshold: float = HORIZON_ALT_DEG,
) -> tuple[list[float], list[float]]:
    """Find all threshold crossings of ``altitude_fn`` in ``[jd_start, jd_end]``.

    ``altitude_fn`` must accept an ndarray of Julian Dates for the coarse
    scan and a float for the refinement.

    Returns
    -------
    rises : list[float] — upward crossings, ascending JD
    sets : list[float] — downward crossings, ascending JD
    """
    n_steps = int(np.floor((jd_end - jd_start) / step + 1e-9))
    jds = jd_start + step * np.arange(n_steps + 1)
    alts = np.asarray(altitude_fn(jds), dtype=np.float64)

    prev, cur = alts[:-1], alts[1:]
    rising = np.nonzero((prev < threshold) & (cur >= threshold))[0]
    setting = np.nonzero((prev > threshold) & (cur <= threshold))[0]

    rises = [refine_crossing(altitude_fn, float(jds[k]), float(jds[k + 1]), threshold)
             for k in rising]
    sets = [refine_crossing(altitude_fn, float(jds[k]), float(jds[k + 1]), threshold)
            for k in setting]
    return rises, sets


# ════════════════════════════════════════════════════════════════════════════
#  Daily Selection
# ════════════════════════════════════════════════════════════════════════════

def select_daily_crossing(crossings, day_start: float, day_end: float) -> float | None:
    """Earliest crossing in ``[day_start, day_end)``, or None."""
    in_day = [jd for jd in crossings if day_start <= jd < day_end]
    return min(in_day) if in_day else None


def horizon_state(altitude_fn, day_start: float, day_end: float,
                  threshold: float = HORIZON_ALT_DEG) -> str:
    """Sentinel for a day without a crossing of one kind."""
    alt_start = altitude_fn(day_start)
    alt_end = altitude_fn(day_end - DAY_END_EPSILON_DAYS)
    if alt_start > threshold and alt_end > threshold:
        return ALWAYS_ABOVE
    if alt_start < threshold and alt_end < threshold:
        return ALWAYS_BELOW
    return NOT_AVAILABLE


def local_day_bounds(jd: float, tz=None) -> tuple[float, float, bool]:
    """UTC Julian Dates of the local midnights opening and closing the day of ``jd``.

    Returns
    -------
    day_start, day_end : float
    converted : bool — False if either midnight fell back to an approximation
    """
    today = local_midnight(jd, tz)
    if not today.converted:
        return today.jd, today.jd + 1.0, False
    # midday tomorrow always lies inside tomorrow, whatever the DST offset
    tomorrow = local_midnight(today.jd + 1.5, tz)
    if not tomorrow.converted:
        return today.jd, today.jd + 1.0, False
    return today.jd, tomorrow.jd, True


def moon_rise_set(
    jd_now: float,
    lon_deg: float,
    lat_deg: float,
    tz=None,
    threshold: float = HORIZON_ALT_DEG,
    step: float = SCAN_STEP_DAYS,
    altitude_fn=None,
) -> RiseSetTimes:
    """Moonrise and moonset for the local civil day containing ``jd_now``.

    Parameters
    ----------
    jd_now : float — query instant (UTC Julian Date)
    lon_deg, lat_deg : float — observer east longitude / latitude [deg]
    tz : None | tzinfo | str — local time zone (None = host zone)
    threshold : float — horizon altitude of the Moon's centre [deg]
    step : float — coarse scan step [days]
    altitude_fn : callable(jd) -> altitude [deg], optional
        Defaults to the topocentric lunar altitude for the observer.

    Returns
    -------
    RiseSetTimes
    """
    altitude = altitude_fn or (lambda jd: moon_altitude(jd, lon_deg, lat_deg))

    rises, sets = scan_horizon_crossings(
        altitude,
        jd_now - SEARCH_HALF_WINDOW_DAYS,
        jd_now + SEARCH_HALF_WINDOW_DAYS,
        step=step, threshold=threshold,
    )
    logger.debug("Horizon scan: %d rise / %d set candidates", len(rises), len(sets))

    day_start, day_end, converted = local_day_bounds(jd_now, tz)
    rise_jd = select_daily_crossing(rises, day_start, day_end)
    set_jd = select_daily_crossing(sets, day_start, day_end)

    state = NOT_AVAILABLE
    if rise_jd is None or set_jd is None:
        state = horizon_state(altitude, day_start, day_end, threshold)

    return RiseSetTimes(
        rise_time=format_local_time(rise_jd, tz) if rise_jd is not None else state,
        set_time=format_local_time(set_jd, tz) if set_jd is not None else state,
        rise_jd=rise_jd,
        set_jd=set_jd,
        midnight_converted=converted,
    )

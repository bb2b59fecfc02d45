"""
tsuki.civil_time — Civil Calendar ↔ Julian Date
=================================================

A single civil-calendar abstraction over the host clock and time-zone
database:

- ``utc_now``            — UTC calendar snapshot of the system clock
- ``local_from_epoch``   — local calendar fields from Unix epoch seconds
- ``julian_day``         — calendar datetime → Julian Date (UTC)
- ``jd_to_local``        — Julian Date → local civil datetime
- ``local_midnight``     — UTC Julian Date of the local civil midnight
- ``military_to_standard`` — 24-hour clock → "H:MM AM/PM"

Time zones are given as ``None`` (host zone), a ``tzinfo`` or an IANA name
resolved through pytz.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo

import pytz
from pytz import utc
from pytz.exceptions import AmbiguousTimeError, NonExistentTimeError

from .utils import julian_date, JD_UNIX_EPOCH, DAILY_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalMidnight:
    """Result of a local-midnight lookup.

    ``converted`` is False when the time-zone conversion failed and ``jd``
    is the unconverted approximate Julian Date that was passed in.
    """
    jd: float
    converted: bool = True


def resolve_timezone(tz=None) -> tzinfo | None:
    """Return a tzinfo for ``tz``; ``None`` stays ``None`` (host zone).

    Raises
    ------
    pytz.UnknownTimeZoneError — if ``tz`` is an unknown IANA name
    """
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return pytz.timezone(tz)


# ════════════════════════════════════════════════════════════════════════════
#  Clock & Calendar Fields
# ════════════════════════════════════════════════════════════════════════════

def utc_now() -> datetime:
    """Current system time as an aware UTC datetime."""
    return datetime.now(utc)


def local_from_epoch(seconds: float, tz=None) -> datetime:
    """Local civil datetime (aware) for Unix epoch ``seconds``."""
    utc_dt = datetime.fromtimestamp(seconds, tz=utc)
    zone = resolve_timezone(tz)
    if zone is None:
        return utc_dt.astimezone()
    return utc_dt.astimezone(zone)


def julian_day(dt: datetime) -> float:
    """Julian Date of a calendar datetime.

    Naive datetimes are taken as UTC; aware ones are converted to UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=utc)
    else:
        dt = dt.astimezone(utc)
    seconds = dt.second + dt.microsecond / 1e6
    return julian_date(dt.year, dt.month, dt.day, dt.hour, dt.minute, seconds)


def jd_to_epoch_seconds(jd: float) -> float:
    """Julian Date → Unix epoch seconds."""
    return (jd - JD_UNIX_EPOCH) * DAILY_SECONDS


def jd_to_local(jd: float, tz=None) -> datetime:
    """Julian Date (UTC) → local civil datetime."""
    return local_from_epoch(jd_to_epoch_seconds(jd), tz)


# ════════════════════════════════════════════════════════════════════════════
#  Local Midnight
# ════════════════════════════════════════════════════════════════════════════

def _midnight_utc(seconds: float, zone: tzinfo | None) -> datetime:
    if zone is None:
        # naive local time round-trips through the host zone database
        local = datetime.fromtimestamp(seconds)
        midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
        return datetime.fromtimestamp(midnight.timestamp(), tz=utc)

    local = datetime.fromtimestamp(seconds, tz=utc).astimezone(zone)
    if hasattr(zone, "localize"):
        naive = local.replace(tzinfo=None, hour=0, minute=0, second=0,
                              microsecond=0)
        try:
            aware = zone.localize(naive, is_dst=None)
        except NonExistentTimeError:
            # skipped midnight: first valid instant after the gap
            aware = zone.normalize(zone.localize(naive, is_dst=False))
        except AmbiguousTimeError:
            # repeated midnight: first occurrence
            aware = zone.localize(naive, is_dst=True)
        return aware.astimezone(utc)
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(utc)


def local_midnight(jd_approx: float, tz=None) -> LocalMidnight:
    """UTC Julian Date of the local midnight starting the civil day of ``jd_approx``.

    A midnight skipped by a DST transition resolves to the first valid
    instant after the gap, and a repeated one to its first occurrence, the
    same as the host-zone path.  Conversion failures (out-of-range
    instants) do not raise: they are logged and the approximate Julian
    Date is returned with ``converted=False``.

    Parameters
    ----------
    jd_approx : float — any instant within the local civil day (UTC JD)
    tz : None | tzinfo | str — time zone (None = host zone)

    Returns
    -------
    LocalMidnight
    """
    zone = resolve_timezone(tz)
    try:
        midnight = _midnight_utc(jd_to_epoch_seconds(jd_approx), zone)
    except (OverflowError, OSError, ValueError) as ex:
        logger.warning("Local midnight conversion failed for JD %.6f (%s); "
                       "using the unconverted Julian Date", jd_approx, ex)
        return LocalMidnight(jd=jd_approx, converted=False)
    return LocalMidnight(jd=julian_day(midnight), converted=True)


# ════════════════════════════════════════════════════════════════════════════
#  Formatting
# ════════════════════════════════════════════════════════════════════════════

def military_to_standard(hour: int, minute: int) -> str:
    """24-hour clock fields → "H:MM AM/PM" (0 and 24 → 12).

    The hour carries no leading zero ("9:30 AM", not "09:30 AM").
    """
    ampm = "PM" if hour >= 12 else "AM"
    if hour == 0 or hour == 24:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{minute:02d} {ampm}"


def format_local_time(jd: float, tz=None) -> str:
    """Julian Date → local "H:MM AM/PM" (seconds truncated)."""
    local = jd_to_local(jd, tz)
    return military_to_standard(local.hour, local.minute)

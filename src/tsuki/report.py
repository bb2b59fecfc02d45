"""
tsuki.report — Moon Report Facade
==================================

One call turns an observer's coordinates and an instant into the four
strings a display needs: phase name, illumination percentage, moonrise
and moonset.
"""

import logging
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from .civil_time import utc_now, julian_day
from .phase import phase_and_illumination
from .riseset import moon_rise_set

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observer:
    """Observer location on the Earth's surface.

    Parameters
    ----------
    latitude : float — geodetic latitude [deg], −90..90 (north positive)
    longitude : float — longitude [deg], −180..180 (east positive)
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        if not (np.isfinite(self.latitude) and np.isfinite(self.longitude)):
            raise ValueError("Observer coordinates must be finite numbers.")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude {self.latitude} outside [-90, 90].")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude {self.longitude} outside [-180, 180].")


@dataclass(frozen=True)
class MoonReport:
    """Moon phase and rise/set summary for one observer and instant."""
    phase: str                  # e.g. "Waxing Gibbous"
    illumination: str           # percentage, one decimal, no "%"
    rise_time: str              # "H:MM AM/PM" or sentinel
    set_time: str               # "H:MM AM/PM" or sentinel
    midnight_converted: bool = True

    @classmethod
    def for_observer(cls, observer: Observer, when: datetime | None = None,
                     tz=None) -> "MoonReport":
        """Compute the report for ``observer`` at ``when`` (default: now).

        Parameters
        ----------
        observer : Observer
        when : datetime, optional — query instant; naive values are UTC
        tz : None | tzinfo | str — zone for the local day and the printed
            times (None = host zone)
        """
        jd = julian_day(when if when is not None else utc_now())
        phase, illumination = phase_and_illumination(jd)
        rs = moon_rise_set(jd, observer.longitude, observer.latitude, tz=tz)
        logger.debug("Moon report at JD %.5f: %s, %s%%, rise %s, set %s",
                     jd, phase, illumination, rs.rise_time, rs.set_time)
        return cls(
            phase=phase,
            illumination=illumination,
            rise_time=rs.rise_time,
            set_time=rs.set_time,
            midnight_converted=rs.midnight_converted,
        )


def moon_report(latitude: float, longitude: float,
                when: datetime | None = None, tz=None) -> MoonReport:
    """Moon report for ``(latitude, longitude)`` [deg] at ``when`` (default: now)."""
    return MoonReport.for_observer(Observer(latitude, longitude), when=when, tz=tz)


def format_report(report: MoonReport, observer: Observer | None = None) -> str:
    """Format a MoonReport as a human-readable text block."""
    lines = []
    if observer is not None:
        lines.append(f"Location: {observer.latitude:.4f}°, {observer.longitude:.4f}°")
    lines.append(f"Phase: {report.phase}")
    lines.append(f"Illumination: {report.illumination}%")
    lines.append(f"Moonrise: {report.rise_time}")
    lines.append(f"Moonset: {report.set_time}")
    if not report.midnight_converted:
        lines.append("(local day boundaries approximated)")
    return "\n".join(lines)

"""
example_moon_report.py — Demonstration of the tsuki Library
============================================================

Prints today's Moon report for an observer, then walks through the
intermediate quantities the report is built from.

Run:  python -m tsuki.example_moon_report [latitude longitude] [--tz ZONE]
"""

import argparse
import logging

import numpy as np

from tsuki import (
    Observer, MoonReport, format_report,
    utc_now, julian_day, lunar_position, solar_position,
    moon_altitude, illuminated_fraction,
)

# Kelowna, BC
DEFAULT_LATITUDE = 50.271790
DEFAULT_LONGITUDE = -119.276505


def main(latitude: float = DEFAULT_LATITUDE, longitude: float = DEFAULT_LONGITUDE,
         tz=None, when=None) -> str:
    observer = Observer(latitude, longitude)
    when = when if when is not None else utc_now()
    jd = julian_day(when)

    report = MoonReport.for_observer(observer, when=when, tz=tz)
    text = format_report(report, observer)

    sun = solar_position(jd)
    moon = lunar_position(jd)
    lines = [
        "=" * 60,
        "  tsuki — Moon Report",
        "=" * 60,
        text,
        "-" * 60,
        f"  Julian Date:        {jd:.5f}",
        f"  Sun longitude:      {sun.longitude:8.3f}°   R = {sun.radius_vector:.5f} AU",
        f"  Moon longitude:     {moon.longitude:8.3f}°",
        f"  Moon latitude:      {moon.latitude:8.3f}°",
        f"  Moon distance:      {moon.radius_vector:8.0f} km",
        f"  Elongation:         {np.mod(moon.longitude - sun.longitude, 360.0):8.3f}°",
        f"  Illuminated:        {illuminated_fraction(jd):8.4f}",
        f"  Altitude now:       {moon_altitude(jd, longitude, latitude):8.3f}°",
    ]
    output = "\n".join(lines)
    print(output)
    return output


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Print the Moon report for an observer.")
    ap.add_argument("latitude", type=float, nargs="?", default=DEFAULT_LATITUDE,
                    help="observer latitude [deg], north positive")
    ap.add_argument("longitude", type=float, nargs="?", default=DEFAULT_LONGITUDE,
                    help="observer longitude [deg], east positive")
    ap.add_argument("--tz", default=None,
                    help="IANA time zone for the local day (default: host zone)")
    return ap.parse_args(argv)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args()
    main(args.latitude, args.longitude, tz=args.tz)

"""Low precision position of the sun, good to around a degree. Based on the short series in
the Astronomical Almanac rather than the full VSOP87 terms."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from math import sin, cos

from sunmoon.coordinates import EclipticCoordinate
from sunmoon.general import DEG_TO_RAD, TWO_PI, J2000, normalize_degrees
from sunmoon.timeconv import day_of_year

# pylint: disable=invalid-name


def sun_position(jd):
    """Returns the ecliptic position of the sun at the supplied Julian date. Latitude is always
    zero and the orbit is treated as a circle of one AU."""
    n = jd - J2000
    # Mean longitude and mean anomaly.
    L = (280.460 + 0.9856474 * n) % 360.0
    g = ((357.528 + 0.9856003 * n) % 360.0) * DEG_TO_RAD
    longitude = L + 1.915 * sin(g) + 0.020 * sin(2 * g)
    return EclipticCoordinate(normalize_degrees(longitude), 0.0, distance_au=1.0)


def sun_longitude(jd):
    """Returns the ecliptic longitude of the sun in degrees [0, 360)."""
    return sun_position(jd).longitude


def approximate_solar_declination(instant):
    """Returns a coarse seasonal approximation of the sun's declination in degrees, ranging
    between -23.5 at the December solstice and +23.5 at the June solstice. Only valid for the
    sun, and too coarse for placing it; use horizontal.ecliptic_to_horizontal for that."""
    return -23.5 * cos(TWO_PI / 365.0 * (day_of_year(instant) + 10))

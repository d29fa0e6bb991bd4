"""Transformation of ecliptic positions into the altitude and azimuth seen by a ground observer.
This is the only path used to place either the sun or the moon in the sky."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
from math import sin, cos, tan, asin, acos, atan2, copysign

from sunmoon.coordinates import EquatorialCoordinate, HorizontalCoordinate
from sunmoon.general import (DEG_TO_RAD, RAD_TO_DEG, TWO_PI, J2000, clamp, normalize_degrees,
                             normalize_radians, signed_radians)
from sunmoon.timeconv import julian_centuries_since_j2000

# pylint: disable=invalid-name

log = logging.getLogger(__name__)

# Fixed obliquity of the ecliptic, ignoring its slow secular drift.
OBLIQUITY = 23.439 * DEG_TO_RAD

# Below this the azimuth denominator is treated as zero.
_SINGULAR_EPSILON = 1e-12


def ecliptic_to_equatorial(ecliptic, obliquity=OBLIQUITY):
    """Returns a corresponding EquatorialCoordinate for an EclipticCoordinate, given the obliquity
    of the ecliptic in radians. Right ascension is returned in [0, 2*PI)."""
    lng = ecliptic.longitude * DEG_TO_RAD
    lat = ecliptic.latitude * DEG_TO_RAD
    ra = atan2(sin(lng) * cos(obliquity) - tan(lat) * sin(obliquity), cos(lng))
    decl = asin(sin(lat) * cos(obliquity) + cos(lat) * sin(obliquity) * sin(lng))
    return EquatorialCoordinate(normalize_radians(ra), decl)


def greenwich_mean_sidereal_time(jd):
    """Returns the Greenwich mean sidereal time in radians for a Julian date."""
    T = julian_centuries_since_j2000(jd)
    gmst = (280.46061837 + 360.98564736629 * (jd - J2000) + 0.000387933 * T * T) % 360.0
    return normalize_radians(gmst * DEG_TO_RAD)


def local_sidereal_time(jd, observer):
    """Returns the local sidereal time in radians [0, 2*PI) at the observer's longitude."""
    return normalize_radians(greenwich_mean_sidereal_time(jd) + observer.lng)


def equatorial_to_horizontal(jd, equatorial, observer):
    """Returns the HorizontalCoordinate of an equatorial position seen by observer at the
    supplied Julian date."""
    # Hour angle is positive west of the meridian.
    hour_angle = signed_radians(local_sidereal_time(jd, observer) - equatorial.ra)
    lat = observer.lat
    decl = equatorial.decl

    sin_alt = sin(lat) * sin(decl) + cos(lat) * cos(decl) * cos(hour_angle)
    altitude = asin(clamp(sin_alt, -1.0, 1.0))

    numerator = sin(decl) - sin(altitude) * sin(lat)
    denominator = cos(altitude) * cos(lat)
    if abs(denominator) < _SINGULAR_EPSILON:
        # Zenith, nadir, or an observer on a pole: any azimuth is correct so pick north or south.
        log.debug('Azimuth singular at jd=%f (altitude=%f, latitude=%f)',
                  jd, altitude * RAD_TO_DEG, observer.latitude)
        cos_az = copysign(1.0, numerator)
    else:
        cos_az = numerator / denominator
        if cos_az < -1.0 or cos_az > 1.0:
            log.debug('Clamping azimuth cosine %r at jd=%f', cos_az, jd)
            cos_az = clamp(cos_az, -1.0, 1.0)
    azimuth = acos(cos_az)
    # West of the meridian the object is in the afternoon half of the sky.
    if hour_angle > 0:
        azimuth = TWO_PI - azimuth

    return HorizontalCoordinate(altitude * RAD_TO_DEG, normalize_degrees(azimuth * RAD_TO_DEG))


def ecliptic_to_horizontal(jd, ecliptic, observer):
    """Returns the HorizontalCoordinate of an ecliptic position seen by observer at the supplied
    Julian date."""
    return equatorial_to_horizontal(jd, ecliptic_to_equatorial(ecliptic), observer)

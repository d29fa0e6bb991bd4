"""Low precision position and phase of the moon. Uses only the largest few periodic terms of
the full lunar theory, which is enough for roughly half a degree in longitude."""

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
from sunmoon.general import DEG_TO_RAD, normalize_degrees
from sunmoon.solar import sun_longitude
from sunmoon.timeconv import julian_centuries_since_j2000

# In many case we wish to use standard abbreviations that contain capitals or are less than
# three characters, and align columns in the data matrices. Disable pylint warnings for these.
# pylint: disable=bad-whitespace,invalid-name

# Periodic terms for longitude as (coefficient, D, M, M', F) multipliers.
LONGITUDE_TERMS = (
    ( 6.289,  0,  0,  1,  0 ),
    ( 1.274,  2,  0, -1,  0 ),
    ( 0.658,  2,  0,  0,  0 ),
    ( 0.214,  0,  0,  2,  0 ),
    ( -0.186, 0,  1,  0,  0 ),
)

# Periodic terms for latitude, same layout.
LATITUDE_TERMS = (
    ( 5.128,  0,  0,  0,  1 ),
    ( 0.280,  0,  0,  1,  1 ),
    ( 0.277,  0,  0,  1, -1 ),
    ( 0.173,  2,  0,  0, -1 ),
)


class MoonPosition:
    """Ecliptic longitude and latitude of the moon plus its phase angle from the sun, all in
    degrees."""
    def __init__(self, longitude, latitude, phase_angle):
        self.longitude = longitude
        self.latitude = latitude
        self.phase_angle = phase_angle

    @property
    def illuminated_fraction(self):
        """Fraction of the disk that is lit, ignoring the small difference between elongation
        and the true phase angle."""
        return (1.0 - cos(self.phase_angle * DEG_TO_RAD)) / 2.0

    @property
    def waxing(self):
        return self.phase_angle < 180.0

    def ecliptic(self):
        return EclipticCoordinate(self.longitude, self.latitude)

    def __repr__(self):
        return 'MoonPosition(lng={:.4f}, lat={:.4f}, phase={:.4f})'.format(
            self.longitude, self.latitude, self.phase_angle)

    def __eq__(self, other):
        if not isinstance(other, MoonPosition):
            return NotImplemented
        return (self.longitude == other.longitude
                and self.latitude == other.latitude
                and self.phase_angle == other.phase_angle)


def _sum_terms(terms, D, M, Mdash, F):
    """Accumulates a series of sine terms given the fundamental arguments in radians."""
    return sum(coef * sin(d * D + m * M + md * Mdash + f * F) for coef, d, m, md, f in terms)


def moon_ecliptic_position(jd):
    """Returns the ecliptic coordinates of the moon at the supplied Julian date."""
    # Time in centuries
    T = julian_centuries_since_j2000(jd)
    # Moon's mean longitude.
    L = (218.316 + 481267.881 * T) % 360.0
    # Mean elongation of the moon.
    D = ((297.850 + 445267.112 * T) % 360.0) * DEG_TO_RAD
    # Sun's mean anomaly
    M = ((357.529 + 35999.050 * T) % 360.0) * DEG_TO_RAD
    # Moon's mean anomaly
    Mdash = ((134.963 + 477198.868 * T) % 360.0) * DEG_TO_RAD
    # Moon's argument of latitude
    F = ((93.272 + 483202.018 * T) % 360.0) * DEG_TO_RAD

    longitude = normalize_degrees(L + _sum_terms(LONGITUDE_TERMS, D, M, Mdash, F))
    latitude = _sum_terms(LATITUDE_TERMS, D, M, Mdash, F)
    return EclipticCoordinate(longitude, latitude)


def phase_angle(jd):
    """Returns the angle in degrees [0, 360) of the moon east of the sun along the ecliptic,
    zero at new moon and 180 at full moon."""
    return moon_position(jd).phase_angle


def moon_position(jd):
    """Returns the MoonPosition at the supplied Julian date."""
    ecliptic = moon_ecliptic_position(jd)
    phase = normalize_degrees(ecliptic.longitude - sun_longitude(jd))
    return MoonPosition(ecliptic.longitude, ecliptic.latitude, phase)

"""Value objects for the ecliptic, equatorial, and horizontal coordinate systems and for the
ground observer."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from math import sin, cos, isfinite

from sunmoon.general import DEG_TO_RAD, AstronomyError

# pylint: disable=invalid-name


class EclipticCoordinate:
    """An ecliptic coordinate, expressed as longitude and latitude in degrees with an optional
    distance in astronomical units."""
    def __init__(self, longitude, latitude=0.0, distance_au=None):
        self.longitude = longitude
        self.latitude = latitude
        self.distance_au = distance_au

    def __repr__(self):
        return 'EclipticCoordinate(lng={:.4f}, lat={:.4f}, au={})'.format(
            self.longitude, self.latitude, self.distance_au)

    def __eq__(self, other):
        if not isinstance(other, EclipticCoordinate):
            return NotImplemented
        return (self.longitude == other.longitude
                and self.latitude == other.latitude
                and self.distance_au == other.distance_au)


class EquatorialCoordinate:
    """An equatorial coordinate, expressed as declination and right ascension in radians."""
    def __init__(self, right_ascension, declination):
        self.ra = right_ascension
        self.decl = declination

    def __repr__(self):
        return 'EquatorialCoordinate(ra={:.6f}, decl={:.6f})'.format(self.ra, self.decl)


class HorizontalCoordinate:
    """A position in the sky of a specific observer, expressed as altitude above the horizon and
    azimuth clockwise from north, both in degrees."""
    def __init__(self, altitude, azimuth):
        self.altitude = altitude
        self.azimuth = azimuth

    @property
    def is_above_horizon(self):
        return self.altitude > 0.0

    def to_cartesian(self, distance):
        """Returns the (x, y, z) position at the supplied distance from the observer, with x
        pointing east, y up, and z south."""
        alt = self.altitude * DEG_TO_RAD
        az = self.azimuth * DEG_TO_RAD
        return (distance * cos(alt) * sin(az),
                distance * sin(alt),
                -distance * cos(alt) * cos(az))

    def __repr__(self):
        return 'HorizontalCoordinate(alt={:.4f}, az={:.4f})'.format(self.altitude, self.azimuth)

    def __eq__(self, other):
        if not isinstance(other, HorizontalCoordinate):
            return NotImplemented
        return self.altitude == other.altitude and self.azimuth == other.azimuth


class ObserverLocation:
    """A fixed position on the surface of the earth, in degrees with longitude positive east."""
    def __init__(self, latitude, longitude):
        if not (isfinite(latitude) and -90.0 <= latitude <= 90.0):
            raise AstronomyError('Observer latitude must be in [-90, 90], got {}'.format(latitude))
        if not (isfinite(longitude) and -180.0 <= longitude <= 180.0):
            raise AstronomyError(
                'Observer longitude must be in [-180, 180], got {}'.format(longitude))
        self.latitude = latitude
        self.longitude = longitude

    @property
    def lat(self):
        """Latitude in radians."""
        return self.latitude * DEG_TO_RAD

    @property
    def lng(self):
        """Longitude in radians, positive east."""
        return self.longitude * DEG_TO_RAD

    def __repr__(self):
        return 'ObserverLocation(lat={}, lng={})'.format(self.latitude, self.longitude)

    def __eq__(self, other):
        if not isinstance(other, ObserverLocation):
            return NotImplemented
        return self.latitude == other.latitude and self.longitude == other.longitude

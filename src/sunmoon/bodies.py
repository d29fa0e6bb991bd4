"""Sun and moon objects that tie the position calculators to an observer, including the times
each body rises, transits, and sets. The event search follows the algorithm in "Astronomical
Algorithms" by Jean Meeus, driven by the low precision positions rather than the full theories."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
from math import sin, cos, asin, acos, pi

from scipy import interpolate

from sunmoon.config import MOON_RISE_ALTITUDE, SUN_RISE_ALTITUDE
from sunmoon.general import DEG_TO_RAD, JD_OFFSET, TWO_PI, clamp, signed_radians
from sunmoon.horizontal import (ecliptic_to_equatorial, ecliptic_to_horizontal,
                                greenwich_mean_sidereal_time)
from sunmoon.lunar import moon_ecliptic_position, moon_position
from sunmoon.solar import sun_position
from sunmoon.timeconv import julian_date_to_datetime, to_julian_date

# pylint: disable=invalid-name

log = logging.getLogger(__name__)

# Sidereal radians the earth turns through in one solar day.
SIDEREAL_RATE = 6.30038809259

# Largest altitude error, in radians, accepted for a refined rise or set.
MAX_HORIZON_ERROR = 0.1 * DEG_TO_RAD


class Interpolator:
    """A convenient object oriented wrapper around the cubic interpolation provided by scipy."""
    def __init__(self, x_values, y_values):
        self.interp = interpolate.splrep(x_values, y_values, k=min(3, len(x_values)-1))

    def at(self, x):
        """Returns the interpolated y value at position x."""
        return interpolate.splev([x], self.interp)[0]


class AngularInterpolator:
    """A cubic interpolator over y values that have be folded into the range [0, 2*PI>."""
    def __init__(self, x_values, y_values):
        # Need to unfold any y values that look like they span the max or min limit.
        clean_y_values = []
        for y in y_values:
            if clean_y_values:
                while clean_y_values[-1] - y > pi:
                    y += TWO_PI
                while y - clean_y_values[-1] > pi:
                    y -= TWO_PI
            clean_y_values.append(y)
        self.interp = interpolate.splrep(x_values, clean_y_values, k=min(3, len(x_values)-1))

    def at(self, x):
        """Returns the interpolated y value at position x."""
        return interpolate.splev([x], self.interp)[0] % TWO_PI


class Body:
    """General calculations for an astronomical body."""
    name = 'body'

    def __init__(self, apparent_altitude):
        # The apparent altitude at which the body sets and rises, in radians.
        self.apparent_altitude = apparent_altitude

    def ecliptic_position(self, jd):
        """Returns the EclipticCoordinate of the body at a Julian date."""
        raise NotImplementedError

    def equatorial_position(self, jd):
        return ecliptic_to_equatorial(self.ecliptic_position(jd))

    def horizontal_position(self, instant, observer):
        """Returns the HorizontalCoordinate of the body seen by observer at a datetime."""
        jd = to_julian_date(instant)
        return ecliptic_to_horizontal(jd, self.ecliptic_position(jd), observer)

    def events(self, min_date, max_date, observer):
        """Calculates the rise, transit, and set times within the specified UTC dates for the
        supplied ObserverLocation, returning as a list of (datetime, event_type) tuples where
        event_type is 'rise', 'transit', or 'set' and all datetimes are in UTC."""
        if max_date < min_date:
            raise ValueError('Max date {} is before min date {}'.format(max_date, min_date))

        # Always calculate an extra day each side to allow interpolation - a date range of a single
        # date uses 3 points: the midnights at the start of the date plus 2 additional ones.
        first_midnight = min_date.toordinal() - 1 + JD_OFFSET
        midnights = [first_midnight + i for i in range((max_date - min_date).days + 3)]

        eq_positions = [self.equatorial_position(jd) for jd in midnights]
        events = self._events_from_positions(eq_positions, first_midnight, observer)
        return [(julian_date_to_datetime(event[0]), event[1]) for event in events]

    def _events_from_positions(self, equatorial_positions, start_midnight, observer):
        """Given a list of equatorial positions for the body on sequential midnights starting at
        start_midnight, calculates the rise, transit, and set times for all days except the first
        and last, returning as a list of (jd, event_type) tuples where event_type is 'rise',
        'transit', or 'set'."""

        # Based on the algorithm in Astronomical Algoriths, pp101, with longitude positive east.
        output = []
        lat = observer.lat
        lng = observer.lng

        # Set up spline interpolation on the equatorial elements.
        midnights = [start_midnight + i for i in range(len(equatorial_positions))]
        decl_interp = Interpolator(midnights, [eq.decl for eq in equatorial_positions])
        ra_interp = AngularInterpolator(midnights, [eq.ra for eq in equatorial_positions])

        # Iterate through the non-start/end days where we have enough data to interpolate.
        for i in range(1, len(equatorial_positions) - 1):
            eq = equatorial_positions[i]
            midnight = midnights[i]

            # Check the object actually passes the horizon
            cos_H0 = ((sin(self.apparent_altitude) - (sin(lat) * sin(eq.decl)))
                      / (cos(lat) * cos(eq.decl)))
            if cos_H0 < -1.0 or cos_H0 > 1.0:
                # Object must never rise or set, don't add events for this day (not even transit).
                log.debug('%s does not cross the horizon on %s', self.name,
                          julian_date_to_datetime(midnight).date())
                continue

            # First get approximate times
            theta0 = greenwich_mean_sidereal_time(midnight)
            H0 = acos(cos_H0)
            transit = (eq.ra - lng - theta0) / TWO_PI % 1.0
            rise = (transit - H0 / TWO_PI) % 1.0
            set_ = (transit + H0 / TWO_PI) % 1.0

            def transit_step(m, midnight=midnight, theta0=theta0):
                alpha = ra_interp.at(midnight + m)
                return m - signed_radians(theta0 + SIDEREAL_RATE * m + lng - alpha) / TWO_PI

            def horizon_step(m, midnight=midnight, theta0=theta0):
                return self._corrected(m, midnight, theta0, observer, ra_interp, decl_interp)

            def on_horizon(m, midnight=midnight, theta0=theta0):
                h = self._altitude(m, midnight, theta0, observer, ra_interp, decl_interp)
                return abs(h - self.apparent_altitude) < MAX_HORIZON_ERROR

            # Then correct each estimate, keeping only events that really fall within this day.
            events = [(midnight + m, 'transit') for m in self._within_day(transit, transit_step)]
            for estimate, event_type in ((rise, 'rise'), (set_, 'set')):
                for m in self._within_day(estimate, horizon_step):
                    if on_horizon(m):
                        events.append((midnight + m, event_type))
                    else:
                        log.debug('Discarding %s %s that does not converge on the horizon',
                                  self.name, event_type)
            events.sort(key=lambda tup: tup[0])
            output.extend(events)
        return output

    @staticmethod
    def _within_day(estimate, step):
        """Refines an estimated day fraction along with the same estimate on the days either side,
        returning the distinct refined fractions that land in [0, 1). The moon's day is longer than
        a solar day so once a month this is empty, and an estimate near midnight may only converge
        to the event it belongs to when started from the neighbouring day."""
        found = []
        for fraction in (estimate - 1.0, estimate, estimate + 1.0):
            for _ in range(3):
                fraction = step(fraction)
            if 0.0 <= fraction < 1.0 and all(abs(fraction - f) > 0.01 for f in found):
                found.append(fraction)
        return found

    @staticmethod
    def _altitude(fraction, midnight, theta0, observer, ra_interp, decl_interp):
        """Returns the interpolated altitude in radians at a fraction of the day."""
        alpha = ra_interp.at(midnight + fraction)
        delta = decl_interp.at(midnight + fraction)
        H = theta0 + SIDEREAL_RATE * fraction + observer.lng - alpha
        return asin(clamp(sin(delta) * sin(observer.lat) + cos(observer.lat) * cos(delta) * cos(H),
                          -1.0, 1.0))

    def _corrected(self, fraction, midnight, theta0, observer, ra_interp, decl_interp):
        """Returns an improved day fraction for a rise or set estimated at fraction."""
        alpha = ra_interp.at(midnight + fraction)
        delta = decl_interp.at(midnight + fraction)
        H = theta0 + SIDEREAL_RATE * fraction + observer.lng - alpha
        h = asin(clamp(sin(delta) * sin(observer.lat) + cos(observer.lat) * cos(delta) * cos(H),
                       -1.0, 1.0))
        return fraction + ((h - self.apparent_altitude)
                           / (TWO_PI * cos(delta) * cos(observer.lat) * sin(H)))


class Sun(Body):
    """Calculations for the position of the sun."""
    name = 'sun'

    def __init__(self):
        super().__init__(SUN_RISE_ALTITUDE * DEG_TO_RAD)

    def ecliptic_position(self, jd):
        return sun_position(jd)


class Moon(Body):
    """Calculations for the position and phase of the moon."""
    name = 'moon'

    def __init__(self):
        super().__init__(MOON_RISE_ALTITUDE * DEG_TO_RAD)

    def ecliptic_position(self, jd):
        return moon_ecliptic_position(jd)

    def phase(self, instant):
        """Returns the MoonPosition, including phase angle, for a datetime."""
        return moon_position(to_julian_date(instant))

"""The functions a rendering client calls once per update to position the sun and moon, plus a
snapshot of everything a single tick needs.

Run as a script to print the current state for the configured observer."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
from datetime import datetime

from dateutil import tz

from sunmoon.clock import is_daytime, local_solar_time
from sunmoon.config import DEFAULT_OBSERVER, observer_from_environment
from sunmoon.coordinates import EclipticCoordinate
from sunmoon.horizontal import ecliptic_to_horizontal
from sunmoon.lunar import moon_position
from sunmoon.phases import classify_phase
from sunmoon.solar import sun_position
from sunmoon.timeconv import as_utc, to_julian_date

log = logging.getLogger(__name__)


def compute_sun_longitude(instant):
    """Returns the ecliptic longitude of the sun in degrees [0, 360) at a datetime."""
    return sun_position(to_julian_date(instant)).longitude


def compute_moon_position(instant):
    """Returns the MoonPosition (longitude, latitude, phase angle in degrees) at a datetime."""
    return moon_position(to_julian_date(instant))


def compute_horizontal(instant, ecliptic_longitude, ecliptic_latitude, observer=DEFAULT_OBSERVER):
    """Returns the HorizontalCoordinate seen by observer at a datetime for a body at the supplied
    ecliptic longitude and latitude in degrees."""
    return ecliptic_to_horizontal(to_julian_date(instant),
                                  EclipticCoordinate(ecliptic_longitude, ecliptic_latitude),
                                  observer)


class SkyState:
    """Everything computed for a single update of the display."""
    def __init__(self, instant, observer, ground_view=True):
        self.instant = as_utc(instant)
        self.observer = observer
        self.jd = to_julian_date(self.instant)
        self.sun = sun_position(self.jd)
        self.moon = moon_position(self.jd)
        self.phase = classify_phase(self.moon.phase_angle)
        self.local_time = local_solar_time(self.instant, observer)
        self.daytime = is_daytime(self.instant, observer)
        # Horizontal positions are only needed when looking from the ground.
        self.sun_horizontal = None
        self.moon_horizontal = None
        if ground_view:
            self.sun_horizontal = ecliptic_to_horizontal(self.jd, self.sun, observer)
            self.moon_horizontal = ecliptic_to_horizontal(self.jd, self.moon.ecliptic(), observer)

    def summary_lines(self):
        """Returns a list of human readable lines describing the state."""
        lines = [
            'Time (UTC):       {}'.format(self.instant.isoformat()),
            'Julian date:      {:.5f}'.format(self.jd),
            'Local solar time: {:05.2f}h ({})'.format(self.local_time,
                                                      'day' if self.daytime else 'night'),
            'Sun longitude:    {:7.3f}'.format(self.sun.longitude),
            'Moon longitude:   {:7.3f}  latitude {:+.3f}'.format(self.moon.longitude,
                                                                  self.moon.latitude),
            'Phase:            {} ({:.1f}, {:.0%} lit)'.format(self.phase.name,
                                                               self.moon.phase_angle,
                                                               self.moon.illuminated_fraction),
        ]
        for name, horizontal in (('Sun', self.sun_horizontal), ('Moon', self.moon_horizontal)):
            if horizontal is not None:
                lines.append('{:<18}alt {:+7.3f}  az {:7.3f}{}'.format(
                    name + ' in sky:', horizontal.altitude, horizontal.azimuth,
                    '' if horizontal.is_above_horizon else '  (below horizon)'))
        return lines


def sky_state(instant, observer=DEFAULT_OBSERVER, ground_view=True):
    """Returns the SkyState for one tick at the supplied datetime."""
    return SkyState(instant, observer, ground_view)


def positions_between(start, stop, step, observer=DEFAULT_OBSERVER, ground_view=True):
    """Generates a SkyState for each instant from start (inclusive) to stop (exclusive) in
    increments of the timedelta step."""
    if step.total_seconds() <= 0:
        raise ValueError('Step must be positive, got {}'.format(step))
    instant = start
    while instant < stop:
        yield SkyState(instant, observer, ground_view)
        instant += step


if __name__ == '__main__':
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S"
    )
    state = sky_state(datetime.now(tz.UTC), observer_from_environment())
    log.info("Computed sky for %s", state.observer)
    print('\n'.join(state.summary_lines()))

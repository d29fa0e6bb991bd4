"""The simulation clock a rendering client threads through each update, plus the local solar time
helpers the ground view uses to decide between day and night."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
from datetime import datetime, timedelta
from math import isfinite

from dateutil import tz

from sunmoon.config import DAYTIME_END_HOUR, DAYTIME_START_HOUR, DEFAULT_TIME_SPEED
from sunmoon.coordinates import ObserverLocation
from sunmoon.general import AstronomyError
from sunmoon.timeconv import as_utc

log = logging.getLogger(__name__)

SECONDS_IN_HOUR = 3600


class SimulationClock:
    """An immutable simulated point in time together with how it should advance. Every change
    returns a new clock so the caller decides which value is current."""

    def __init__(
        self,
        instant: datetime,
        speed: float = DEFAULT_TIME_SPEED,
        paused: bool = False,
        real_time: bool = False,
    ) -> None:
        if not isfinite(speed) or speed < 0:
            raise AstronomyError(f"Clock speed must be finite and non-negative, got {speed}")
        self.instant = as_utc(instant)
        self.speed = speed
        self.paused = paused
        self.real_time = real_time

    @staticmethod
    def starting_now(speed: float = DEFAULT_TIME_SPEED) -> "SimulationClock":
        """Returns a running clock set to the current UTC time."""
        return SimulationClock(datetime.now(tz.UTC), speed=speed)

    def _replace(self, **changes) -> "SimulationClock":
        fields = {
            "instant": self.instant,
            "speed": self.speed,
            "paused": self.paused,
            "real_time": self.real_time,
        }
        fields.update(changes)
        return SimulationClock(**fields)

    def advanced(self, elapsed_seconds: float) -> "SimulationClock":
        """Returns the clock after elapsed_seconds of real time. In real time mode the simulated
        time moves by the same amount, otherwise by speed simulated hours per real second."""
        if self.paused:
            return self
        if self.real_time:
            step = timedelta(seconds=elapsed_seconds)
        else:
            step = timedelta(seconds=elapsed_seconds * self.speed * SECONDS_IN_HOUR)
        log.debug("Advancing clock from %s by %s", self.instant.isoformat(), step)
        return self._replace(instant=self.instant + step)

    def paused_clock(self) -> "SimulationClock":
        return self._replace(paused=True)

    def resumed(self) -> "SimulationClock":
        return self._replace(paused=False)

    def toggled(self) -> "SimulationClock":
        """Returns a clock with the pause state flipped."""
        return self._replace(paused=not self.paused)

    def with_speed(self, speed: float) -> "SimulationClock":
        return self._replace(speed=speed)

    def with_real_time(self, real_time: bool) -> "SimulationClock":
        return self._replace(real_time=real_time)

    def __repr__(self):
        ret = f"SimulationClock: {self.instant.isoformat()}"
        if self.real_time:
            ret += " real time"
        else:
            ret += f" x{self.speed}h/s"
        if self.paused:
            ret += " (paused)"
        return ret

    def __eq__(self, other):
        if not isinstance(other, SimulationClock):
            return NotImplemented
        return (
            self.instant == other.instant
            and self.speed == other.speed
            and self.paused == other.paused
            and self.real_time == other.real_time
        )


def local_solar_time(instant: datetime, observer: ObserverLocation) -> float:
    """Returns the local mean solar time at the observer in hours [0, 24)."""
    utc = as_utc(instant)
    hours = utc.hour + utc.minute / 60.0 + (utc.second + utc.microsecond / 1e6) / 3600.0
    local = (hours + observer.longitude / 15.0) % 24.0
    return 0.0 if local >= 24.0 else local


def is_daytime(instant: datetime, observer: ObserverLocation) -> bool:
    """Returns True if the local solar time at the observer falls within the daytime hours."""
    return DAYTIME_START_HOUR <= local_solar_time(instant, observer) < DAYTIME_END_HOUR

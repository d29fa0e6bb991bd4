"""Configuration for the sun and moon engine: the fixed observer, clock speed, and the altitudes
used for rising and setting. Each default may be overridden through the environment."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

import logging
import os
from math import isfinite
from typing import Mapping, Optional

from sunmoon.coordinates import ObserverLocation
from sunmoon.general import AstronomyError

log = logging.getLogger(__name__)

# Phoenix, Arizona.
DEFAULT_OBSERVER = ObserverLocation(34.0489, -111.9)
# Simulated hours that pass for each real second when the clock is accelerated.
DEFAULT_TIME_SPEED: float = 1.0

# Local solar hours bounding the day, as used by the ground view.
DAYTIME_START_HOUR: float = 6.0
DAYTIME_END_HOUR: float = 18.0

# Apparent altitudes in degrees at which each body rises and sets. The sun value allows for its
# semi-diameter and typical refraction, the moon value for its parallax.
SUN_RISE_ALTITUDE: float = -0.833
MOON_RISE_ALTITUDE: float = 0.125

OBSERVER_LAT_VAR = "SUNMOON_OBSERVER_LAT"
OBSERVER_LON_VAR = "SUNMOON_OBSERVER_LON"
TIME_SPEED_VAR = "SUNMOON_TIME_SPEED"


def _float_from(environ: Mapping[str, str], name: str) -> Optional[float]:
    """Returns the named environment variable as a float, or None if it is unset or blank."""
    text = environ.get(name, "").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError as ex:
        raise AstronomyError(f"{name} is not a number: '{text}'") from ex
    if not isfinite(value):
        raise AstronomyError(f"{name} must be finite: '{text}'")
    return value


def observer_from_environment(environ: Optional[Mapping[str, str]] = None) -> ObserverLocation:
    """Returns the observer defined by SUNMOON_OBSERVER_LAT and SUNMOON_OBSERVER_LON, or the
    default observer if neither is set."""
    environ = os.environ if environ is None else environ
    lat = _float_from(environ, OBSERVER_LAT_VAR)
    lon = _float_from(environ, OBSERVER_LON_VAR)
    if lat is None and lon is None:
        return DEFAULT_OBSERVER
    if lat is None or lon is None:
        raise AstronomyError(f"{OBSERVER_LAT_VAR} and {OBSERVER_LON_VAR} must be set together")
    log.info("Using observer at lat=%s lon=%s from the environment", lat, lon)
    return ObserverLocation(lat, lon)


def time_speed_from_environment(environ: Optional[Mapping[str, str]] = None) -> float:
    """Returns the clock speed defined by SUNMOON_TIME_SPEED, or the default speed."""
    environ = os.environ if environ is None else environ
    speed = _float_from(environ, TIME_SPEED_VAR)
    if speed is None:
        return DEFAULT_TIME_SPEED
    if speed < 0:
        raise AstronomyError(f"{TIME_SPEED_VAR} must not be negative: {speed}")
    return speed

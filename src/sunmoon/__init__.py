#!/usr/bin/python3
# -*- coding: utf-8 -*-
# PublicPermissions: True

__all__ = ["bodies", "clock", "config", "coordinates", "engine", "general", "horizontal",
           "lunar", "phases", "solar", "timeconv"]

from .general import AstronomyError, normalize_degrees
from .coordinates import EclipticCoordinate, HorizontalCoordinate, ObserverLocation
from .timeconv import to_julian_date, julian_centuries_since_j2000, day_of_year
from .lunar import MoonPosition
from .phases import MOON_PHASES, NamedPhase, classify_phase
from .clock import SimulationClock
from .config import DEFAULT_OBSERVER
from .bodies import Sun, Moon
from .engine import (SkyState, compute_horizontal, compute_moon_position, compute_sun_longitude,
                     positions_between, sky_state)

"""Constants and angle helpers shared by the sun and moon calculators."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from math import pi

SEC_IN_DAY = 86400.0
MS_IN_DAY = SEC_IN_DAY * 1000.0
DEG_TO_RAD = pi / 180.0
RAD_TO_DEG = 180.0 / pi
TWO_PI = 2 * pi

# Julian day of the J2000.0 epoch and the unix epoch.
J2000 = 2451545.0
UNIX_EPOCH_JD = 2440587.5
DAYS_PER_CENTURY = 36525.0

# Add to datetime.date.ordinal to calculate the Julian day.
JD_OFFSET = 1721424.5


class AstronomyError(Exception):
    """Invalid configuration or lookup supplied to the engine."""

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


def normalize_degrees(angle):
    """Folds an angle in degrees into [0, 360), whatever its sign."""
    return ((angle % 360.0) + 360.0) % 360.0


def normalize_radians(angle):
    """Folds an angle in radians into [0, 2*PI)."""
    return ((angle % TWO_PI) + TWO_PI) % TWO_PI


def signed_radians(angle):
    """Folds an angle in radians into [-PI, PI)."""
    return normalize_radians(angle + pi) - pi


def clamp(value, low, high):
    """Returns value limited to the closed range [low, high]."""
    return max(low, min(high, value))

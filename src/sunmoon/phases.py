"""The eight named lunar phases and classification of a phase angle into the nearest one."""

#==============================================================
# Copyright Jody M Sankey 2020
#
# This software may be modified and distributed under the terms
# of the MIT license. See the LICENCE.md file for details.
#==============================================================
# PublicPermissions: True
#==============================================================

from sunmoon.general import AstronomyError, normalize_degrees


class NamedPhase:
    """A named phase anchored at a fixed phase angle in degrees."""
    def __init__(self, name, angle, description):
        self.name = name
        self.angle = angle
        self.description = description

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'NamedPhase({!r}, {})'.format(self.name, self.angle)


MOON_PHASES = (
    NamedPhase('New Moon', 0.0, 'Moon between Earth and Sun - dark side faces Earth'),
    NamedPhase('Waxing Crescent', 45.0, 'Small sliver of illumination visible'),
    NamedPhase('First Quarter', 90.0, 'Half of Moon illuminated (right side)'),
    NamedPhase('Waxing Gibbous', 135.0, 'More than half illuminated'),
    NamedPhase('Full Moon', 180.0, 'Moon opposite Sun - fully illuminated face toward Earth'),
    NamedPhase('Waning Gibbous', 225.0, 'More than half illuminated (decreasing)'),
    NamedPhase('Last Quarter', 270.0, 'Half of Moon illuminated (left side)'),
    NamedPhase('Waning Crescent', 315.0, 'Small sliver before new moon'),
)


def circular_distance(a, b):
    """Returns the smallest separation in degrees [0, 180] between two angles."""
    diff = abs(normalize_degrees(a) - normalize_degrees(b))
    return min(diff, 360.0 - diff)


def classify_phase(phase_angle):
    """Returns the NamedPhase whose anchor is closest to the supplied phase angle in degrees. On an
    exact tie the earlier entry in MOON_PHASES wins."""
    closest = MOON_PHASES[0]
    min_diff = 360.0
    for phase in MOON_PHASES:
        diff = circular_distance(phase_angle, phase.angle)
        if diff < min_diff:
            min_diff = diff
            closest = phase
    return closest


def phase_by_index(index):
    """Returns the NamedPhase at index in MOON_PHASES, wrapping around the cycle."""
    return MOON_PHASES[index % len(MOON_PHASES)]


def phase_by_name(name):
    """Returns the NamedPhase with the supplied (case insensitive) name."""
    for phase in MOON_PHASES:
        if phase.name.lower() == name.strip().lower():
            return phase
    raise AstronomyError('Unknown moon phase: {}'.format(name))

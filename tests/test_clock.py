#!/usr/bin/python3

import unittest
from datetime import datetime, timedelta

from dateutil import tz

from sunmoon import clock
from sunmoon.config import DEFAULT_OBSERVER
from sunmoon.general import AstronomyError

# pylint: disable=missing-function-docstring

START = datetime(2024, 1, 1, 0, 0, tzinfo=tz.UTC)


class TestSimulationClock(unittest.TestCase):
    """Unit tests covering the simulation clock."""

    def test_accelerated(self):
        sim = clock.SimulationClock(START, speed=2.0)
        self.assertEqual(sim.advanced(1.5).instant, START + timedelta(hours=3))

    def test_real_time(self):
        sim = clock.SimulationClock(START, speed=50.0, real_time=True)
        self.assertEqual(sim.advanced(90).instant, START + timedelta(seconds=90))

    def test_paused(self):
        sim = clock.SimulationClock(START).paused_clock()
        self.assertTrue(sim.paused)
        self.assertEqual(sim.advanced(100).instant, START)
        self.assertEqual(sim.resumed().advanced(1).instant, START + timedelta(hours=1))

    def test_immutable(self):
        sim = clock.SimulationClock(START)
        sim.advanced(10)
        sim.with_speed(5.0)
        sim.toggled()
        self.assertEqual(sim, clock.SimulationClock(START))
        self.assertEqual(sim.toggled().toggled(), sim)
        self.assertEqual(sim.with_real_time(True).real_time, True)

    def test_naive_instant_is_utc(self):
        sim = clock.SimulationClock(datetime(2024, 1, 1))
        self.assertEqual(sim.instant, START)
        self.assertEqual(sim.instant.utcoffset(), timedelta(0))

    def test_invalid_speed(self):
        self.assertRaises(AstronomyError, clock.SimulationClock, START, -1.0)
        self.assertRaises(AstronomyError, clock.SimulationClock, START, float('nan'))
        self.assertRaises(AstronomyError, clock.SimulationClock(START).with_speed, float('inf'))

    def test_starting_now(self):
        before = datetime.now(tz.UTC)
        sim = clock.SimulationClock.starting_now()
        after = datetime.now(tz.UTC)
        self.assertLessEqual(before, sim.instant)
        self.assertLessEqual(sim.instant, after)
        self.assertFalse(sim.paused)

    def test_repr(self):
        self.assertEqual(repr(clock.SimulationClock(START, speed=2.0).paused_clock()),
                         'SimulationClock: 2024-01-01T00:00:00+00:00 x2.0h/s (paused)')


class TestLocalTime(unittest.TestCase):
    """Unit tests covering local solar time at the observer."""

    def test_local_solar_time(self):
        noon = datetime(2024, 6, 21, 19, 27, 36, tzinfo=tz.UTC)
        self.assertAlmostEqual(clock.local_solar_time(noon, DEFAULT_OBSERVER), 12.0)
        evening = datetime(2024, 6, 21, 2, 0, tzinfo=tz.UTC)
        self.assertAlmostEqual(clock.local_solar_time(evening, DEFAULT_OBSERVER), 18.54)

    def test_is_daytime(self):
        self.assertTrue(clock.is_daytime(datetime(2024, 6, 21, 19, 27, tzinfo=tz.UTC),
                                         DEFAULT_OBSERVER))
        self.assertFalse(clock.is_daytime(datetime(2024, 6, 21, 2, 0, tzinfo=tz.UTC),
                                          DEFAULT_OBSERVER))


if __name__ == '__main__':
    unittest.main()

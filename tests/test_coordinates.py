#!/usr/bin/python3

import unittest

from sunmoon.coordinates import EclipticCoordinate, HorizontalCoordinate, ObserverLocation
from sunmoon.general import AstronomyError, DEG_TO_RAD

# pylint: disable=missing-function-docstring


class TestCoordinates(unittest.TestCase):
    """Unit tests covering the coordinate value objects."""

    def test_observer(self):
        observer = ObserverLocation(34.0489, -111.9)
        self.assertAlmostEqual(observer.lat, 34.0489 * DEG_TO_RAD)
        self.assertAlmostEqual(observer.lng, -111.9 * DEG_TO_RAD)
        self.assertEqual(observer, ObserverLocation(34.0489, -111.9))

    def test_observer_validation(self):
        self.assertRaises(AstronomyError, ObserverLocation, 90.5, 0.0)
        self.assertRaises(AstronomyError, ObserverLocation, -91.0, 0.0)
        self.assertRaises(AstronomyError, ObserverLocation, 0.0, 180.1)
        self.assertRaises(AstronomyError, ObserverLocation, float('nan'), 0.0)
        self.assertRaises(AstronomyError, ObserverLocation, 0.0, float('inf'))

    def test_above_horizon(self):
        self.assertTrue(HorizontalCoordinate(0.1, 10.0).is_above_horizon)
        self.assertFalse(HorizontalCoordinate(0.0, 10.0).is_above_horizon)
        self.assertFalse(HorizontalCoordinate(-12.0, 10.0).is_above_horizon)

    def test_to_cartesian(self):
        x, y, z = HorizontalCoordinate(0.0, 180.0).to_cartesian(100.0)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 0.0)
        self.assertAlmostEqual(z, 100.0)
        x, y, z = HorizontalCoordinate(0.0, 90.0).to_cartesian(100.0)
        self.assertAlmostEqual(x, 100.0)
        self.assertAlmostEqual(z, 0.0)
        x, y, z = HorizontalCoordinate(90.0, 270.0).to_cartesian(100.0)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, 100.0)
        x, y, z = HorizontalCoordinate(30.0, 0.0).to_cartesian(2.0)
        self.assertAlmostEqual(y, 1.0)
        self.assertLess(z, 0.0)

    def test_equality(self):
        self.assertEqual(EclipticCoordinate(1.0, 2.0), EclipticCoordinate(1.0, 2.0))
        self.assertNotEqual(EclipticCoordinate(1.0, 2.0), EclipticCoordinate(1.0, 2.0, 1.0))
        self.assertNotEqual(HorizontalCoordinate(1.0, 2.0), HorizontalCoordinate(2.0, 1.0))


if __name__ == '__main__':
    unittest.main()

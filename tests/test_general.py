#!/usr/bin/python3

import random
import unittest
from math import pi

from sunmoon.general import (AstronomyError, TWO_PI, clamp, normalize_degrees, normalize_radians,
                             signed_radians)

# pylint: disable=missing-function-docstring

AWKWARD_VALUES = (0.0, -0.0, 360.0, -360.0, 720.5, -1e-14, -1e-300, 1e-300, 359.99999999999994,
                  -359.99999999999994, 1e10, -1e10, 1e300, -1e300)


class TestGeneral(unittest.TestCase):
    """Unit tests covering the shared angle helpers."""

    def test_normalize_degrees_values(self):
        self.assertEqual(normalize_degrees(0.0), 0.0)
        self.assertEqual(normalize_degrees(360.0), 0.0)
        self.assertAlmostEqual(normalize_degrees(-90.0), 270.0)
        self.assertAlmostEqual(normalize_degrees(725.0), 5.0)
        self.assertAlmostEqual(normalize_degrees(-725.0), 355.0)

    def test_normalize_degrees_range(self):
        rng = random.Random(2451545)
        values = list(AWKWARD_VALUES) + [rng.uniform(-1e7, 1e7) for _ in range(2000)]
        for value in values:
            result = normalize_degrees(value)
            self.assertGreaterEqual(result, 0.0, value)
            self.assertLess(result, 360.0, value)

    def test_normalize_radians_range(self):
        for value in AWKWARD_VALUES:
            result = normalize_radians(value)
            self.assertGreaterEqual(result, 0.0, value)
            self.assertLess(result, TWO_PI, value)

    def test_signed_radians(self):
        self.assertAlmostEqual(signed_radians(1.5 * pi), -0.5 * pi)
        self.assertAlmostEqual(signed_radians(-1.5 * pi), 0.5 * pi)
        self.assertAlmostEqual(signed_radians(0.25), 0.25)
        for value in AWKWARD_VALUES:
            result = signed_radians(value)
            self.assertGreaterEqual(result, -pi, value)
            self.assertLess(result, pi, value)

    def test_clamp(self):
        self.assertEqual(clamp(1.0000000000000002, -1.0, 1.0), 1.0)
        self.assertEqual(clamp(-1.0000000000000002, -1.0, 1.0), -1.0)
        self.assertEqual(clamp(0.5, -1.0, 1.0), 0.5)

    def test_error_message(self):
        error = AstronomyError('bad observer')
        self.assertEqual(error.message, 'bad observer')
        self.assertEqual(str(error), 'bad observer')


if __name__ == '__main__':
    unittest.main()

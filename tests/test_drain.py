"""
Unit tests for drain inbreathing.
"""

import math
import unittest

from tankvent.calculations.drain import compute_drain_inbreathing


class TestDrainInbreathing(unittest.TestCase):

    def test_formula(self):
        expected = 3.48 * 0.2 * 0.2 * math.sqrt(5.0) * 3600 * 0.94
        self.assertAlmostEqual(compute_drain_inbreathing(200, 5000), expected, places=6)
        self.assertGreater(compute_drain_inbreathing(200, 5000), 0)

    def test_zero_inputs(self):
        self.assertEqual(compute_drain_inbreathing(0, 5000), 0.0)
        self.assertEqual(compute_drain_inbreathing(200, 0), 0.0)

    def test_scales_with_square_root_of_height(self):
        ratio = compute_drain_inbreathing(200, 20000) / compute_drain_inbreathing(200, 5000)
        self.assertAlmostEqual(ratio, 2.0, places=9)

    def test_scales_with_square_of_line_size(self):
        ratio = compute_drain_inbreathing(400, 5000) / compute_drain_inbreathing(200, 5000)
        self.assertAlmostEqual(ratio, 4.0, places=9)


if __name__ == '__main__':
    unittest.main()

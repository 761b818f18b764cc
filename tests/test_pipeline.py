"""
Tests for the text-to-results pipeline.
"""

import unittest

from gpscalc import calculate_from_text


class TestCalculateFromText(unittest.TestCase):
    """Test parsing, conversion, validation and measurement together."""

    def test_end_to_end(self):
        """Test a pasted block with mixed notations."""
        text = (
            "Base 44.4734245277 -70.88862750833 120\n"
            "44 28 30 70 53 10 115\n"
            "bad line\n"
            "N44.4750 W70.8860 130\n"
        )
        result = calculate_from_text(text)
        self.assertEqual(len(result.coordinates), 3)
        self.assertEqual(result.labels[0], "Base")
        self.assertEqual(result.statistics_2d.count, 3)
        self.assertIsNotNone(result.cumulative_3d)

    def test_elevations_converted_to_meters(self):
        """Test pasted feet become meters."""
        result = calculate_from_text("0 0 1000\n0 0.001 0", elevation_unit="feet")
        self.assertAlmostEqual(result.coordinates[0].elevation, 304.8)
        self.assertEqual(result.coordinates[1].elevation, 0.0)

    def test_invalid_points_removed(self):
        """Test out-of-range points are dropped and longitudes wrapped."""
        result = calculate_from_text("95 0\n10 200\n10 170 20000")
        self.assertEqual(len(result.coordinates), 2)
        self.assertEqual(result.coordinates[0].lon, -160.0)
        self.assertIsNone(result.coordinates[1].elevation)

    def test_too_few_valid_points(self):
        """Test fewer than two valid points gives None."""
        self.assertIsNone(calculate_from_text("95 0\n10 20"))
        self.assertIsNone(calculate_from_text(""))


if __name__ == '__main__':
    unittest.main()

"""
Tests for the planar pair breakdown and survey grading.
"""

import unittest

from gpscalc.distance import (
    assess_survey_grade,
    calculate_2d_distance,
    calculate_detailed_distance,
    meters_per_degree,
    pairwise_breakdowns,
)
from gpscalc.geo import Coordinate


class TestMetersPerDegree(unittest.TestCase):
    """Test the meters-per-degree coefficients."""

    def test_equator(self):
        """Test the values at latitude 0."""
        per_lat, per_lon = meters_per_degree(0)
        self.assertAlmostEqual(per_lat, 110574.275, places=4)
        self.assertAlmostEqual(per_lon, 111319.34, places=4)

    def test_sixty_degrees(self):
        """Test a degree of longitude shrinks toward the poles."""
        per_lat, per_lon = meters_per_degree(60)
        self.assertAlmostEqual(per_lat, 111412.2425, places=4)
        self.assertAlmostEqual(per_lon, 55799.92, places=4)


class TestSurveyGrade(unittest.TestCase):
    """Test survey grade buckets."""

    def test_buckets(self):
        """Test each threshold picks its grade."""
        self.assertEqual(assess_survey_grade(0.0005, 0).grade, "First Order Survey Quality")
        self.assertIn("sub-millimeter", assess_survey_grade(0.0005, 0).description)
        self.assertIn("sub-3mm", assess_survey_grade(0.002, 0).description)
        self.assertEqual(assess_survey_grade(0.005, 0).grade, "Second Order Class I Quality")
        self.assertEqual(assess_survey_grade(0.02, 0).grade, "Second Order Class II Quality")
        self.assertEqual(assess_survey_grade(0.05, 0).grade, "Third Order Quality")
        self.assertEqual(assess_survey_grade(0.2, 0).grade, "Third Order Quality")
        self.assertEqual(assess_survey_grade(5, 0).grade, "Below Survey Standards")

    def test_uses_3d_total(self):
        """Test horizontal and vertical offsets are combined."""
        self.assertEqual(assess_survey_grade(0.25, 0).grade, "Third Order Quality")
        self.assertEqual(assess_survey_grade(0.25, 0.2).grade, "Fourth Order Quality")

    def test_threshold_is_exclusive(self):
        """Test a value on a threshold falls in the next bucket."""
        self.assertIn("sub-3mm", assess_survey_grade(0.001, 0).description)
        self.assertEqual(assess_survey_grade(1.0, 0).grade, "Below Survey Standards")


class TestDetailedDistance(unittest.TestCase):
    """Test the single-pair breakdown."""

    def test_latitude_offset(self):
        """Test a pure northward offset with an elevation drop."""
        breakdown = calculate_detailed_distance(Coordinate(0, 0, 10), Coordinate(0.001, 0, 5))
        self.assertAlmostEqual(breakdown.delta_lat, 0.001)
        self.assertEqual(breakdown.delta_lon, 0.0)
        self.assertAlmostEqual(breakdown.delta_lat_m, 110.574275, places=5)
        self.assertAlmostEqual(breakdown.horizontal_m, 110.574275, places=5)
        self.assertEqual(breakdown.vertical_m, -5.0)
        self.assertAlmostEqual(breakdown.distance_3d_m, (110.574275 ** 2 + 25) ** 0.5, places=5)
        self.assertEqual(breakdown.assessment.grade, "Below Survey Standards")

    def test_missing_elevation_counts_as_zero(self):
        """Test a missing elevation is treated as 0 m."""
        breakdown = calculate_detailed_distance(Coordinate(0, 0), Coordinate(0, 0, 3))
        self.assertEqual(breakdown.vertical_m, 3.0)
        self.assertEqual(breakdown.distance_3d_m, 3.0)

    def test_labels(self):
        """Test labels use names or point numbers."""
        breakdown = calculate_detailed_distance(Coordinate(0, 0, name="Rover"), Coordinate(0, 1), 0, 4)
        self.assertEqual(breakdown.from_label, "Rover")
        self.assertEqual(breakdown.to_label, "Point 5")

    def test_close_to_haversine_over_short_baselines(self):
        """Test the planar and great-circle results agree over a few hundred meters."""
        first, second = Coordinate(44.4734245277, -70.88862750833), Coordinate(44.475, -70.886)
        planar_m = calculate_detailed_distance(first, second).horizontal_m
        great_circle_m = calculate_2d_distance(first.lat, first.lon, second.lat, second.lon).meters
        self.assertLess(abs(planar_m - great_circle_m) / great_circle_m, 0.01)


class TestPairwiseBreakdowns(unittest.TestCase):
    """Test breakdowns over several points."""

    def setUp(self):
        """Set up three points."""
        self.points = [Coordinate(0, 0), Coordinate(0, 0.001), Coordinate(0.001, 0.001)]

    def test_all_pairs(self):
        """Test every i < j pair in order."""
        breakdowns = pairwise_breakdowns(self.points)
        self.assertEqual(
            [(b.from_label, b.to_label) for b in breakdowns],
            [("Point 1", "Point 2"), ("Point 1", "Point 3"), ("Point 2", "Point 3")],
        )

    def test_reference_point(self):
        """Test one reference against every other point."""
        breakdowns = pairwise_breakdowns(self.points, reference_index=1)
        self.assertEqual(
            [(b.from_label, b.to_label) for b in breakdowns],
            [("Point 2", "Point 1"), ("Point 2", "Point 3")],
        )

    def test_reference_out_of_range(self):
        """Test a bad reference index raises IndexError."""
        with self.assertRaises(IndexError):
            pairwise_breakdowns(self.points, reference_index=3)
        with self.assertRaises(IndexError):
            pairwise_breakdowns(self.points, reference_index=-1)

    def test_too_few_points(self):
        """Test fewer than two points gives an empty list."""
        self.assertEqual(pairwise_breakdowns([Coordinate(0, 0)]), [])


if __name__ == '__main__':
    unittest.main()

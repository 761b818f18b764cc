"""
Tests for decimal/DMS conversion and normalization.
"""

import math
import unittest

from gpscalc.converter import (
    DMS,
    Axis,
    convert_to_dms,
    decimal_to_dms,
    dms_to_decimal,
    format_decimal,
    format_dms,
    format_for_clipboard,
    format_for_display,
    normalize_longitude,
    validate_and_normalize,
    validate_coordinates,
)
from gpscalc.geo import Coordinate, LatLon


class TestDecimalToDMS(unittest.TestCase):
    """Test decimal degrees to DMS."""

    def test_positive_value(self):
        """Test splitting a positive latitude."""
        dms = decimal_to_dms(44.4734245277)
        self.assertEqual(dms.degrees, 44.0)
        self.assertEqual(dms.minutes, 28)
        self.assertAlmostEqual(dms.seconds, 24.3283, places=4)
        self.assertEqual(dms.cardinal, "")

    def test_negative_value_keeps_sign(self):
        """Test degrees carry the sign without a cardinal."""
        dms = decimal_to_dms(-70.88862750833)
        self.assertEqual(dms.degrees, -70.0)
        self.assertEqual(dms.minutes, 53)
        self.assertAlmostEqual(dms.seconds, 19.05903, places=5)

    def test_cardinal_letters(self):
        """Test cardinals follow the requested axis and degrees are unsigned."""
        west = decimal_to_dms(-70.88862750833, include_cardinal=True, axis=Axis.LONGITUDE)
        self.assertEqual(west.degrees, 70.0)
        self.assertEqual(west.cardinal, "W")
        self.assertEqual(decimal_to_dms(12.5, True, "lon").cardinal, "E")
        self.assertEqual(decimal_to_dms(-12.5, True, "lat").cardinal, "S")
        self.assertEqual(decimal_to_dms(12.5, True).cardinal, "N")

    def test_sub_degree_negative(self):
        """Test a negative value under one degree keeps its hemisphere."""
        dms = decimal_to_dms(-0.5)
        self.assertEqual(math.copysign(1.0, dms.degrees), -1.0)
        self.assertEqual(dms.minutes, 30)
        self.assertTrue(dms.is_negative)
        self.assertAlmostEqual(dms.to_decimal(), -0.5)

    def test_seconds_carry(self):
        """Test seconds rounding up to 60 carry into minutes and degrees."""
        dms = decimal_to_dms(10.99999999999)
        self.assertEqual(dms, DMS(11.0, 0, 0.0))

    def test_non_finite(self):
        """Test non-finite input gives None."""
        self.assertIsNone(decimal_to_dms(math.nan))
        self.assertIsNone(decimal_to_dms(math.inf))
        self.assertIsNone(decimal_to_dms(None))


class TestDMSToDecimal(unittest.TestCase):
    """Test DMS to decimal degrees."""

    def test_plain(self):
        """Test combining positive components."""
        self.assertAlmostEqual(dms_to_decimal(44, 28, 24.32661), 44 + 28 / 60 + 24.32661 / 3600)

    def test_negative_indicators(self):
        """Test negative degrees or S/W letters negate the result."""
        self.assertLess(dms_to_decimal(-70, 53, 19.05717), 0)
        self.assertLess(dms_to_decimal(44, 28, 24, "S"), 0)
        self.assertLess(dms_to_decimal(70, 53, 19, "w"), 0)
        self.assertGreater(dms_to_decimal(70, 53, 19, "E"), 0)

    def test_invalid_component(self):
        """Test non-finite components give None."""
        self.assertIsNone(dms_to_decimal(math.nan, 0, 0))
        self.assertIsNone(dms_to_decimal(10, 0, math.inf))

    def test_round_trip(self):
        """Test decimal -> DMS -> decimal within 1e-5 degrees."""
        values = [0.0, 1e-9, -0.5, 44.4734245277, -70.88862750833,
                  89.9999999, -179.123456789, 180.0, -90.0, 12.5]
        for value in values:
            for include_cardinal in (False, True):
                dms = decimal_to_dms(value, include_cardinal, Axis.LONGITUDE)
                back = dms_to_decimal(dms.degrees, dms.minutes, dms.seconds, dms.cardinal)
                self.assertAlmostEqual(back, value, delta=1e-5, msg=(value, include_cardinal))


class TestValidateAndNormalize(unittest.TestCase):
    """Test range validation with longitude wraparound."""

    def test_latitude_out_of_range(self):
        """Test latitude is rejected rather than wrapped."""
        self.assertIsNone(validate_and_normalize(91, 0))
        self.assertIsNone(validate_and_normalize(-90.5, 0))

    def test_longitude_wrapped(self):
        """Test longitude is wrapped into [-180, 180]."""
        self.assertEqual(validate_and_normalize(10, 200), LatLon(10.0, -160.0))
        self.assertEqual(validate_and_normalize(0, 540).lon, 180.0)
        self.assertEqual(validate_and_normalize(0, -540).lon, -180.0)
        self.assertEqual(validate_and_normalize(0, 541).lon, -179.0)

    def test_bounds_kept(self):
        """Test values on the bounds pass unchanged."""
        self.assertEqual(validate_and_normalize(-90, -180), LatLon(-90.0, -180.0))

    def test_non_finite(self):
        """Test non-finite values are rejected."""
        self.assertIsNone(validate_and_normalize(math.nan, 0))
        self.assertIsNone(validate_and_normalize(0, math.inf))

    def test_normalize_longitude_multiple_turns(self):
        """Test several turns are removed at once."""
        self.assertEqual(normalize_longitude(720.0), 0.0)
        self.assertEqual(normalize_longitude(-900.0), -180.0)


class TestFormatting(unittest.TestCase):
    """Test text renderings."""

    def test_format_dms_symbols(self):
        """Test the symbol form with a cardinal letter."""
        dms = decimal_to_dms(44.4734245277, True, Axis.LATITUDE)
        self.assertEqual(format_dms(dms), '44° 28\' 24.32830" N')
        self.assertEqual(format_dms(dms, include_symbols=False), "44 28 24.32830 N")

    def test_format_dms_signed(self):
        """Test a signed value keeps its minus sign."""
        self.assertEqual(format_dms(decimal_to_dms(-0.5)), '-0° 30\' 0.00000"')

    def test_format_dms_none(self):
        """Test None renders as an empty string."""
        self.assertEqual(format_dms(None), "")

    def test_format_decimal(self):
        """Test ten-place fixed decimals."""
        self.assertEqual(format_decimal(44.5), "44.5000000000")
        self.assertEqual(format_decimal(math.nan), "")

    def test_clipboard_and_display(self):
        """Test pair renderings."""
        self.assertEqual(format_for_clipboard(1.5, -2.25), "1.5000000000\t-2.2500000000")
        self.assertEqual(format_for_display(1, 2, ", "), "1.0000000000, 2.0000000000")

    def test_convert_to_dms(self):
        """Test both axes get their own cardinal letters."""
        self.assertEqual(
            convert_to_dms(44.4734245277, -70.88862750833),
            ('44° 28\' 24.32830" N', '70° 53\' 19.05903" W'),
        )


class TestValidateCoordinates(unittest.TestCase):
    """Test the batch validation filter."""

    def test_filter_and_normalize(self):
        """Test invalid points are dropped and longitudes wrapped."""
        coordinates = [
            Coordinate(44.47, 200.0, 12000, "A"),
            Coordinate(91.0, 0.0),
            Coordinate(math.nan, 0.0),
            Coordinate(10.0, -190.0, 50),
        ]

        valid = validate_coordinates(coordinates)

        self.assertEqual(len(valid), 2)
        self.assertEqual(valid[0].lon, -160.0)
        self.assertIsNone(valid[0].elevation)
        self.assertEqual(valid[0].name, "A")
        self.assertEqual(valid[1].lon, 170.0)
        self.assertEqual(valid[1].elevation, 50.0)

    def test_empty(self):
        """Test empty input gives an empty list."""
        self.assertEqual(validate_coordinates([]), [])


if __name__ == '__main__':
    unittest.main()

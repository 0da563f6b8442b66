import unittest
import math

# Add the project root to the path
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from playerdev.maturity import (
    estimate_biological_age,
    maturity_category,
    calculate_bmi,
    LATE_BLOOMER,
    EARLY_MATURER,
    AVERAGE
)
from playerdev.phv_calculator import estimate_growth_rate
from playerdev.load import (
    calculate_availability,
    calculate_sprint_percentage,
    calculate_playing_time_percentage
)
from playerdev.reference_data import lookup, round_age, REFERENCE_TABLE


class TestBiologicalAge(unittest.TestCase):
    def test_late_bloomer(self):
        """Low BMI and short for age gives the late bloomer offset"""
        result = estimate_biological_age(17, 160, 50)
        self.assertEqual(result.maturity_offset, -0.7)
        self.assertAlmostEqual(result.biological_age, 16.3)
        self.assertEqual(result.category, LATE_BLOOMER)

    def test_tall_but_light_is_average(self):
        """Both conditions are needed; tall stature alone is not enough"""
        result = estimate_biological_age(17, 190, 80)
        self.assertEqual(result.maturity_offset, -0.2)
        self.assertAlmostEqual(result.biological_age, 16.8)
        self.assertEqual(result.category, AVERAGE)

    def test_early_maturer(self):
        result = estimate_biological_age(15, 180, 80)
        self.assertEqual(result.maturity_offset, 0.5)
        self.assertAlmostEqual(result.biological_age, 15.5)
        self.assertEqual(result.category, EARLY_MATURER)

    def test_low_bmi_but_tall_for_age_is_average(self):
        result = estimate_biological_age(15, 180, 60)
        self.assertEqual(result.maturity_offset, -0.2)

    def test_maturity_category_thresholds(self):
        self.assertEqual(maturity_category(-0.7), LATE_BLOOMER)
        self.assertEqual(maturity_category(-0.51), LATE_BLOOMER)
        self.assertEqual(maturity_category(-0.5), AVERAGE)
        self.assertEqual(maturity_category(0.3), AVERAGE)
        self.assertEqual(maturity_category(0.31), EARLY_MATURER)

    def test_negative_weight_is_not_rejected(self):
        """Bad input is propagated, not validated"""
        result = estimate_biological_age(17, 160, -50)
        self.assertEqual(result.maturity_offset, -0.7)

    def test_bmi(self):
        self.assertAlmostEqual(calculate_bmi(200, 80), 20.0)


class TestGrowthRate(unittest.TestCase):
    def test_no_previous_height(self):
        self.assertIsNone(estimate_growth_rate(180))
        self.assertIsNone(estimate_growth_rate(180, None, 6))

    def test_zero_previous_height_is_unset(self):
        self.assertIsNone(estimate_growth_rate(180, 0))

    def test_zero_interval(self):
        self.assertIsNone(estimate_growth_rate(180, 170, 0))

    def test_annualised_rate(self):
        self.assertAlmostEqual(estimate_growth_rate(180, 170, 6), 20.0)
        self.assertAlmostEqual(estimate_growth_rate(180, 177, 12), 3.0)

    def test_default_interval_is_six_months(self):
        self.assertAlmostEqual(estimate_growth_rate(180, 170), 20.0)

    def test_shrinking_height_is_kept(self):
        self.assertAlmostEqual(estimate_growth_rate(170, 172, 6), -4.0)


class TestLoad(unittest.TestCase):
    def test_availability(self):
        self.assertAlmostEqual(calculate_availability(10, 2), 80.0)
        self.assertEqual(calculate_availability(0, 5), 0)
        self.assertEqual(calculate_availability(0, 0), 0)

    def test_availability_not_clamped(self):
        self.assertAlmostEqual(calculate_availability(10, 15), -50.0)

    def test_sprint_percentage(self):
        self.assertAlmostEqual(calculate_sprint_percentage(100, 1000), 10.0)
        self.assertEqual(calculate_sprint_percentage(100, 0), 0)

    def test_playing_time_percentage(self):
        self.assertAlmostEqual(calculate_playing_time_percentage(810, 9), 100.0)
        self.assertAlmostEqual(calculate_playing_time_percentage(420, 7, 60), 100.0)
        self.assertEqual(calculate_playing_time_percentage(90, 0), 0)

    def test_playing_time_over_100(self):
        """Extra time pushes the percentage above 100 and is kept"""
        self.assertAlmostEqual(calculate_playing_time_percentage(120, 1), 120 / 90 * 100)


class TestReferenceData(unittest.TestCase):
    def test_exact_age(self):
        self.assertEqual(lookup(15), REFERENCE_TABLE[15])
        self.assertEqual(lookup(19), REFERENCE_TABLE[19])

    def test_rounding(self):
        self.assertEqual(lookup(15.4), REFERENCE_TABLE[15])
        self.assertEqual(lookup(14.6), REFERENCE_TABLE[15])
        self.assertEqual(lookup(16.5), REFERENCE_TABLE[17])
        self.assertEqual(round_age(18.5), 19)

    def test_out_of_table_age_falls_back_to_17(self):
        self.assertEqual(lookup(30), lookup(17))
        self.assertEqual(lookup(10), REFERENCE_TABLE[17])
        self.assertEqual(lookup(19.6), REFERENCE_TABLE[17])

    def test_non_finite_age(self):
        self.assertEqual(lookup(math.nan), REFERENCE_TABLE[17])

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            REFERENCE_TABLE[20] = REFERENCE_TABLE[19]

    def test_standard_deviations_non_negative(self):
        for entry in REFERENCE_TABLE.values():
            for stat in (entry.sprint_10m, entry.sprint_30m, entry.cod):
                self.assertGreaterEqual(stat.sd, 0)


if __name__ == '__main__':
    unittest.main()

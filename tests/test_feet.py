import unittest

from versescan.feet import (
    ANAPEST,
    CATALECTIC_FACTOR,
    DACTYL,
    IAMB,
    LEGACY_FOOT_ORDER,
    PYRRHIC,
    SPONDEE,
    TROCHEE,
    best_meter,
    classify_meter,
    identify_feet,
    meter_match,
)
from versescan.tables import StandardMeter


class FootTests(unittest.TestCase):
    def test_regular_iambs(self) -> None:
        self.assertEqual(identify_feet("u/u/u/u/u/"), [IAMB] * 5)

    def test_three_syllable_feet_first(self) -> None:
        self.assertEqual(identify_feet("u/u/uu/u/"), [IAMB, IAMB, ANAPEST, IAMB])
        self.assertEqual(identify_feet("/uu/uu"), [DACTYL, DACTYL])

    def test_legacy_order(self) -> None:
        self.assertEqual(identify_feet("u/u/uu/u/", LEGACY_FOOT_ORDER), [IAMB, IAMB, PYRRHIC, TROCHEE])
        self.assertEqual(identify_feet("/uu/uu", LEGACY_FOOT_ORDER), [TROCHEE, IAMB, PYRRHIC])

    def test_spondee(self) -> None:
        self.assertEqual(identify_feet("//u/"), [SPONDEE, IAMB])

    def test_leftover_syllable_is_skipped(self) -> None:
        self.assertEqual(identify_feet("u/u"), [IAMB])
        self.assertEqual(identify_feet("/"), [])
        self.assertEqual(identify_feet(""), [])


class MeterMatchTests(unittest.TestCase):
    def test_exact_length(self) -> None:
        self.assertEqual(meter_match("u/u/", "u/u/"), 1.0)
        self.assertEqual(meter_match("/u/u", "u/u/"), 0.0)
        self.assertEqual(meter_match("u/uu", "u/u/"), 0.75)

    def test_off_by_one(self) -> None:
        self.assertAlmostEqual(meter_match("u/u/u/u/u", "u/u/u/u/u/"), CATALECTIC_FACTOR)
        self.assertAlmostEqual(meter_match("u/u/u/u/u/u", "u/u/u/u/u/"), CATALECTIC_FACTOR)

    def test_length_mismatch(self) -> None:
        self.assertEqual(meter_match("u/", "u/u/"), 0.0)
        self.assertEqual(meter_match("", "u/"), 0.0)


class ClassifyTests(unittest.TestCase):
    def test_standard_meters(self) -> None:
        self.assertEqual(classify_meter("u/u/u/u/u/"), "iambic pentameter")
        self.assertEqual(classify_meter("u/u/u/u/"), "iambic tetrameter")
        self.assertEqual(classify_meter("/u/u/u/u"), "trochaic tetrameter")
        self.assertEqual(classify_meter("uu/uu/uu/uu/"), "anapestic tetrameter")

    def test_catalectic_line(self) -> None:
        self.assertEqual(best_meter("u/u/u/u/u"), ("iambic pentameter", CATALECTIC_FACTOR))

    def test_short_lines_are_unclassified(self) -> None:
        self.assertEqual(best_meter("u/u"), ("", 0.0))
        self.assertEqual(classify_meter(""), "")

    def test_irregular_line(self) -> None:
        self.assertEqual(classify_meter("u/u/uu/u/"), "")
        self.assertEqual(classify_meter("////////"), "")

    def test_first_meter_wins_ties(self) -> None:
        meters = (StandardMeter("u/u/", "first", 0.5), StandardMeter("u/u/", "second", 0.5))
        self.assertEqual(best_meter("u/u/", meters), ("first", 1.0))

    def test_threshold(self) -> None:
        meters = (StandardMeter("u/u/", "strict", 1.0),)
        self.assertEqual(best_meter("u/uu", meters), ("", 0.0))


if __name__ == "__main__":
    unittest.main()

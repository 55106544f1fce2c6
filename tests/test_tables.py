import unittest

from versescan.tables import (
    IAMBIC_PENTAMETER,
    KNOWN_CONTRACTIONS,
    POETIC_SYLLABLE_COUNT,
    RESIST_STRESS,
    RESIST_UNSTRESS,
    STANDARD_METERS,
    STRESS_EXCEPTIONS,
    SYLLABLE_OVERRIDES,
)


class TableIntegrityTests(unittest.TestCase):
    def test_exception_patterns_use_stress_marks_only(self) -> None:
        for word, pattern in STRESS_EXCEPTIONS.items():
            self.assertTrue(pattern, word)
            self.assertEqual(set(pattern) - {"u", "/"}, set(), word)

    def test_overrides_spell_the_word(self) -> None:
        for word, pieces in SYLLABLE_OVERRIDES.items():
            self.assertEqual("".join(pieces), word)
            self.assertTrue(all(pieces), word)

    def test_overrides_agree_with_exception_lengths(self) -> None:
        for word, pieces in SYLLABLE_OVERRIDES.items():
            pattern = STRESS_EXCEPTIONS.get(word)
            if pattern is not None:
                self.assertEqual(len(pattern), len(pieces), word)

    def test_elision_counts_are_positive(self) -> None:
        for word, count in POETIC_SYLLABLE_COUNT.items():
            self.assertGreaterEqual(count, 1, word)
        for word, count in KNOWN_CONTRACTIONS.items():
            self.assertIn("'", word)
            self.assertGreaterEqual(count, 1, word)

    def test_resist_sets_are_disjoint(self) -> None:
        self.assertEqual(RESIST_STRESS & RESIST_UNSTRESS, frozenset())

    def test_meter_templates(self) -> None:
        self.assertEqual(len(STANDARD_METERS), 14)
        self.assertEqual(IAMBIC_PENTAMETER, "u/u/u/u/u/")
        for meter in STANDARD_METERS:
            self.assertEqual(set(meter.pattern) - {"u", "/"}, set(), meter.name)
            self.assertGreater(meter.min_match, 0.0)
            self.assertLessEqual(meter.min_match, 1.0)

    def test_tables_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            STRESS_EXCEPTIONS["the"] = "/"  # type: ignore[index]
        with self.assertRaises(TypeError):
            POETIC_SYLLABLE_COUNT["every"] = 3  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()

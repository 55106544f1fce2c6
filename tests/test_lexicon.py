import gzip
import json
import os
import sys
import tempfile
import types
import unittest
from unittest import mock

from versescan.lexicon import Lexicon, LexiconError, stresses_for_phones

from lexicon_fixtures import MISC_ENTRIES, misc_lexicon


class LexiconLifecycleTests(unittest.TestCase):
    def test_absent_lexicon_answers_nothing(self) -> None:
        lex = Lexicon()
        self.assertFalse(lex.is_loaded())
        self.assertEqual(len(lex), 0)
        self.assertEqual(lex.pronunciations("compare"), [])
        self.assertEqual(lex.stress_pattern("compare"), [])
        self.assertEqual(lex.syllables("compare"), [])

    def test_inject_once(self) -> None:
        lex = Lexicon()
        lex.inject({"wood": ["W UH1 D"]})
        self.assertTrue(lex.is_loaded())
        with self.assertRaises(LexiconError):
            lex.inject({"wood": ["W UH1 D"]})

    def test_inject_rejects_non_mapping(self) -> None:
        with self.assertRaises(LexiconError):
            Lexicon().inject([("wood", "W UH1 D")])  # type: ignore[arg-type]

    def test_inject_accepts_phone_lists_and_strings(self) -> None:
        lex = Lexicon({"wood": "W UH1 D", "roads": [["R", "OW1", "D", "Z"]]})
        self.assertEqual(lex.pronunciations("wood"), [("W", "UH1", "D")])
        self.assertEqual(lex.pronunciations("roads"), [("R", "OW1", "D", "Z")])

    def test_variant_suffixes_merge(self) -> None:
        lex = Lexicon({"read": ["R IY1 D"], "READ(2)": ["R EH1 D"]})
        self.assertEqual(len(lex), 1)
        self.assertEqual(len(lex.pronunciations("read")), 2)


class LexiconQueryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.lex = misc_lexicon()

    def test_stresses_for_phones(self) -> None:
        self.assertEqual(stresses_for_phones(["K", "AH0", "M", "P", "EH1", "R"]), [0, 1])
        self.assertEqual(stresses_for_phones(["AH2", "N", "AE1"]), [2, 1])
        self.assertEqual(stresses_for_phones([]), [])

    def test_lookup_ignores_case_and_punctuation(self) -> None:
        self.assertEqual(self.lex.stress_pattern("Compare,"), [0, 1])

    def test_fullest_pronunciation_wins(self) -> None:
        self.assertEqual(self.lex.stress_pattern("fire"), [1, 0])
        self.assertEqual(len(self.lex.all_stress_patterns("fire")), 2)

    def test_first_listed_wins_ties(self) -> None:
        self.assertEqual(self.lex.stress_pattern("record"), [1, 0])

    def test_apostrophe_spelling_falls_back_to_bare_word(self) -> None:
        self.assertEqual(self.lex.stress_pattern("ow'st"), [1])
        self.assertEqual(self.lex.stress_pattern("ow’st"), [1])

    def test_un_prefix_is_derived(self) -> None:
        self.assertEqual(self.lex.pronunciations("unkind"), [("AH0", "N", "K", "AY1", "N", "D")])
        self.assertEqual(self.lex.stress_pattern("unkind"), [0, 1])

    def test_unknown_word(self) -> None:
        self.assertEqual(self.lex.stress_pattern("zzyzx"), [])
        self.assertEqual(self.lex.syllables("zzyzx"), [])

    def test_syllables_follow_vowel_count(self) -> None:
        self.assertEqual(self.lex.syllables("compare"), ["com", "pare"])
        self.assertEqual(self.lex.syllables("understand"), ["und", "ers", "tand"])

    def test_repr(self) -> None:
        self.assertEqual(repr(self.lex), f"Lexicon(loaded=True, words={len(MISC_ENTRIES)})")


class LexiconFileTests(unittest.TestCase):
    CMUDICT = (
        ";;; test dictionary\n"
        "HELLO  HH AH0 L OW1\n"
        "HELLO(1)  HH EH0 L OW1\n"
        "WORLD  W ER1 L D # trailing comment\n"
        "BROKEN\n"
    )

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _path(self, name: str) -> str:
        return os.path.join(self.tmp, name)

    def test_from_cmudict(self) -> None:
        path = self._path("cmudict.dict")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(self.CMUDICT)
        lex = Lexicon.from_cmudict(path)
        self.assertEqual(len(lex), 2)
        self.assertEqual(len(lex.pronunciations("hello")), 2)
        self.assertEqual(lex.stress_pattern("world"), [1])
        self.assertEqual(lex.stress_pattern("broken"), [])

    def test_from_path_reads_gzipped_cmudict(self) -> None:
        path = self._path("cmudict.dict.gz")
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            fh.write(self.CMUDICT)
        lex = Lexicon.from_path(path)
        self.assertEqual(lex.stress_pattern("hello"), [0, 1])

    def test_from_path_reads_gzipped_json(self) -> None:
        path = self._path("lexicon.json.gz")
        with gzip.open(path, "wt", encoding="utf-8") as fh:
            json.dump({"wood": ["W UH1 D"], "bad": 3, "empty": []}, fh)
        lex = Lexicon.from_path(path)
        self.assertEqual(len(lex), 1)
        self.assertEqual(lex.stress_pattern("wood"), [1])

    def test_from_json_requires_object(self) -> None:
        path = self._path("lexicon.json")
        with open(path, "w", encoding="utf-8") as fh:
            json.dump([["wood", "W UH1 D"]], fh)
        with self.assertRaises(LexiconError):
            Lexicon.from_json(path)

    def test_from_json_rejects_invalid_json(self) -> None:
        path = self._path("lexicon.json")
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("{not json")
        with self.assertRaises(LexiconError):
            Lexicon.from_json(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(LexiconError):
            Lexicon.from_path(self._path("missing.dict"))


class PronouncingTests(unittest.TestCase):
    def test_from_pronouncing_reads_bundled_dictionary(self) -> None:
        fake = types.ModuleType("pronouncing")
        fake.pronunciations = [("read", "R IY1 D"), ("read", "R EH1 D"), ("wood", "W UH1 D")]
        fake.init_cmu = mock.Mock()
        with mock.patch.dict(sys.modules, {"pronouncing": fake}):
            lex = Lexicon.from_pronouncing()
        fake.init_cmu.assert_called_once_with()
        self.assertEqual(len(lex), 2)
        self.assertEqual(len(lex.pronunciations("read")), 2)


if __name__ == "__main__":
    unittest.main()

"""Read-only pronunciation lexicon.

A lexicon maps words to one or more CMU-style phone sequences, e.g.
``"compare" -> [["K", "AH0", "M", "P", "EH1", "R"]]``. Vowel phones carry a
trailing stress digit (0 none, 1 primary, 2 secondary).

The lexicon is injected once and then only queried; the scansion engine takes
it as an explicit argument so different tests and callers can use different
dictionaries side by side.
"""
import gzip
import json
import logging
import os
import re
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .heuristics import even_spans, normalize_apostrophes

logger = logging.getLogger(__name__)

VARIANT_SUFFIX_RE = re.compile(r"\(\d+\)$")
LOOKUP_STRIP_RE = re.compile(r"[^a-z'\-]+")
WORD_CHARS_RE = re.compile(r"[^A-Za-z']+")
STRESS_DIGITS = {"0": 0, "1": 1, "2": 2}

# "un-" derived from its base: AH0 N.
UN_PREFIX_PHONES: Tuple[str, ...] = ("AH0", "N")

Phones = Tuple[str, ...]
RawPronunciation = Union[str, Sequence[str]]


class LexiconError(Exception):
    pass


def stresses_for_phones(phones: Sequence[str]) -> List[int]:
    out: List[int] = []
    for phone in phones:
        code = STRESS_DIGITS.get(phone[-1:]) if phone else None
        if code is not None:
            out.append(code)
    return out


def _open_text(path: str):
    if path.endswith(".gz"):
        return gzip.open(path, "rt", encoding="utf-8")
    return open(path, "r", encoding="utf-8")


class Lexicon:
    def __init__(self, entries: Optional[Mapping[str, Iterable[RawPronunciation]]] = None):
        self._entries: Optional[Dict[str, List[Phones]]] = None
        if entries is not None:
            self.inject(entries)

    def __repr__(self) -> str:
        size = len(self._entries) if self._entries is not None else 0
        return f"Lexicon(loaded={self.is_loaded()}, words={size})"

    def __len__(self) -> int:
        return len(self._entries) if self._entries is not None else 0

    def is_loaded(self) -> bool:
        return self._entries is not None

    def inject(self, entries: Mapping[str, Iterable[RawPronunciation]]) -> None:
        if self._entries is not None:
            raise LexiconError("lexicon is already loaded")
        if not isinstance(entries, Mapping):
            raise LexiconError(f"expected a mapping of words, got {type(entries).__name__}")

        out: Dict[str, List[Phones]] = {}
        skipped = 0
        for word, pronunciations in entries.items():
            if not isinstance(word, str) or not word.strip():
                skipped += 1
                continue
            key = VARIANT_SUFFIX_RE.sub("", word.strip()).lower()
            if isinstance(pronunciations, str):
                pronunciations = [pronunciations]
            for raw in pronunciations:
                phones = tuple(raw.split()) if isinstance(raw, str) else tuple(str(p) for p in raw)
                if not phones:
                    skipped += 1
                    continue
                out.setdefault(key, []).append(phones)

        if skipped:
            logger.debug("lexicon: skipped %d malformed entries", skipped)
        self._entries = out
        logger.info("lexicon loaded: %d words", len(out))

    def pronunciations(self, word: str) -> List[Phones]:
        if self._entries is None:
            return []

        key = LOOKUP_STRIP_RE.sub("", normalize_apostrophes(word).lower())
        if not key:
            return []
        found = self._entries.get(key)
        if found:
            return list(found)

        # Archaic and contracted spellings ("ow'st") sometimes exist unmarked.
        bare = key.replace("'", "")
        found = self._entries.get(bare)
        if found:
            return list(found)

        if bare.startswith("un"):
            base = self._entries.get(bare[2:])
            if base:
                return [UN_PREFIX_PHONES + base[0]]
        return []

    def all_stress_patterns(self, word: str) -> List[List[int]]:
        return [stresses_for_phones(p) for p in self.pronunciations(word)]

    def stress_pattern(self, word: str) -> List[int]:
        patterns = self.all_stress_patterns(word)
        if not patterns:
            return []
        # Verse favors the fullest pronunciation; first listed wins ties.
        return max(patterns, key=len)

    def syllables(self, word: str) -> List[str]:
        """Split ``word`` into as many letter groups as its pronunciation has vowels.

        Phones do not align with letters, so the split is proportional by
        character count.
        """
        count = len(self.stress_pattern(word))
        letters = WORD_CHARS_RE.sub("", normalize_apostrophes(word))
        if count <= 0 or not letters:
            return []
        return [letters[s:e] for s, e in even_spans(len(letters), count)]

    @classmethod
    def from_cmudict(cls, path: str) -> "Lexicon":
        """Load the CMU Pronouncing Dictionary text format (optionally gzipped)."""
        entries: Dict[str, List[str]] = {}
        skipped = 0
        try:
            with _open_text(path) as fh:
                for line in fh:
                    if line.startswith(";;;"):
                        continue
                    line = line.split("#", 1)[0].strip()
                    if not line:
                        continue
                    parts = line.split()
                    if len(parts) < 2:
                        skipped += 1
                        continue
                    entries.setdefault(parts[0], []).append(" ".join(parts[1:]))
        except (OSError, UnicodeDecodeError) as exc:
            raise LexiconError(f"cannot read lexicon {path}: {exc}") from exc

        if skipped:
            logger.debug("lexicon %s: skipped %d lines without phones", path, skipped)
        return cls(entries)

    @classmethod
    def from_json(cls, path: str) -> "Lexicon":
        """Load ``{"word": ["PH1 PH2", ...]}`` JSON (optionally gzipped)."""
        try:
            with _open_text(path) as fh:
                raw = json.load(fh)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            raise LexiconError(f"cannot read lexicon {path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise LexiconError(f"lexicon {path} must be a JSON object")

        entries: Dict[str, List[RawPronunciation]] = {}
        for word, prons in raw.items():
            if isinstance(prons, str):
                prons = [prons]
            if not isinstance(prons, list):
                continue
            clean = [p for p in prons if isinstance(p, (str, list)) and p]
            if clean:
                entries[word] = clean
        return cls(entries)

    @classmethod
    def from_path(cls, path: str) -> "Lexicon":
        if not os.path.exists(path):
            raise LexiconError(f"lexicon not found: {path}")
        stem = path[:-3] if path.endswith(".gz") else path
        if stem.endswith(".json"):
            return cls.from_json(path)
        return cls.from_cmudict(path)

    @classmethod
    def from_pronouncing(cls) -> "Lexicon":
        """Build a lexicon from the CMU dictionary bundled with ``pronouncing``."""
        import pronouncing

        pronouncing.init_cmu()
        entries: Dict[str, List[str]] = {}
        for word, phones in pronouncing.pronunciations:
            entries.setdefault(word, []).append(phones)
        return cls(entries)

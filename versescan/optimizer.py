"""Constraint-scored stress assignment for a single line.

Every syllable of a polysyllabic word keeps its lexical stress; syllables of
monosyllabic words are flexible and may be promoted or demoted. Candidates
are produced by toggling up to ``MAX_SEARCH_POSITIONS`` flexible syllables on
top of the lexical baseline and scored against weighted constraints; the
highest score wins. Lines with more flexible syllables than that are searched
approximately.
"""
import logging
from dataclasses import dataclass
from typing import List, Sequence

from .heuristics import letters_only
from .tables import IAMBIC_PENTAMETER, RESIST_STRESS, RESIST_UNSTRESS

logger = logging.getLogger(__name__)

MAX_SEARCH_POSITIONS = 10

# -- Constraint weights --
LEXICAL_PENALTY = 100          # Polysyllabic word stress changed; must dominate.
RESIST_PENALTY = 30            # Stressed "the", unstressed "love".
LAPSE_PENALTY = 20             # Third and later unstressed syllable in a run.
CLASH_PENALTY = 10             # Third and later stressed syllable in a run.
ALTERNATION_BONUS = 8          # Adjacent syllables differ.
IAMB_PAIR_BONUS = 10           # (u, /) at an even/odd boundary.
TROCHEE_PAIR_BONUS = 2         # (/, u) at an even/odd boundary.
FINAL_STRESS_BONUS = 12
PENTAMETER_POSITION_BONUS = 5  # Ten-syllable lines only.
PENTAMETER_PERFECT_BONUS = 20
FOOT_COUNT_BONUS = 5


def pattern_to_string(pattern: Sequence[bool]) -> str:
    return "".join("/" if stressed else "u" for stressed in pattern)


def string_to_pattern(pattern: str) -> List[bool]:
    return [ch == "/" for ch in pattern]


_PENTAMETER_TEMPLATE = string_to_pattern(IAMBIC_PENTAMETER)


@dataclass
class SyllableMetadata:
    word: str
    syllable_index: int
    total_syllables: int
    lexical_stress: bool
    promotable: bool
    demotable: bool
    resist_stress: bool
    resist_unstress: bool

    @property
    def flexible(self) -> bool:
        return self.promotable or self.demotable


def metadata_for_word(word: str, stresses: Sequence[bool]) -> List[SyllableMetadata]:
    key = letters_only(word)
    mono = len(stresses) == 1
    return [
        SyllableMetadata(
            word=word,
            syllable_index=idx,
            total_syllables=len(stresses),
            lexical_stress=bool(stressed),
            promotable=mono,
            demotable=mono,
            resist_stress=mono and key in RESIST_STRESS,
            resist_unstress=mono and key in RESIST_UNSTRESS,
        )
        for idx, stressed in enumerate(stresses)
    ]


def build_metadata(words: Sequence[object]) -> List[SyllableMetadata]:
    """Flatten word scansions (``.word`` and ``.syllables[].stressed``) for one line."""
    out: List[SyllableMetadata] = []
    for ws in words:
        out.extend(metadata_for_word(ws.word, [s.stressed for s in ws.syllables]))
    return out


def score_pattern(pattern: Sequence[bool], syllables: Sequence[SyllableMetadata]) -> int:
    score = 0
    n = len(pattern)

    for stressed, syl in zip(pattern, syllables):
        if syl.total_syllables > 1 and stressed != syl.lexical_stress:
            score -= LEXICAL_PENALTY
        if syl.resist_stress and stressed:
            score -= RESIST_PENALTY
        if syl.resist_unstress and not stressed:
            score -= RESIST_PENALTY

    weak_run = 0
    strong_run = 0
    for stressed in pattern:
        if stressed:
            strong_run += 1
            weak_run = 0
            if strong_run >= 3:
                score -= CLASH_PENALTY
        else:
            weak_run += 1
            strong_run = 0
            if weak_run >= 3:
                score -= LAPSE_PENALTY

    for idx in range(1, n):
        if pattern[idx] != pattern[idx - 1]:
            score += ALTERNATION_BONUS

    for idx in range(0, n - 1, 2):
        first, second = pattern[idx], pattern[idx + 1]
        if not first and second:
            score += IAMB_PAIR_BONUS
        elif first and not second:
            score += TROCHEE_PAIR_BONUS

    if n > 0 and pattern[-1]:
        score += FINAL_STRESS_BONUS

    if n == len(_PENTAMETER_TEMPLATE):
        matches = sum(1 for got, want in zip(pattern, _PENTAMETER_TEMPLATE) if got == want)
        score += matches * PENTAMETER_POSITION_BONUS
        if matches == n:
            score += PENTAMETER_PERFECT_BONUS

    stresses = sum(1 for stressed in pattern if stressed)
    if 4 <= stresses <= 6 and 8 <= n <= 12:
        score += FOOT_COUNT_BONUS

    return score


def search_positions(syllables: Sequence[SyllableMetadata], limit: int = MAX_SEARCH_POSITIONS) -> List[int]:
    flexible = [idx for idx, syl in enumerate(syllables) if syl.flexible]
    if len(flexible) <= limit:
        return flexible

    # Too many to enumerate: favor positions that repeat a neighbor's value.
    base = [syl.lexical_stress for syl in syllables]
    breaking: List[int] = []
    other: List[int] = []
    for pos in flexible:
        same_prev = pos > 0 and base[pos - 1] == base[pos]
        same_next = pos < len(base) - 1 and base[pos + 1] == base[pos]
        if same_prev or same_next:
            breaking.append(pos)
        else:
            other.append(pos)
    return (breaking + other)[:limit]


def optimize_stress(syllables: Sequence[SyllableMetadata]) -> List[bool]:
    if not syllables:
        return []

    baseline = [syl.lexical_stress for syl in syllables]
    positions = search_positions(syllables)

    best = baseline
    best_score = score_pattern(baseline, syllables)
    combos = 1 << len(positions)
    for combo in range(1, combos):
        candidate = list(baseline)
        for bit, pos in enumerate(positions):
            if combo & (1 << bit):
                candidate[pos] = not candidate[pos]
        score = score_pattern(candidate, syllables)
        if score > best_score:
            best, best_score = candidate, score

    logger.debug(
        "optimizer: %d syllables, %d flexible searched, %d candidates, best score %d",
        len(syllables), len(positions), combos, best_score,
    )
    return best

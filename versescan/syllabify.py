"""Split a word's surface text into a given number of syllables.

Every strategy returns contiguous slices of the input, so the pieces always
concatenate back to the word. When the structural split cannot produce the
requested count the word is divided proportionally by character count: a
deterministic approximation, not a phonetic claim.
"""
import re
from typing import List, Optional, Sequence

from .heuristics import VOWEL_GROUP_RE, even_spans, normalize_apostrophes
from .tables import SYLLABLE_OVERRIDES

SURFACE_STRIP_RE = re.compile(r"[^A-Za-z']+")


def surface_text(word: str) -> str:
    """Letters and apostrophes of ``word`` in their original case."""
    return SURFACE_STRIP_RE.sub("", normalize_apostrophes(word))


def _slice_at(word: str, boundaries: Sequence[int]) -> List[str]:
    cuts = [0] + list(boundaries) + [len(word)]
    return [word[cuts[i]:cuts[i + 1]] for i in range(len(cuts) - 1)]


def split_proportionally(word: str, target: int) -> List[str]:
    return [word[s:e] for s, e in even_spans(len(word), target)]


def split_at_nuclei(word: str, target: int) -> Optional[List[str]]:
    """Split between vowel groups, or ``None`` if the group count differs.

    A single consonant between nuclei opens the next syllable ("ri-ver");
    longer clusters are halved ("sum-mer", "chil-dren").
    """
    lower = word.lower()
    groups = list(VOWEL_GROUP_RE.finditer(lower))
    if len(groups) == target + 1 and target >= 1:
        last = groups[-1]
        # Silent final "e" ("compare") and "-ed" ("diverged").
        silent_e = last.group(0) == "e" and last.end() == len(lower)
        silent_ed = last.group(0) == "e" and lower.endswith("ed") and last.end() == len(lower) - 1
        if silent_e or silent_ed:
            groups = groups[:-1]
    if len(groups) != target or not groups:
        return None

    boundaries: List[int] = []
    for left, right in zip(groups, groups[1:]):
        run_start = left.end()
        run = right.start() - run_start
        boundaries.append(run_start if run <= 1 else run_start + run // 2)
    return _slice_at(word, boundaries)


def _override_split(word: str, target: int) -> Optional[List[str]]:
    pieces = SYLLABLE_OVERRIDES.get(word.lower())
    if not pieces or len(pieces) != target or "".join(pieces) != word.lower():
        return None
    boundaries: List[int] = []
    pos = 0
    for piece in pieces[:-1]:
        pos += len(piece)
        boundaries.append(pos)
    return _slice_at(word, boundaries)


def split_syllables(word: str, target: int) -> List[str]:
    text = surface_text(word)
    if not text:
        return []
    target = max(1, min(int(target), len(text)))
    if target == 1:
        return [text]

    # Quotation apostrophes at the edges ride along with the outer syllables.
    core = text.strip("'")
    lead = text[:len(text) - len(text.lstrip("'"))]
    tail = text[len(lead) + len(core):]
    if len(core) >= target:
        for strategy in (_override_split, split_at_nuclei):
            pieces = strategy(core, target)
            if pieces is not None:
                pieces[0] = lead + pieces[0]
                pieces[-1] = pieces[-1] + tail
                return pieces
    return split_proportionally(text, target)

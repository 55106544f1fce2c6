"""Poetic syllable counts.

Verse often performs a word with fewer syllables than the dictionary gives
it ("wandering" as "wand'ring", "heaven" as "heav'n"). This module decides
the performed count and shrinks a stress pattern to match.
"""
from typing import Optional

from .heuristics import clean_word, count_vowel_groups, estimate_syllables
from .tables import KNOWN_CONTRACTIONS, POETIC_SYLLABLE_COUNT


def apostrophe_syllable_count(word: str) -> Optional[int]:
    """Syllable count implied by an elision apostrophe, or ``None``.

    Possessive ``'s`` never reduces a word. Only apostrophes between letters
    mark an elision; leading and trailing ones are usually quotation marks
    unless the form is a known contraction.
    """
    lower = clean_word(word)
    if "'" not in lower or lower.endswith("'s"):
        return None

    known = KNOWN_CONTRACTIONS.get(lower)
    if known:
        return known

    inner = lower.strip("'")
    if "'" not in inner:
        return None

    # Archaic second person ("ow'st", "wander'st"): the ending adds nothing.
    if inner.endswith("'st"):
        return max(1, estimate_syllables(inner[:-3]))

    # Each apostrophe stands for a dropped vowel: restore it, count, then
    # take one syllable back per apostrophe.
    elided = inner.count("'")
    restored = count_vowel_groups(inner.replace("'", "e"))
    return max(1, restored - elided)


def poetic_syllable_count(word: str) -> Optional[int]:
    count = apostrophe_syllable_count(word)
    if count is not None:
        return count
    return POETIC_SYLLABLE_COUNT.get(clean_word(word).strip("'"))


def reduce_pattern(pattern: str, target: int) -> str:
    """Shrink ``pattern`` to ``target`` syllables without losing its stress."""
    if target <= 0 or len(pattern) <= target:
        return pattern

    stress_pos = pattern.find("/")
    if stress_pos < 0:
        return "u" * target

    if target == 1:
        return "/"

    if target == 2:
        if stress_pos * 2 <= len(pattern):
            return "/u"
        return "u/"

    size = len(pattern)
    out = []
    for idx in range(target):
        start = (idx * size) // target
        end = ((idx + 1) * size) // target
        out.append("/" if "/" in pattern[start:end] else "u")
    return "".join(out)


def adjust_pattern(word: str, pattern: str) -> str:
    count = poetic_syllable_count(word)
    if count is not None and count < len(pattern):
        return reduce_pattern(pattern, count)
    return pattern


import re
from typing import List, Tuple

VOWEL_GROUP_RE = re.compile(r"[aeiouy]+", re.IGNORECASE)
NON_ALPHA_RE = re.compile(r"[^a-z']+")
CURLY_APOSTROPHE_RE = re.compile(r"[‘’ʼ]")

UNSTRESSED_FUNCTION_WORDS = {
    "a",
    "an",
    "and",
    "as",
    "at",
    "but",
    "by",
    "for",
    "from",
    "if",
    "in",
    "nor",
    "of",
    "on",
    "or",
    "so",
    "than",
    "the",
    "to",
    "with",
    "yet",
}

# Verb-forming prefixes: two-syllable words starting with these tend to
# stress the root (be-LIEVE, dis-MAY).
VERB_PREFIXES = ("be", "de", "dis", "en", "ex", "in", "mis", "pre", "re", "un")

PENULT_STRESS_SUFFIXES = ("ity", "tion", "sion")
WEAK_TAIL_SUFFIXES = ("ful", "less", "ness")

# Adjectives where "-ed" is traditionally syllabic even after non-t/d consonants.
SYLLABIC_ED_ADJECTIVES = {
    "aged", "beloved", "blessed", "crabbed", "crooked", "cursed",
    "dogged", "jagged", "learned", "naked", "ragged", "rugged",
    "sacred", "wicked", "winged", "wretched",
}


def normalize_apostrophes(text: str) -> str:
    return CURLY_APOSTROPHE_RE.sub("'", text)


def clean_word(word: str) -> str:
    """Lower-case letters and apostrophes, e.g. "O'er," -> "o'er"."""
    return NON_ALPHA_RE.sub("", normalize_apostrophes(word).lower())


def letters_only(word: str) -> str:
    return clean_word(word).replace("'", "")


def count_vowel_groups(word: str) -> int:
    return len(VOWEL_GROUP_RE.findall(word))


def estimate_syllables(word: str) -> int:
    clean = letters_only(word)
    if not clean:
        return 0
    if len(clean) <= 3:
        return 1

    syllables = count_vowel_groups(clean)

    if clean.endswith("e") and not clean.endswith(("le", "ye")) and syllables > 1:
        syllables -= 1
    # Silent past-tense "-ed" after consonants other than t/d ("entwined"),
    # unless the adjective keeps it ("naked") or the "e" belongs to a base
    # "-le" ("trampled").
    elif (
        clean.endswith("ed")
        and syllables > 1
        and clean[-3] not in "aeiouy"
        and clean[-3] not in "td"
        and clean not in SYLLABIC_ED_ADJECTIVES
        and not (
            clean.endswith("led")
            and not clean.endswith("lled")
            and len(clean) >= 5
            and clean[-4] not in "aeiouy"
        )
    ):
        syllables -= 1

    return max(1, syllables)


def _build_pattern(syllables: int, *stress_indexes: int) -> str:
    if syllables <= 0:
        return ""
    pattern = ["u"] * syllables
    for idx in stress_indexes:
        pattern[max(0, min(idx, syllables - 1))] = "/"
    return "".join(pattern)


def estimate_stress_pattern(word: str) -> str:
    clean = clean_word(word)
    if not letters_only(clean):
        return ""

    syllables = estimate_syllables(clean)

    if syllables == 1:
        if clean in UNSTRESSED_FUNCTION_WORDS:
            return "u"
        return "/"

    if syllables == 2:
        for prefix in VERB_PREFIXES:
            if clean.startswith(prefix) and len(clean) > len(prefix) + 2:
                return _build_pattern(2, 1)
        # Nominal endings (-er, -ly, -ness, -ow, -y) and the default agree.
        return _build_pattern(2, 0)

    if syllables == 3:
        if clean.endswith(PENULT_STRESS_SUFFIXES):
            return _build_pattern(3, 1)
        if clean.endswith("ly") or clean.endswith(WEAK_TAIL_SUFFIXES):
            return _build_pattern(3, 0)
        return _build_pattern(3, 1)

    if syllables == 4:
        if clean.endswith(("tion", "sion")):
            return _build_pattern(4, 2)
        if clean.endswith("ly"):
            return _build_pattern(4, 0)
        return _build_pattern(4, 1)

    return _build_pattern(syllables, syllables - 3, syllables - 1)


def even_spans(length: int, target: int) -> List[Tuple[int, int]]:
    if length <= 0:
        return []
    target = max(1, min(int(target), int(length)))
    out: List[Tuple[int, int]] = []
    for idx in range(target):
        start = (idx * length) // target
        end = ((idx + 1) * length) // target
        if end <= start:
            end = min(length, start + 1)
        out.append((start, end))
    return out

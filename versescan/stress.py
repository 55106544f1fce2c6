from typing import Optional, Sequence, Tuple

from .heuristics import clean_word, estimate_stress_pattern
from .lexicon import Lexicon
from .tables import STRESS_EXCEPTIONS

SOURCE_EXCEPTION = "exception"
SOURCE_LEXICON = "lexicon"
SOURCE_HEURISTIC = "heuristic"


def stress_codes_to_pattern(codes: Sequence[int]) -> str:
    # Secondary stress counts as stress.
    return "".join("/" if code > 0 else "u" for code in codes)


def resolve_stress_with_source(word: str, lexicon: Optional[Lexicon] = None) -> Tuple[str, str]:
    """Return ``(pattern, source)`` for ``word``.

    Order: manual exception table, then the lexicon (when loaded), then the
    heuristic estimate. ``source`` names the step that answered.

    Each step tries the full form first ("'tis") and then the form with
    quotation apostrophes stripped from its edges ("'the" -> "the").
    """
    key = clean_word(word)
    bare = key.strip("'") or key
    keys = (key,) if bare == key else (key, bare)

    for candidate in keys:
        pattern = STRESS_EXCEPTIONS.get(candidate)
        if pattern:
            return pattern, SOURCE_EXCEPTION

    if lexicon is not None and lexicon.is_loaded():
        for candidate in keys:
            codes = lexicon.stress_pattern(candidate)
            if codes:
                return stress_codes_to_pattern(codes), SOURCE_LEXICON

    return estimate_stress_pattern(bare), SOURCE_HEURISTIC


def resolve_stress(word: str, lexicon: Optional[Lexicon] = None) -> str:
    return resolve_stress_with_source(word, lexicon)[0]

from typing import List, Sequence, Tuple

from .tables import STANDARD_METERS, StandardMeter

IAMB = "iamb"
TROCHEE = "trochee"
SPONDEE = "spondee"
PYRRHIC = "pyrrhic"
ANAPEST = "anapest"
DACTYL = "dactyl"

FOOT_PATTERNS = {
    IAMB: "u/",
    TROCHEE: "/u",
    SPONDEE: "//",
    PYRRHIC: "uu",
    ANAPEST: "uu/",
    DACTYL: "/uu",
}

# Three-syllable feet are tried first; otherwise "uu" and "/u" would always
# shadow "uu/" and "/uu".
FOOT_ORDER: Tuple[str, ...] = (ANAPEST, DACTYL, IAMB, TROCHEE, SPONDEE, PYRRHIC)

# Order used by earlier releases. Anapests and dactyls are never reported.
LEGACY_FOOT_ORDER: Tuple[str, ...] = (IAMB, TROCHEE, SPONDEE, PYRRHIC, ANAPEST, DACTYL)

MIN_CLASSIFIABLE_LENGTH = 4
CATALECTIC_FACTOR = 0.95


def identify_feet(pattern: str, order: Sequence[str] = FOOT_ORDER) -> List[str]:
    """Greedy left-to-right foot segmentation; a leftover syllable is skipped."""
    feet: List[str] = []
    idx = 0
    while idx < len(pattern):
        for name in order:
            template = FOOT_PATTERNS[name]
            if pattern.startswith(template, idx):
                feet.append(name)
                idx += len(template)
                break
        else:
            idx += 1
    return feet


def meter_match(pattern: str, template: str) -> float:
    if not pattern or not template:
        return 0.0
    if len(pattern) == len(template):
        same = sum(1 for a, b in zip(pattern, template) if a == b)
        return same / float(len(pattern))
    if abs(len(pattern) - len(template)) == 1:
        # Catalectic or hypermetrical line: compare the shared prefix.
        shorter = min(len(pattern), len(template))
        same = sum(1 for a, b in zip(pattern, template) if a == b)
        return (same / float(shorter)) * CATALECTIC_FACTOR
    return 0.0


def best_meter(pattern: str, meters: Sequence[StandardMeter] = STANDARD_METERS) -> Tuple[str, float]:
    """Best standard meter clearing its own threshold, as ``(name, score)``."""
    if len(pattern) < MIN_CLASSIFIABLE_LENGTH:
        return "", 0.0

    best_name = ""
    best_score = 0.0
    for meter in meters:
        score = meter_match(pattern, meter.pattern)
        if score >= meter.min_match and (not best_name or score > best_score):
            best_name, best_score = meter.name, score
    return best_name, best_score


def classify_meter(pattern: str) -> str:
    return best_meter(pattern)[0]

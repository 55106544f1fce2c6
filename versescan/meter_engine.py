import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from .elision import adjust_pattern, reduce_pattern
from .feet import FOOT_ORDER, classify_meter, identify_feet
from .heuristics import normalize_apostrophes
from .lexicon import Lexicon
from .optimizer import build_metadata, optimize_stress, pattern_to_string
from .stress import SOURCE_EXCEPTION, resolve_stress_with_source
from .syllabify import split_syllables, surface_text

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"\S+")
FREE_VERSE = "free verse"


@dataclass(frozen=True)
class Syllable:
    text: str
    stressed: bool


@dataclass
class WordScansion:
    word: str
    syllables: List[Syllable]
    stress_pattern: str


@dataclass
class LineScansion:
    line_index: int
    text: str
    words: List[WordScansion]
    full_pattern: str
    feet: List[str] = field(default_factory=list)
    meter_type: str = ""
    is_regular: bool = False


@dataclass
class PoemAnalysis:
    lines: List[LineScansion]
    dominant_meter: str
    regularity_score: int


@dataclass
class StressedSyllableInstance:
    text: str
    start_offset: int
    end_offset: int
    stressed: bool


TokenScan = Tuple[Tuple[int, int], WordScansion]


def _with_stresses(ws: WordScansion, stresses: Sequence[bool]) -> WordScansion:
    syllables = [Syllable(s.text, bool(flag)) for s, flag in zip(ws.syllables, stresses)]
    return WordScansion(word=ws.word, syllables=syllables, stress_pattern=pattern_to_string(stresses))


def _same_char(a: str, b: str) -> bool:
    return normalize_apostrophes(a).lower() == normalize_apostrophes(b).lower()


def _syllable_spans(token: str, syllables: Sequence[Syllable]) -> List[Tuple[int, int]]:
    """Character spans of each syllable inside the raw token text.

    Syllable texts are the token's letters and apostrophes in order, so each
    one is located by walking the token and skipping punctuation.
    """
    spans: List[Tuple[int, int]] = []
    pos = 0
    for syl in syllables:
        start = end = -1
        for ch in syl.text:
            while pos < len(token) and not _same_char(token[pos], ch):
                pos += 1
            if pos >= len(token):
                break
            if start < 0:
                start = pos
            pos += 1
            end = pos
        if start < 0:
            break
        spans.append((start, end))
    return spans


class ScansionEngine:
    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        dict_path: Optional[str] = None,
        foot_order: Sequence[str] = FOOT_ORDER,
    ):
        self._lexicon = lexicon
        self._dict_path = dict_path
        self.foot_order = tuple(foot_order)

    @property
    def lexicon(self) -> Optional[Lexicon]:
        if self._lexicon is None and self._dict_path:
            self._lexicon = Lexicon.from_path(self._dict_path)
        return self._lexicon

    def analyze_word(self, token: str) -> Optional[WordScansion]:
        """Lexical scansion of one token, before any metrical adjustment."""
        text = surface_text(token)
        if not text.replace("'", ""):
            return None

        lexicon = self.lexicon
        pattern, source = resolve_stress_with_source(text, lexicon)
        if not pattern:
            return None
        if source != SOURCE_EXCEPTION:
            pattern = adjust_pattern(text, pattern)
        if len(pattern) > len(text):
            pattern = reduce_pattern(pattern, len(text))

        pieces = split_syllables(text, len(pattern))
        syllables = [Syllable(piece, flag == "/") for piece, flag in zip(pieces, pattern)]
        return WordScansion(word=text, syllables=syllables, stress_pattern=pattern)

    def _scan_tokens(self, line: str) -> List[TokenScan]:
        scanned: List[TokenScan] = []
        for m in TOKEN_RE.finditer(line):
            ws = self.analyze_word(m.group(0))
            if ws is not None and ws.syllables:
                scanned.append(((m.start(), m.end()), ws))
        if not scanned:
            return scanned

        metadata = build_metadata([ws for _, ws in scanned])
        stresses = optimize_stress(metadata)
        out: List[TokenScan] = []
        pos = 0
        for span, ws in scanned:
            count = len(ws.syllables)
            out.append((span, _with_stresses(ws, stresses[pos:pos + count])))
            pos += count
        return out

    def _line_from_tokens(self, line: str, line_index: int, scanned: Sequence[TokenScan]) -> LineScansion:
        words = [ws for _, ws in scanned]
        full_pattern = "".join(ws.stress_pattern for ws in words)
        feet = identify_feet(full_pattern, self.foot_order)
        meter_type = classify_meter(full_pattern)
        return LineScansion(
            line_index=line_index,
            text=line,
            words=words,
            full_pattern=full_pattern,
            feet=feet,
            meter_type=meter_type,
            is_regular=bool(meter_type),
        )

    def analyze_line(self, line: str, line_index: int = 0) -> LineScansion:
        text = line.strip()
        return self._line_from_tokens(text, line_index, self._scan_tokens(text))

    def analyze_scansion(self, text: str) -> PoemAnalysis:
        lines: List[LineScansion] = []
        for idx, raw in enumerate((text or "").split("\n")):
            if not raw.strip():
                continue
            lines.append(self.analyze_line(raw, line_index=idx))

        counts: Dict[str, int] = {}
        for ls in lines:
            if ls.meter_type:
                counts[ls.meter_type] = counts.get(ls.meter_type, 0) + 1

        dominant = FREE_VERSE
        top = 0
        for meter, count in counts.items():
            if count > top:
                dominant, top = meter, count

        regular = sum(1 for ls in lines if ls.is_regular)
        score = int(round(100.0 * regular / len(lines))) if lines else 0
        logger.debug("poem: %d lines, dominant %r, regularity %d", len(lines), dominant, score)
        return PoemAnalysis(lines=lines, dominant_meter=dominant, regularity_score=score)

    def scansion_instances(self, text: str, line_index: Optional[int] = None) -> List[StressedSyllableInstance]:
        """Syllables of every scanned line, addressed by offsets into ``text``."""
        instances: List[StressedSyllableInstance] = []
        line_start = 0
        for idx, raw in enumerate((text or "").split("\n")):
            if raw.strip() and (line_index is None or idx == line_index):
                for (tok_start, tok_end), ws in self._scan_tokens(raw):
                    token = raw[tok_start:tok_end]
                    for syl, (s, e) in zip(ws.syllables, _syllable_spans(token, ws.syllables)):
                        start = line_start + tok_start + s
                        end = line_start + tok_start + e
                        instances.append(StressedSyllableInstance(text[start:end], start, end, syl.stressed))
            line_start += len(raw) + 1
        return instances


def styled_syllables(line: LineScansion) -> List[Dict[str, object]]:
    """Flat display list of a line's syllables with a space entry between words."""
    out: List[Dict[str, object]] = []
    for idx, ws in enumerate(line.words):
        if idx:
            out.append({"text": " ", "stressed": False, "is_space": True})
        for syl in ws.syllables:
            out.append({"text": syl.text, "stressed": syl.stressed, "is_space": False})
    return out


def analyze_scansion(text: str, lexicon: Optional[Lexicon] = None) -> PoemAnalysis:
    return ScansionEngine(lexicon=lexicon).analyze_scansion(text)


def get_scansion_instances(
    text: str, line_index: Optional[int] = None, lexicon: Optional[Lexicon] = None
) -> List[StressedSyllableInstance]:
    return ScansionEngine(lexicon=lexicon).scansion_instances(text, line_index)
